import json

from .particles import DEFAULT_PRESET, PRESET_ORDER, PRESETS, cycle_table, get_preset, js, next_preset


# ##################################################################
# test twelve presets
def test_twelve_presets():
    assert PRESET_ORDER == [
        "network", "bubbles", "stars", "nebula", "comet", "snow",
        "confetti", "matrix", "aurora", "cloud", "sparkles", "galaxy",
    ]
    for name, preset in PRESETS.items():
        assert preset["particles"]["number"]["value"] > 0, name
        assert "interactivity" in preset, name


# ##################################################################
# test unknown preset falls back
def test_unknown_preset_falls_back():
    assert get_preset("nope") is PRESETS[DEFAULT_PRESET]
    assert get_preset("snow") is PRESETS["snow"]


# ##################################################################
# test next preset wraps
def test_next_preset_wraps():
    assert next_preset(0) == (1, "bubbles")
    assert next_preset(len(PRESET_ORDER) - 1) == (0, "network")


# ##################################################################
# test cycle table wraps
# the style button walks every preset once and returns to the start
def test_cycle_table_wraps():
    table = cycle_table()
    seen = [DEFAULT_PRESET]
    while len(seen) <= len(PRESET_ORDER):
        seen.append(table[seen[-1]])
    assert seen[:-1] == PRESET_ORDER
    assert seen[-1] == DEFAULT_PRESET


# ##################################################################
# test page script embeds presets
# the script cycles with the table computed here
def test_page_script_embeds_presets():
    script = js()
    assert f"const NEXT = {json.dumps(cycle_table())};" in script
    assert json.dumps(PRESETS["galaxy"]) in script
    assert "window.particlesJS" in script
