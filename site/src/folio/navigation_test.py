from .navigation import SECTIONS, SectionBox, active_section, html
from .theme import ThemeContext


BOXES = [
    SectionBox("home", 0, 800),
    SectionBox("about", 800, 600),
    SectionBox("skills", 1400, 700),
]


# ##################################################################
# test active section uses offset probe
# the probe sits 100px below the scroll position
def test_active_section_uses_offset_probe():
    assert active_section(BOXES, 0) == "home"
    assert active_section(BOXES, 699) == "home"
    assert active_section(BOXES, 700) == "about"
    assert active_section(BOXES, 1300) == "skills"


# ##################################################################
# test active section outside every range
def test_active_section_outside_every_range():
    assert active_section(BOXES, 2000) is None
    assert active_section([], 0) is None


# ##################################################################
# test overlapping sections last match wins
def test_overlapping_sections_last_match_wins():
    boxes = [SectionBox("outer", 0, 1000), SectionBox("inner", 200, 100)]
    assert active_section(boxes, 150) == "inner"
    assert active_section(boxes, 250) == "outer"


# ##################################################################
# test menu links every section
def test_menu_links_every_section():
    page = html("NB", ThemeContext())
    for section_id, label in SECTIONS:
        assert f'<a href="#{section_id}">{label}</a>' in page
    assert 'class="theme-toggle"' in page
    assert 'href="#main"' in page
