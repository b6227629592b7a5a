import pytest

from .reveal import (
    FADE_IN_THRESHOLD,
    SKILL_BAR_THRESHOLD,
    SKILL_WIDTH_PROPERTY,
    ElementTarget,
    RevealOnScroll,
    SkillBarReveal,
    js,
)


# ##################################################################
# test threshold boundary is inclusive
# exactly the threshold counts as intersecting, just below does not
def test_threshold_boundary_is_inclusive():
    below = ElementTarget("below")
    exact = ElementTarget("exact")
    observer = RevealOnScroll()
    observer.observe([below, exact])

    revealed = observer.on_visibility([(below, 0.099), (exact, FADE_IN_THRESHOLD)])

    assert revealed == [exact]
    assert exact.revealed
    assert not below.revealed


# ##################################################################
# test reveal is monotonic
# leaving and re-entering the viewport never un-reveals a target
def test_reveal_is_monotonic():
    target = ElementTarget("card")
    observer = RevealOnScroll()
    observer.observe([target])

    observer.on_visibility([(target, 0.6)])
    for fraction in [0.0, 0.05, 1.0, 0.0, 0.3, 0.0]:
        observer.on_visibility([(target, fraction)])
        assert target.revealed


# ##################################################################
# test revealed targets are released
# a revealed target leaves the observation set and is not re-added
def test_revealed_targets_are_released():
    first = ElementTarget("first")
    second = ElementTarget("second")
    observer = RevealOnScroll()
    observer.observe([first, second])

    observer.on_visibility([(first, 1.0)])
    assert observer.watching == [second]

    observer.observe([first])
    assert observer.watching == [second]


# ##################################################################
# test unobserved targets are ignored
def test_unobserved_targets_are_ignored():
    stranger = ElementTarget("stranger")
    observer = RevealOnScroll()

    assert observer.on_visibility([(stranger, 1.0)]) == []
    assert not stranger.revealed


# ##################################################################
# test skill bar uses higher threshold
def test_skill_bar_uses_higher_threshold():
    skill = ElementTarget("css", proficiency="90%")
    observer = SkillBarReveal()
    observer.observe([skill])

    observer.on_visibility([(skill, 0.49)])
    assert not skill.revealed
    assert SKILL_WIDTH_PROPERTY not in skill.style

    observer.on_visibility([(skill, SKILL_BAR_THRESHOLD)])
    assert skill.revealed


# ##################################################################
# test skill width written once
# proficiency lands on the bar at first reveal and is never rewritten
def test_skill_width_written_once():
    skill = ElementTarget("flutter", proficiency="88%")
    observer = SkillBarReveal()
    observer.observe([skill])

    observer.on_visibility([(skill, 0.8)])
    skill.proficiency = "12%"
    for fraction in [0.0, 1.0, 0.7, 0.0, 1.0]:
        observer.on_visibility([(skill, fraction)])
    observer.observe([skill])
    observer.on_visibility([(skill, 1.0)])

    assert skill.style[SKILL_WIDTH_PROPERTY] == "88%"
    assert skill.style_writes == 1


# ##################################################################
# test skill card faded in first still fills
# the fade-in observer revealing a card does not stop the bar filling
def test_skill_card_faded_in_first_still_fills():
    card = ElementTarget("java", proficiency="85%")
    fade = RevealOnScroll()
    bars = SkillBarReveal()
    fade.observe([card])
    bars.observe([card])

    fade.on_visibility([(card, 0.2)])
    bars.on_visibility([(card, 0.2)])
    assert card.revealed
    assert SKILL_WIDTH_PROPERTY not in card.style

    bars.on_visibility([(card, 0.5)])
    assert card.style[SKILL_WIDTH_PROPERTY] == "85%"


# ##################################################################
# test batch reveals every qualifying target
def test_batch_reveals_every_qualifying_target():
    targets = [ElementTarget(str(i)) for i in range(5)]
    observer = RevealOnScroll()
    observer.observe(targets)

    revealed = observer.on_visibility([(t, 0.1 * i) for i, t in enumerate(targets)])

    assert {t.name for t in revealed} == {"1", "2", "3", "4"}
    assert observer.watching == [targets[0]]


# ##################################################################
# test invalid threshold rejected
@pytest.mark.parametrize("threshold", [-0.1, 1.5])
def test_invalid_threshold_rejected(threshold):
    with pytest.raises(ValueError):
        RevealOnScroll(threshold)


# ##################################################################
# test page script uses both thresholds
def test_page_script_uses_both_thresholds():
    script = js()
    assert "threshold: 0.1" in script
    assert "threshold: 0.5" in script
    assert f"'{SKILL_WIDTH_PROPERTY}'" in script
    assert "unobserve" in script
