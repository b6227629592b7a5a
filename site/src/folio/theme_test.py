import pytest

from .theme import DARK, LIGHT, ThemeContext, html, js


# ##################################################################
# test toggle alternates
def test_toggle_alternates():
    theme = ThemeContext()
    assert theme.current == DARK
    assert [theme.toggle() for _ in range(4)] == [LIGHT, DARK, LIGHT, DARK]


# ##################################################################
# test icon follows theme
# sun while dark, moon while light
def test_icon_follows_theme():
    theme = ThemeContext(LIGHT)
    assert theme.icon == "fas fa-moon"
    assert 'class="fas fa-moon"' in html(theme)

    theme.toggle()
    assert theme.icon == "fas fa-sun"


# ##################################################################
# test unknown theme rejected
def test_unknown_theme_rejected():
    with pytest.raises(ValueError):
        ThemeContext("sepia")


# ##################################################################
# test page script keeps theme in memory
def test_page_script_keeps_theme_in_memory():
    script = js()
    assert "window.currentTheme" in script
    assert "localStorage" not in script
