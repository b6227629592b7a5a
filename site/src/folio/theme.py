"""Light/dark theme context and the in-page theme toggle."""

DARK = "dark"
LIGHT = "light"
THEMES = (DARK, LIGHT)


class ThemeContext:
    """Current theme, created at startup and changed only through toggle().

    Held in memory only; nothing is persisted.
    """

    def __init__(self, theme: str = DARK):
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self._theme = theme

    @property
    def current(self) -> str:
        return self._theme

    def toggle(self) -> str:
        self._theme = LIGHT if self._theme == DARK else DARK
        return self._theme

    @property
    def icon(self) -> str:
        # the toggle shows the theme you would switch to
        return "fas fa-sun" if self._theme == DARK else "fas fa-moon"


def css() -> str:
    return """
.theme-toggle {
    background: none;
    border: 1px solid var(--border-color);
    color: var(--text-secondary);
    cursor: pointer;
    padding: 0.375rem 0.5rem;
    border-radius: 6px;
    font-size: 1rem;
    transition: all 0.2s;
}
.theme-toggle:hover { border-color: var(--accent); color: var(--text-primary); }
"""


def html(theme: ThemeContext) -> str:
    return f"""<button class="theme-toggle" aria-label="Toggle theme">
                <i class="{theme.icon}"></i>
            </button>"""


def js() -> str:
    return """
// Theme toggle (kept in page memory only)
(function() {
    document.addEventListener('DOMContentLoaded', function() {
        const root = document.documentElement;
        window.currentTheme = root.getAttribute('data-theme') || 'dark';
        const toggle = document.querySelector('.theme-toggle');
        if (!toggle) return;

        const updateIcon = function() {
            const icon = toggle.querySelector('i');
            if (icon) icon.className = window.currentTheme === 'dark' ? 'fas fa-sun' : 'fas fa-moon';
        };
        updateIcon();

        toggle.addEventListener('click', function() {
            window.currentTheme = window.currentTheme === 'dark' ? 'light' : 'dark';
            root.setAttribute('data-theme', window.currentTheme);
            updateIcon();
        });
    });
})();
"""
