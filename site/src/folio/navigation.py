"""Header navigation: section links, mobile menu, and active-section highlighting."""

import html as _html
from typing import Iterable, NamedTuple

from . import theme as _theme


SECTIONS = [
    ("home", "Home"),
    ("about", "About"),
    ("skills", "Skills"),
    ("projects", "Projects"),
    ("resume", "Resume"),
    ("contact", "Contact"),
]

# scroll position is probed this far below the top of the viewport
SCROLL_OFFSET = 100


class SectionBox(NamedTuple):
    id: str
    top: int
    height: int


def active_section(sections: Iterable[SectionBox], scroll_y: int, offset: int = SCROLL_OFFSET) -> str | None:
    """Return the id of the section under ``scroll_y + offset``.

    Sections are half-open ranges [top, top + height). When sections overlap the
    last match wins, as it does in the page script.
    """
    probe = scroll_y + offset
    active = None
    for section in sections:
        if section.top <= probe < section.top + section.height:
            active = section.id
    return active


def css() -> str:
    return """
.skip-to-main {
    position: absolute;
    left: -9999px;
    top: 0;
    background: var(--accent);
    color: var(--bg-primary);
    padding: var(--space-sm) var(--space-md);
    z-index: 2000;
}
.skip-to-main:focus { left: var(--space-md); }

.header {
    position: fixed;
    top: 0;
    left: 0;
    right: 0;
    height: var(--nav-height);
    background: var(--bg-secondary);
    border-bottom: 1px solid var(--border-color);
    z-index: 1000;
    backdrop-filter: blur(12px);
}
.nav-container {
    max-width: var(--max-width);
    margin: 0 auto;
    padding: 0 var(--space-xl);
    display: flex;
    align-items: center;
    justify-content: space-between;
    height: 100%;
}
.logo {
    font-family: var(--font-display);
    font-size: 1.25rem;
    font-weight: 700;
    color: var(--accent);
}
.nav-menu {
    display: flex;
    align-items: center;
    gap: var(--space-lg);
    list-style: none;
}
.nav-menu a {
    color: var(--text-secondary);
    font-size: 0.875rem;
    font-weight: 500;
    transition: color 0.2s;
}
.nav-menu a:hover, .nav-menu a.active { color: var(--accent); }

.mobile-menu-toggle {
    display: none;
    background: none;
    border: none;
    color: var(--text-primary);
    font-size: 1.5rem;
    cursor: pointer;
}
@media (max-width: 768px) {
    .mobile-menu-toggle { display: block; }
    .nav-menu {
        display: none;
        position: absolute;
        top: var(--nav-height);
        left: 0;
        right: 0;
        background: var(--bg-secondary);
        border-bottom: 1px solid var(--border-color);
        flex-direction: column;
        padding: var(--space-md);
    }
    .nav-menu.active { display: flex; }
}
"""


def html(initials: str, theme: _theme.ThemeContext) -> str:
    links = "\n".join(
        f'            <li><a href="#{section_id}">{label}</a></li>' for section_id, label in SECTIONS
    )
    return f"""<a href="#main" class="skip-to-main">Skip to main content</a>
<header class="header">
    <nav class="nav-container" role="navigation" aria-label="Main navigation">
        <div class="logo">{{'{_html.escape(initials)}'}}</div>
        <ul class="nav-menu">
{links}
            <li>
            {_theme.html(theme)}
            </li>
        </ul>
        <button class="mobile-menu-toggle" aria-label="Toggle mobile menu">
            <i class="fas fa-bars"></i>
        </button>
    </nav>
</header>
"""


def js() -> str:
    return f"""
// Navigation
(function() {{
    document.addEventListener('DOMContentLoaded', function() {{
        const navMenu = document.querySelector('.nav-menu');
        const navLinks = document.querySelectorAll('.nav-menu a');
        const mobileToggle = document.querySelector('.mobile-menu-toggle');

        navLinks.forEach(function(link) {{
            link.addEventListener('click', function(e) {{
                const targetId = link.getAttribute('href');
                if (!targetId || !targetId.startsWith('#')) return;
                e.preventDefault();
                const target = document.querySelector(targetId);
                if (target) {{
                    target.scrollIntoView({{ behavior: 'smooth' }});
                    navMenu.classList.remove('active');
                }}
            }});
        }});

        if (mobileToggle && navMenu) {{
            mobileToggle.addEventListener('click', function() {{
                navMenu.classList.toggle('active');
            }});
        }}

        window.addEventListener('scroll', function() {{
            const scrollPos = window.scrollY + {SCROLL_OFFSET};
            document.querySelectorAll('section[id]').forEach(function(section) {{
                const top = section.offsetTop;
                const height = section.offsetHeight;
                if (scrollPos >= top && scrollPos < top + height) {{
                    const id = section.getAttribute('id');
                    navLinks.forEach(function(link) {{
                        link.classList.toggle('active', link.getAttribute('href') === '#' + id);
                    }});
                }}
            }});
        }});
    }});
}})();
"""
