"""Footer section with quick links and social links."""

import html as _html
from datetime import date

from .models import PersonalInfo, SocialLinks


QUICK_LINKS = [("home", "Home"), ("about", "About"), ("projects", "Projects"), ("contact", "Contact")]

SOCIAL_ICONS = [
    ("github", "GitHub", "fab fa-github"),
    ("linkedin", "LinkedIn", "fab fa-linkedin"),
    ("twitter", "Twitter", "fab fa-twitter"),
    ("instagram", "Instagram", "fab fa-instagram"),
    ("email", "Email", "fas fa-envelope"),
]


def css() -> str:
    return """
.footer {
    background: var(--bg-secondary);
    border-top: 1px solid var(--border-color);
    padding: var(--space-2xl) var(--space-xl) var(--space-lg);
    margin-top: var(--space-3xl);
}
.footer-content {
    max-width: var(--max-width);
    margin: 0 auto;
    display: grid;
    grid-template-columns: repeat(3, 1fr);
    gap: var(--space-xl);
}
.footer-section h4 { margin-bottom: var(--space-md); }
.footer-section p { color: var(--text-secondary); font-size: 0.875rem; }
.footer-links { list-style: none; }
.footer-links li { margin-bottom: var(--space-xs); }
.footer-links a { color: var(--text-muted); font-size: 0.875rem; }
.footer-links a:hover { color: var(--accent); }
.social-links { display: flex; gap: var(--space-sm); }
.social-link {
    width: 40px;
    height: 40px;
    display: flex;
    align-items: center;
    justify-content: center;
    border: 1px solid var(--border-highlight);
    border-radius: 50%;
    color: var(--text-secondary);
}
.social-link:hover { border-color: var(--accent); color: var(--accent); }
.footer-bottom {
    max-width: var(--max-width);
    margin: var(--space-xl) auto 0;
    padding-top: var(--space-lg);
    border-top: 1px solid var(--border-color);
    text-align: center;
    color: var(--text-muted);
    font-size: 0.8125rem;
}
@media (max-width: 768px) { .footer-content { grid-template-columns: 1fr; } }
"""


def _social_link(href: str, label: str, icon: str) -> str:
    external = "" if href.startswith("mailto:") else ' target="_blank" rel="noopener noreferrer"'
    return f"""<a href="{_html.escape(href)}" class="social-link"{external} aria-label="{label}">
                    <i class="{icon}"></i>
                </a>"""


def html(info: PersonalInfo, links: SocialLinks, year: int | None = None) -> str:
    name = _html.escape(info.name)
    quick = "\n".join(f'                <li><a href="#{anchor}">{label}</a></li>' for anchor, label in QUICK_LINKS)
    social = "\n                ".join(
        _social_link(getattr(links, key), label, icon) for key, label, icon in SOCIAL_ICONS if getattr(links, key)
    )

    return f"""<footer class="footer" role="contentinfo">
    <div class="footer-content">
        <div class="footer-section">
            <h4>{name}</h4>
            <p>{_html.escape(info.title)} passionate about creating innovative solutions.</p>
        </div>
        <div class="footer-section">
            <h4>Quick Links</h4>
            <ul class="footer-links">
{quick}
            </ul>
        </div>
        <div class="footer-section">
            <h4>Connect</h4>
            <div class="social-links">
                {social}
            </div>
        </div>
    </div>
    <div class="footer-bottom">
        <p>&copy; {year or date.today().year} {name}. All rights reserved.</p>
        <p>Built with <i class="fas fa-heart" style="color: var(--accent);"></i> using Python, HTML, CSS &amp; JavaScript</p>
    </div>
</footer>
"""
