"""Main site generator - produces the portfolio page into local/web/."""

import html as _html
import json
import sys
from pathlib import Path

from . import _common
from . import about
from . import contact
from . import footer
from . import hero
from . import navigation
from . import particles
from . import projects
from . import resume
from . import reveal
from . import skills
from . import theme as _theme
from .content import load_portfolio
from .models import Portfolio
from .typewriter import TypingScript, record_cycle


SITE_ROOT = Path(__file__).resolve().parents[2]


def _load_config(site_root: Path) -> dict:
    """Load site config from local/config.json; every key is optional."""
    config_path = site_root / "local" / "config.json"
    if not config_path.exists():
        return {}
    return json.loads(config_path.read_text(encoding="utf-8"))


def content_path(config: dict, site_root: Path) -> Path | None:
    """Resolve the optional content override file named in the config."""
    if not config.get("content"):
        return None
    path = Path(config["content"])
    return path if path.is_absolute() else site_root / path


def load_site(site_root: Path) -> tuple[dict, Portfolio, _theme.ThemeContext]:
    config = _load_config(site_root)
    portfolio = load_portfolio(content_path(config, site_root))
    theme = _theme.ThemeContext(config.get("theme", _theme.DARK))
    return config, portfolio, theme


def typing_script(portfolio: Portfolio) -> TypingScript:
    return TypingScript(portfolio.phrases)


def body_css() -> str:
    return (
        navigation.css()
        + _theme.css()
        + hero.css()
        + about.css()
        + skills.css()
        + projects.css()
        + resume.css()
        + contact.css()
        + footer.css()
    )


def body_js(script: TypingScript) -> str:
    return (
        _theme.js()
        + navigation.js()
        + reveal.js()
        + hero.js(record_cycle(script))
        + contact.js()
    )


def body_html(portfolio: Portfolio, theme: _theme.ThemeContext, cursor_marker: str) -> str:
    info = portfolio.personal_info
    return (
        navigation.html(portfolio.initials, theme)
        + '<main id="main">\n'
        + hero.html(portfolio.slug, cursor_marker)
        + about.html(info)
        + skills.html(portfolio.skills)
        + projects.html(portfolio.featured_projects)
        + projects.html_other(portfolio.other_projects)
        + resume.html(portfolio.resume, portfolio.resume_url)
        + contact.html(info)
        + "</main>\n"
        + footer.html(info, portfolio.social_links)
    )


def generate_index(portfolio: Portfolio, theme: _theme.ThemeContext, config: dict | None = None,
                   hot_reload: bool = False) -> str:
    """Generate the single portfolio page."""
    site = (config or {}).get("site", {})
    info = portfolio.personal_info
    script = typing_script(portfolio)

    title = site.get("name", f"{info.name} - {info.title}")
    description = site.get("tagline", info.bio)

    return _common.page_wrapper(
        title=_html.escape(title),
        description=_html.escape(description),
        theme=theme.current,
        body_css=body_css(),
        body_html=body_html(portfolio, theme, script.cursor_marker),
        body_js=body_js(script),
        extra_head=particles.script_tag(),
        hot_reload=hot_reload,
    )


def generate_error() -> str:
    """Generate a simple error page."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Page Not Found</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, sans-serif;
            background: #0D1117;
            color: #E6EDF3;
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 100vh;
            margin: 0;
            text-align: center;
        }
        h1 { font-size: 4rem; margin-bottom: 0.5rem; color: #00FFC6; }
        p { color: #8B949E; margin-bottom: 1.5rem; }
        a {
            color: #00FFC6;
            text-decoration: none;
            padding: 0.75rem 1.5rem;
            border: 1px solid #30363D;
            border-radius: 8px;
        }
        a:hover { border-color: #00FFC6; }
    </style>
</head>
<body>
    <div>
        <h1>404</h1>
        <p>Page not found</p>
        <a href="/">Back to Home</a>
    </div>
</body>
</html>
"""


def generate_site(site_root: Path) -> Path:
    """Generate the complete static site.

    Args:
        site_root: Path to site/ directory.

    Returns:
        Path to the generated output directory (local/web/).
    """
    config, portfolio, theme = load_site(site_root)
    web_path = site_root / "local" / "web"
    web_path.mkdir(parents=True, exist_ok=True)

    pages = {
        "index.html": generate_index(portfolio, theme, config),
        "error.html": generate_error(),
    }

    for filename, content in pages.items():
        (web_path / filename).write_text(content, encoding="utf-8")

    return web_path


def main() -> None:
    site_root = Path(sys.argv[1]) if len(sys.argv) > 1 else SITE_ROOT
    print(f"Generating site from {site_root}...")
    web_path = generate_site(site_root)
    print(f"  Saved {web_path / 'index.html'}")
    print(f"  Saved {web_path / 'error.html'}")


if __name__ == "__main__":
    main()
