"""Common page wrapper and head meta."""

from . import _global


FONT_AWESOME_URL = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css"


def hot_reload_js() -> str:
    return """
// Hot reload client (dev server only)
(function() {
    const source = new EventSource('/hot-reload');
    source.onmessage = function(e) {
        if (e.data === 'reload') window.location.reload();
    };
})();
"""


def head(title: str, description: str, theme: str = "dark", extra_head: str = "") -> str:
    return f"""<!DOCTYPE html>
<html lang="en" data-theme="{theme}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <meta name="description" content="{description}">
    <meta property="og:title" content="{title}">
    <meta property="og:description" content="{description}">
    <meta property="og:type" content="website">
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&family=JetBrains+Mono:wght@400;600;700&display=swap" rel="stylesheet">
    <link rel="stylesheet" href="{FONT_AWESOME_URL}">
    {extra_head}
    <style>
{_global.css()}
    </style>
</head>
"""


def page_wrapper(title: str, description: str, theme: str, body_css: str, body_html: str, body_js: str = "",
                 extra_head: str = "", hot_reload: bool = False) -> str:
    all_js = body_js
    if hot_reload:
        all_js += "\n" + hot_reload_js()

    return (
        head(title, description, theme, extra_head)
        + f"<style>{body_css}</style>\n"
        + "<body>\n"
        + body_html
        + f"\n<script>{all_js}</script>\n"
        + "</body>\n</html>"
    )
