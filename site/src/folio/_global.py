"""Global CSS reset, theme variables, typography, and reveal transitions."""


def css() -> str:
    return """
/* Reset */
*, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }
html { scroll-behavior: smooth; }

/* Theme variables */
:root {
    /* Dark mode (default) */
    --bg-primary: #0D1117;
    --bg-secondary: #161B22;
    --bg-card: #1C2128;
    --bg-code: #0D1117;
    --text-primary: #E6EDF3;
    --text-secondary: #8B949E;
    --text-muted: #6E7681;
    --accent: #00FFC6;
    --accent-soft: rgba(0, 255, 198, 0.12);
    --border-color: #21262D;
    --border-highlight: #30363D;

    /* Font stacks */
    --font-display: 'JetBrains Mono', monospace;
    --font-body: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
    --font-mono: 'JetBrains Mono', 'Consolas', monospace;

    /* Spacing */
    --space-xs: 0.25rem;
    --space-sm: 0.5rem;
    --space-md: 1rem;
    --space-lg: 1.5rem;
    --space-xl: 2rem;
    --space-2xl: 3rem;
    --space-3xl: 4rem;

    /* Layout */
    --max-width: 1200px;
    --nav-height: 64px;
}

/* Light mode */
[data-theme="light"] {
    --bg-primary: #F8FAFC;
    --bg-secondary: #F1F5F9;
    --bg-card: #FFFFFF;
    --bg-code: #F1F5F9;
    --text-primary: #0F172A;
    --text-secondary: #475569;
    --text-muted: #94A3B8;
    --accent: #0E9F7E;
    --accent-soft: rgba(14, 159, 126, 0.12);
    --border-color: #E2E8F0;
    --border-highlight: #CBD5E1;
}

body {
    font-family: var(--font-body);
    background: var(--bg-primary);
    color: var(--text-primary);
    line-height: 1.6;
    -webkit-font-smoothing: antialiased;
    transition: background 0.3s, color 0.3s;
}

a { color: var(--accent); text-decoration: none; transition: color 0.2s; }
a:hover { opacity: 0.85; }

h1, h2, h3, h4 { font-family: var(--font-display); font-weight: 700; line-height: 1.2; }
h1 { font-size: 2.5rem; }
h2 { font-size: 1.75rem; }
h3 { font-size: 1.25rem; }

code, pre { font-family: var(--font-mono); }

main { padding-top: var(--nav-height); }

.section {
    max-width: var(--max-width);
    margin: 0 auto;
    padding: var(--space-3xl) var(--space-xl);
}
.section-title {
    text-align: center;
    margin-bottom: var(--space-2xl);
    color: var(--text-primary);
}
.section-title::after {
    content: '';
    display: block;
    width: 60px;
    height: 3px;
    margin: var(--space-sm) auto 0;
    background: var(--accent);
}
.subtitle { color: var(--text-secondary); font-size: 0.875rem; }
.mt-1 { margin-top: var(--space-md); }

/* Reveal on scroll */
.fade-in {
    opacity: 0;
    transform: translateY(24px);
    transition: opacity 0.6s ease-out, transform 0.6s ease-out;
}
.fade-in.visible { opacity: 1; transform: none; }

.btn {
    display: inline-flex;
    align-items: center;
    gap: var(--space-sm);
    padding: 0.75rem 1.5rem;
    border-radius: 8px;
    font-family: var(--font-display);
    font-size: 0.875rem;
    font-weight: 600;
    text-decoration: none;
    transition: all 0.2s;
    cursor: pointer;
    border: none;
}
.btn-primary {
    background: var(--accent);
    color: var(--bg-primary);
}
.btn-primary:hover { color: var(--bg-primary); opacity: 0.9; }
.btn-secondary {
    background: transparent;
    color: var(--text-primary);
    border: 1px solid var(--border-highlight);
}
.btn-secondary:hover { border-color: var(--accent); color: var(--accent); }
.btn-small { padding: 0.5rem 1rem; font-size: 0.75rem; }

.tech-stack { display: flex; flex-wrap: wrap; gap: var(--space-xs); margin: var(--space-md) 0; }
.tech-tag {
    background: var(--accent-soft);
    color: var(--accent);
    border-radius: 999px;
    padding: 0.125rem 0.625rem;
    font-family: var(--font-mono);
    font-size: 0.75rem;
}

/* Responsive */
@media (max-width: 768px) {
    h1 { font-size: 1.75rem; }
    h2 { font-size: 1.375rem; }
    .section { padding: var(--space-2xl) var(--space-md); }
}
"""
