"""Hero section: terminal window with the typing animation and particle background."""

import html as _html
import json

from . import particles
from .typewriter import Frame


def css() -> str:
    return """
.hero {
    position: relative;
    min-height: calc(100vh - var(--nav-height));
    display: flex;
    align-items: center;
    justify-content: center;
    text-align: center;
    overflow: hidden;
    background: radial-gradient(ellipse at top, var(--bg-secondary) 0%, var(--bg-primary) 70%);
}
.hero-content {
    position: relative;
    z-index: 1;
    width: 100%;
    max-width: 760px;
    padding: var(--space-3xl) var(--space-xl);
}
.terminal-window {
    background: var(--bg-card);
    border: 1px solid var(--border-highlight);
    border-radius: 12px;
    text-align: left;
    overflow: hidden;
    margin-bottom: var(--space-2xl);
    box-shadow: 0 20px 60px rgba(0, 0, 0, 0.35);
}
.terminal-header {
    display: flex;
    gap: var(--space-sm);
    padding: 0.75rem var(--space-md);
    background: var(--bg-secondary);
    border-bottom: 1px solid var(--border-color);
}
.terminal-btn { width: 12px; height: 12px; border-radius: 50%; }
.terminal-btn.red { background: #FF5F56; }
.terminal-btn.yellow { background: #FFBD2E; }
.terminal-btn.green { background: #27C93F; }
.terminal-body {
    padding: var(--space-lg);
    font-family: var(--font-mono);
    min-height: 140px;
}
.terminal-prompt { color: var(--text-muted); margin-bottom: var(--space-sm); }
.typing-text { font-size: 1.375rem; color: var(--text-primary); min-height: 2.2em; }
.typing-text .highlight { color: var(--accent); }
.cursor {
    display: inline-block;
    width: 10px;
    height: 1.2em;
    margin-left: 2px;
    background: var(--accent);
    vertical-align: text-bottom;
    animation: blink 1s step-end infinite;
}
@keyframes blink { 50% { opacity: 0; } }
.hero-buttons {
    display: flex;
    gap: var(--space-md);
    justify-content: center;
    flex-wrap: wrap;
}
@media (max-width: 768px) {
    .typing-text { font-size: 1rem; }
}
""" + particles.css()


def html(slug: str, cursor_marker: str) -> str:
    return f"""<section id="home" class="hero" role="banner">
    {particles.html()}
    <div class="hero-content fade-in">
        <div class="terminal-window">
            <div class="terminal-header">
                <span class="terminal-btn red"></span>
                <span class="terminal-btn yellow"></span>
                <span class="terminal-btn green"></span>
            </div>
            <div class="terminal-body">
                <div class="terminal-prompt">&gt; {_html.escape(slug)}.init()</div>
                <div class="typing-text" id="typing-text">
                    {cursor_marker}
                </div>
            </div>
        </div>
        <div class="hero-buttons">
            <a href="#projects" class="btn btn-primary">
                <i class="fas fa-code"></i> View Projects
            </a>
            <a href="#contact" class="btn btn-secondary">
                <i class="fas fa-envelope"></i> Contact Me
            </a>
        </div>
    </div>
</section>
"""


def frames_json(frames: list[Frame]) -> str:
    """Frame table as JSON that is safe to inline in a script element."""
    return json.dumps([[frame.text, frame.delay_ms] for frame in frames]).replace("<", "\\u003c")


def js(frames: list[Frame]) -> str:
    return f"""
// Typing animation playback (frames recorded at build time)
(function() {{
    const FRAMES = {frames_json(frames)};

    document.addEventListener('DOMContentLoaded', function() {{
        const element = document.getElementById('typing-text');
        if (!element || !FRAMES.length) return;
        let index = 0;
        function step() {{
            const frame = FRAMES[index];
            element.innerHTML = frame[0];
            index = (index + 1) % FRAMES.length;
            setTimeout(step, frame[1]);
        }}
        step();
    }});
}})();
""" + particles.js()
