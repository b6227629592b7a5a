"""Particle background presets for the optional particles.js hero effect.

Purely cosmetic. The page works the same when particles.js fails to load.
"""

import json


PARTICLES_JS_URL = "https://cdn.jsdelivr.net/npm/particles.js@2.0.0/particles.min.js"
DEFAULT_PRESET = "network"
LABEL_RESET_MS = 1400

_NO_INTERACTION = {"detect_on": "canvas", "events": {"onhover": {"enable": False}, "onclick": {"enable": False}, "resize": True}}


def _move(speed: float, direction: str = "none", random: bool = False, straight: bool = False) -> dict:
    return {
        "enable": True,
        "speed": speed,
        "direction": direction,
        "random": random,
        "straight": straight,
        "out_mode": "out",
        "bounce": False,
    }


def _particles(count: int, area: int, color, opacity: dict, size: dict, move: dict, shape: str = "circle",
               line_linked: dict | None = None) -> dict:
    return {
        "number": {"value": count, "density": {"enable": True, "value_area": area}},
        "color": {"value": color},
        "shape": {"type": shape},
        "opacity": opacity,
        "size": size,
        "line_linked": line_linked or {"enable": False},
        "move": move,
    }


PRESETS = {
    "network": {
        "particles": _particles(
            45, 800, "#00ffc6",
            {"value": 0.72, "random": False}, {"value": 3, "random": True}, _move(2),
            line_linked={"enable": True, "distance": 140, "color": "#00ffc6", "opacity": 0.2, "width": 1},
        ),
        "interactivity": {
            "detect_on": "canvas",
            "events": {"onhover": {"enable": True, "mode": "repulse"}, "onclick": {"enable": True, "mode": "push"}, "resize": True},
            "modes": {"repulse": {"distance": 100, "duration": 0.4}, "push": {"particles_nb": 4}},
        },
    },
    "bubbles": {
        "particles": _particles(
            28, 700, "#8be9c7",
            {"value": 0.55, "random": True}, {"value": 6, "random": True}, _move(1, "top"),
        ),
        "interactivity": {
            "detect_on": "canvas",
            "events": {"onhover": {"enable": True, "mode": "bubble"}, "onclick": {"enable": True, "mode": "repulse"}, "resize": True},
            "modes": {"bubble": {"distance": 120, "size": 12, "duration": 1}, "repulse": {"distance": 120}},
        },
    },
    "stars": {
        "particles": _particles(
            80, 900, "#ffffff",
            {"value": 0.9, "random": False}, {"value": 1.2, "random": True}, _move(0.4, random=True),
        ),
        "interactivity": _NO_INTERACTION,
    },
    "nebula": {
        "particles": _particles(
            36, 1000, ["#6EE7B7", "#60A5FA", "#C084FC", "#FDE68A"],
            {"value": 0.45, "random": True, "anim": {"enable": True, "speed": 1, "opacity_min": 0.15, "sync": False}},
            {"value": 18, "random": True, "anim": {"enable": True, "speed": 4, "size_min": 6, "sync": False}},
            _move(0.6, random=True),
        ),
        "interactivity": {
            "detect_on": "canvas",
            "events": {"onhover": {"enable": True, "mode": "bubble"}, "onclick": {"enable": True, "mode": "repulse"}, "resize": True},
            "modes": {"bubble": {"distance": 180, "size": 36, "duration": 1.2}, "repulse": {"distance": 140}},
        },
    },
    "comet": {
        "particles": _particles(
            28, 800, "#FFD166", {"value": 0.85}, {"value": 4, "random": True}, _move(6, "bottom-right"),
        ),
        "interactivity": _NO_INTERACTION,
    },
    "snow": {
        "particles": _particles(
            60, 900, "#ffffff",
            {"value": 0.85, "random": True}, {"value": 4, "random": True}, _move(1, "bottom", random=True),
        ),
        "interactivity": _NO_INTERACTION,
    },
    "confetti": {
        "particles": _particles(
            40, 800, ["#FF6B6B", "#FFD93D", "#6BCB77", "#4D96FF", "#C084FC"],
            {"value": 0.95}, {"value": 6, "random": True}, _move(3, "bottom", random=True), shape="triangle",
        ),
        "interactivity": {
            "detect_on": "canvas",
            "events": {"onhover": {"enable": False}, "onclick": {"enable": True, "mode": "push"}, "resize": True},
            "modes": {"push": {"particles_nb": 6}},
        },
    },
    "matrix": {
        "particles": _particles(
            120, 1200, "#00FF41",
            {"value": 0.55}, {"value": 2, "random": True}, _move(4, "bottom", random=True, straight=True),
        ),
        "interactivity": _NO_INTERACTION,
    },
    "aurora": {
        "particles": _particles(
            30, 1000, ["#34D399", "#60A5FA", "#A78BFA"],
            {"value": 0.35, "random": True}, {"value": 28, "random": True}, _move(0.4, random=True),
        ),
        "interactivity": {
            "detect_on": "canvas",
            "events": {"onhover": {"enable": True, "mode": "bubble"}, "onclick": {"enable": True, "mode": "repulse"}, "resize": True},
            "modes": {"bubble": {"distance": 200, "size": 40, "duration": 1.2}},
        },
    },
    "cloud": {
        "particles": _particles(
            20, 1400, "#E6F7FF",
            {"value": 0.2, "random": True}, {"value": 60, "random": True}, _move(0.2, random=True),
        ),
        "interactivity": _NO_INTERACTION,
    },
    "sparkles": {
        "particles": _particles(
            80, 800, "#FFE4A3",
            {"value": 0.95, "random": True, "anim": {"enable": True, "speed": 2, "opacity_min": 0.2, "sync": False}},
            {"value": 1.6, "random": True}, _move(0.9, random=True),
        ),
        "interactivity": _NO_INTERACTION,
    },
    "galaxy": {
        "particles": _particles(
            120, 1500, ["#FFD166", "#FF6B6B", "#6BCB77", "#60A5FA"],
            {"value": 0.6, "random": True}, {"value": 2.5, "random": True}, _move(1.2, random=True),
        ),
        "interactivity": {
            "detect_on": "canvas",
            "events": {"onhover": {"enable": True, "mode": "repulse"}, "onclick": {"enable": True, "mode": "push"}, "resize": True},
            "modes": {"repulse": {"distance": 120}, "push": {"particles_nb": 6}},
        },
    },
}

for _preset in PRESETS.values():
    _preset["retina_detect"] = True

PRESET_ORDER = list(PRESETS)


def get_preset(name: str) -> dict:
    """Look up a preset by name, falling back to the default one."""
    return PRESETS.get(name, PRESETS[DEFAULT_PRESET])


def next_preset(current: int) -> tuple[int, str]:
    """Index and name of the preset after ``current``, wrapping to the first."""
    index = (current + 1) % len(PRESET_ORDER)
    return index, PRESET_ORDER[index]


def cycle_table() -> dict[str, str]:
    """Preset name -> name of the preset the style button switches to next."""
    return {name: next_preset(i)[1] for i, name in enumerate(PRESET_ORDER)}


def css() -> str:
    return """
#particles-js {
    position: absolute;
    inset: 0;
    z-index: 0;
}
.particles-toggle {
    position: absolute;
    right: var(--space-lg);
    bottom: var(--space-lg);
    z-index: 2;
    background: rgba(0, 0, 0, 0.35);
    border: 1px solid var(--border-highlight);
    color: var(--text-secondary);
    border-radius: 999px;
    padding: 0.375rem 0.875rem;
    font-family: var(--font-mono);
    font-size: 0.75rem;
    cursor: pointer;
}
.particles-toggle:hover { color: var(--accent); border-color: var(--accent); }
"""


def html() -> str:
    return """<div id="particles-js" aria-hidden="true"></div>
    <button id="particles-toggle" class="particles-toggle" title="Change background style" aria-label="Change hero background">Style</button>"""


def script_tag() -> str:
    return f'<script src="{PARTICLES_JS_URL}" defer></script>'


def js() -> str:
    return f"""
// Particle background (optional, silently skipped if particles.js is missing)
(function() {{
    const PRESETS = {json.dumps({name: get_preset(name) for name in PRESET_ORDER})};
    const NEXT = {json.dumps(cycle_table())};

    function destroyParticles() {{
        try {{
            if (window.pJSDom && window.pJSDom.length) {{
                window.pJSDom.forEach(function(p) {{
                    if (p && p.pJS && p.pJS.fn && p.pJS.fn.vendors && p.pJS.fn.vendors.destroypJS) {{
                        p.pJS.fn.vendors.destroypJS();
                    }}
                }});
                window.pJSDom = [];
            }}
        }} catch (err) {{
            // destroy uses particles.js internals; ignore failures
        }}
    }}

    function initPreset(name) {{
        try {{
            if (!window.particlesJS) return;
            destroyParticles();
            window.particlesJS('particles-js', PRESETS[name]);
        }} catch (e) {{
            console.warn('particles.js init failed', e);
        }}
    }}

    window.addEventListener('load', function() {{
        initPreset('{DEFAULT_PRESET}');

        const button = document.getElementById('particles-toggle');
        if (!button) return;
        let current = '{DEFAULT_PRESET}';
        button.addEventListener('click', function() {{
            current = NEXT[current];
            initPreset(current);
            button.textContent = current;
            setTimeout(function() {{ button.textContent = 'Style'; }}, {LABEL_RESET_MS});
        }});
    }});
}})();
"""
