"""Reveal on scroll - one-shot visibility latches for fade-ins and skill bars.

A target is revealed the first time its visible fraction reaches the
threshold. Revealing is irreversible and later visibility changes are ignored.
Generic fade-in elements use 0.1; skill cards use 0.5.
"""

from typing import Iterable, Protocol


FADE_IN_THRESHOLD = 0.1
SKILL_BAR_THRESHOLD = 0.5
VISIBLE_CLASS = "visible"
SKILL_WIDTH_PROPERTY = "--skill-width"


class RevealTarget(Protocol):
    revealed: bool

    def mark_revealed(self) -> None: ...


class SkillBarTarget(RevealTarget, Protocol):
    proficiency: str

    def set_visual_length(self, value: str) -> None: ...


# ##################################################################
# element target
# in-memory stand-in for a rendered element: class list plus inline style
class ElementTarget:
    def __init__(self, name: str = "", proficiency: str = ""):
        self.name = name
        self.proficiency = proficiency
        self.classes: set[str] = set()
        self.style: dict[str, str] = {}
        self.style_writes = 0

    @property
    def revealed(self) -> bool:
        return VISIBLE_CLASS in self.classes

    def mark_revealed(self) -> None:
        self.classes.add(VISIBLE_CLASS)

    def set_visual_length(self, value: str) -> None:
        self.style[SKILL_WIDTH_PROPERTY] = value
        self.style_writes += 1

    def __repr__(self):
        return f"ElementTarget({self.name!r}, revealed={self.revealed})"


class RevealOnScroll:
    """Watches targets and reveals each one once it is visible enough."""

    def __init__(self, threshold: float = FADE_IN_THRESHOLD):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self.threshold = threshold
        self.watching: list[RevealTarget] = []
        self.released: list[RevealTarget] = []

    def observe(self, targets: Iterable[RevealTarget]) -> None:
        for target in targets:
            if target not in self.watching and target not in self.released:
                self.watching.append(target)

    def is_intersecting(self, visible_fraction: float) -> bool:
        return visible_fraction >= self.threshold

    def on_visibility(self, entries: Iterable[tuple[RevealTarget, float]]) -> list[RevealTarget]:
        """Handle one batch of visibility changes.

        Args:
            entries: (target, visible fraction) pairs from one visibility check.

        Returns:
            The targets revealed by this batch.
        """
        revealed = []
        for target, fraction in entries:
            if target not in self.watching:
                continue
            if not self.is_intersecting(fraction):
                continue
            self.reveal(target)
            self.watching.remove(target)
            self.released.append(target)
            revealed.append(target)
        return revealed

    def reveal(self, target: RevealTarget) -> None:
        target.mark_revealed()


class SkillBarReveal(RevealOnScroll):
    """Reveals skill cards and fills their bar to the recorded proficiency."""

    def __init__(self, threshold: float = SKILL_BAR_THRESHOLD):
        super().__init__(threshold)

    def reveal(self, target: SkillBarTarget) -> None:
        target.mark_revealed()
        if target.proficiency:
            target.set_visual_length(target.proficiency)


def js() -> str:
    return f"""
// Reveal on scroll
(function() {{
    document.addEventListener('DOMContentLoaded', function() {{
        if (!('IntersectionObserver' in window)) {{
            document.querySelectorAll('.fade-in, .skill-card').forEach(function(el) {{
                el.classList.add('{VISIBLE_CLASS}');
            }});
            return;
        }}

        const fadeObserver = new IntersectionObserver(function(entries, observer) {{
            entries.forEach(function(entry) {{
                if (entry.isIntersecting && entry.intersectionRatio >= {FADE_IN_THRESHOLD}) {{
                    entry.target.classList.add('{VISIBLE_CLASS}');
                    observer.unobserve(entry.target);
                }}
            }});
        }}, {{ threshold: {FADE_IN_THRESHOLD} }});
        document.querySelectorAll('.fade-in').forEach(function(el) {{ fadeObserver.observe(el); }});

        const skillObserver = new IntersectionObserver(function(entries, observer) {{
            entries.forEach(function(entry) {{
                if (entry.isIntersecting && entry.intersectionRatio >= {SKILL_BAR_THRESHOLD}) {{
                    entry.target.classList.add('{VISIBLE_CLASS}');
                    const progress = entry.target.querySelector('.skill-progress');
                    if (progress) {{
                        progress.style.setProperty('{SKILL_WIDTH_PROPERTY}', progress.getAttribute('data-width'));
                    }}
                    observer.unobserve(entry.target);
                }}
            }});
        }}, {{ threshold: {SKILL_BAR_THRESHOLD} }});
        document.querySelectorAll('.skill-card').forEach(function(el) {{ skillObserver.observe(el); }});
    }});
}})();
"""
