"""Skills grid with proficiency bars filled on reveal."""

import html as _html

from .models import Skill
from .reveal import SKILL_WIDTH_PROPERTY


def css() -> str:
    return f"""
.skills-grid {{
    display: grid;
    grid-template-columns: repeat(3, 1fr);
    gap: var(--space-lg);
}}
.skill-card {{
    background: var(--bg-card);
    border: 1px solid var(--border-color);
    border-radius: 12px;
    padding: var(--space-lg);
    transition: border-color 0.2s, transform 0.2s;
}}
.skill-card:hover {{ border-color: var(--accent); transform: translateY(-2px); }}
.skill-header {{
    display: flex;
    align-items: center;
    gap: var(--space-md);
    margin-bottom: var(--space-md);
}}
.skill-icon {{ font-size: 1.75rem; color: var(--accent); }}
.skill-name {{ font-size: 1rem; }}
.skill-bar {{
    height: 8px;
    background: var(--bg-primary);
    border-radius: 999px;
    overflow: hidden;
}}
.skill-progress {{
    height: 100%;
    width: var({SKILL_WIDTH_PROPERTY}, 0);
    background: var(--accent);
    border-radius: 999px;
    transition: width 1.2s ease-out;
}}
.skill-percentage {{
    text-align: right;
    margin-top: var(--space-xs);
    font-family: var(--font-mono);
    font-size: 0.8125rem;
    color: var(--text-secondary);
}}

@media (max-width: 992px) {{ .skills-grid {{ grid-template-columns: repeat(2, 1fr); }} }}
@media (max-width: 576px) {{ .skills-grid {{ grid-template-columns: 1fr; }} }}
"""


def card(skill: Skill) -> str:
    return f"""<div class="skill-card fade-in" data-category="{_html.escape(skill.category)}">
            <div class="skill-header">
                <i class="skill-icon {_html.escape(skill.icon)}"></i>
                <h3 class="skill-name">{_html.escape(skill.name)}</h3>
            </div>
            <div class="skill-bar">
                <div class="skill-progress" data-width="{skill.width}"></div>
            </div>
            <div class="skill-percentage">{skill.width}</div>
        </div>"""


def html(skills: tuple[Skill, ...]) -> str:
    return f"""<section id="skills" class="section" role="region" aria-labelledby="skills-title">
    <h2 id="skills-title" class="section-title fade-in">Skills</h2>
    <div class="skills-grid">
        {"".join(card(skill) for skill in skills)}
    </div>
</section>
"""
