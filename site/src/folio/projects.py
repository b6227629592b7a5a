"""Featured project cards and the smaller other-projects grid."""

import html as _html

from .models import OtherProject, Project


def css() -> str:
    return """
.projects-grid {
    display: grid;
    grid-template-columns: repeat(2, 1fr);
    gap: var(--space-xl);
}
.project-card {
    background: var(--bg-card);
    border: 1px solid var(--border-color);
    border-radius: 12px;
    overflow: hidden;
    transition: border-color 0.2s, transform 0.2s;
}
.project-card:hover { border-color: var(--accent); transform: translateY(-4px); }
.project-image {
    height: 160px;
    display: flex;
    align-items: center;
    justify-content: center;
    font-size: 4rem;
    color: var(--accent);
    background: linear-gradient(135deg, var(--bg-secondary), var(--accent-soft));
}
.project-content { padding: var(--space-lg); }
.project-title { margin-bottom: var(--space-sm); }
.project-description { color: var(--text-secondary); margin-bottom: var(--space-md); }
.project-details p {
    color: var(--text-secondary);
    font-size: 0.875rem;
    margin-bottom: var(--space-sm);
}
.project-details strong { color: var(--text-primary); }
.project-links { display: flex; gap: var(--space-sm); flex-wrap: wrap; }

.other-projects-grid {
    display: grid;
    grid-template-columns: repeat(3, 1fr);
    gap: var(--space-lg);
}
.other-project-card {
    background: var(--bg-card);
    border: 1px solid var(--border-color);
    border-radius: 12px;
    padding: var(--space-lg);
    transition: border-color 0.2s;
}
.other-project-card:hover { border-color: var(--accent); }
.other-project-card .project-icon {
    font-size: 2.5rem;
    color: var(--accent);
    margin-bottom: var(--space-md);
}
.other-project-card p { color: var(--text-secondary); font-size: 0.875rem; }

@media (max-width: 992px) {
    .projects-grid { grid-template-columns: 1fr; }
    .other-projects-grid { grid-template-columns: repeat(2, 1fr); }
}
@media (max-width: 576px) { .other-projects-grid { grid-template-columns: 1fr; } }
"""


def card(project: Project) -> str:
    e = _html.escape
    tags = "".join(f'<span class="tech-tag">{e(tech)}</span>' for tech in project.tech_stack)
    return f"""<article class="project-card fade-in">
            <div class="project-image">
                <i class="{e(project.icon)}"></i>
            </div>
            <div class="project-content">
                <h3 class="project-title">{e(project.title)}</h3>
                <p class="project-description">{e(project.description)}</p>
                <div class="project-details">
                    <p><strong>Problem:</strong> {e(project.problem)}</p>
                    <p><strong>Solution:</strong> {e(project.solution)}</p>
                    <p><strong>Impact:</strong> {e(project.impact)}</p>
                </div>
                <div class="tech-stack">{tags}</div>
                <div class="project-links">
                    <a href="{e(project.github)}" class="btn btn-primary btn-small" target="_blank" rel="noopener noreferrer">
                        <i class="fab fa-github"></i> GitHub
                    </a>
                    <a href="{e(project.demo)}" class="btn btn-secondary btn-small">
                        <i class="fas fa-external-link-alt"></i> Live Demo
                    </a>
                </div>
            </div>
        </article>"""


def other_card(project: OtherProject) -> str:
    e = _html.escape
    return f"""<article class="other-project-card fade-in">
            <i class="project-icon {e(project.icon)}"></i>
            <h4>{e(project.title)}</h4>
            <p>{e(project.description)}</p>
            <div class="tech-stack">
                <span class="tech-tag">{e(project.tech)}</span>
            </div>
            <a href="{e(project.github)}" class="btn btn-secondary btn-small mt-1" target="_blank" rel="noopener noreferrer">
                <i class="fab fa-github"></i> View Code
            </a>
        </article>"""


def html(projects: tuple[Project, ...]) -> str:
    return f"""<section id="projects" class="section" role="region" aria-labelledby="projects-title">
    <h2 id="projects-title" class="section-title fade-in">Featured Projects</h2>
    <div class="projects-grid">
        {"".join(card(project) for project in projects)}
    </div>
</section>
"""


def html_other(projects: tuple[OtherProject, ...]) -> str:
    if not projects:
        return ""
    return f"""<section class="section" role="region" aria-labelledby="other-projects-title">
    <h2 id="other-projects-title" class="section-title fade-in">Other Projects</h2>
    <div class="other-projects-grid">
        {"".join(other_card(project) for project in projects)}
    </div>
</section>
"""
