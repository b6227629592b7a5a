"""Resume section: download link and education/experience/certification timelines."""

import html as _html

from .models import Resume


def css() -> str:
    return """
.resume-content { max-width: 800px; margin: 0 auto; }
.resume-download { text-align: center; margin-bottom: var(--space-2xl); }
.timeline { margin-bottom: var(--space-2xl); }
.timeline h3 { margin-bottom: var(--space-xl); color: var(--accent); }
.timeline-item {
    position: relative;
    padding-left: var(--space-xl);
    padding-bottom: var(--space-lg);
    border-left: 2px solid var(--border-highlight);
}
.timeline-item::before {
    content: '';
    position: absolute;
    left: -7px;
    top: 4px;
    width: 12px;
    height: 12px;
    border-radius: 50%;
    background: var(--accent);
}
.timeline-item h4 { margin-bottom: var(--space-xs); }
.timeline-item p { color: var(--text-secondary); }
"""


def _timeline(title: str, items: list[str]) -> str:
    return f"""<div class="timeline fade-in">
            <h3>{title}</h3>
            {"".join(items)}
        </div>"""


def _item(heading: str, subtitle: str, body: str = "") -> str:
    e = _html.escape
    body_html = f"\n                <p>{e(body)}</p>" if body else ""
    return f"""
            <div class="timeline-item">
                <h4>{e(heading)}</h4>
                <p class="subtitle">{subtitle}</p>{body_html}
            </div>"""


def html(resume: Resume, resume_url: str = "") -> str:
    e = _html.escape
    download = ""
    if resume_url:
        download = f"""<div class="resume-download fade-in">
            <a href="{e(resume_url)}" class="btn btn-primary" download>
                <i class="fas fa-download"></i> Download Resume
            </a>
        </div>"""

    education = [_item(edu.degree, f"{e(edu.institution)} &bull; {e(edu.year)}") for edu in resume.education]
    experience = [
        _item(exp.role, f"{e(exp.company)} &bull; {e(exp.period)}", exp.description) for exp in resume.experience
    ]
    certifications = [_item(cert.name, e(cert.year)) for cert in resume.certifications]

    return f"""<section id="resume" class="section" role="region" aria-labelledby="resume-title">
    <h2 id="resume-title" class="section-title fade-in">Resume</h2>
    <div class="resume-content">
        {download}
        {_timeline("Education", education)}
        {_timeline("Experience", experience)}
        {_timeline("Certifications", certifications)}
    </div>
</section>
"""
