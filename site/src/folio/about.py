"""About section with bio and profile placeholder."""

import html as _html

from .models import PersonalInfo


EXTRA_PARAGRAPHS = [
    "With a strong foundation in both frontend and backend technologies, I create seamless user "
    "experiences and robust server-side solutions. My passion lies in turning complex problems into "
    "elegant, user-friendly applications.",
    "When I'm not coding, you can find me exploring new technologies, contributing to open-source "
    "projects, or sharing knowledge with the developer community.",
]


def css() -> str:
    return """
.about-content {
    display: grid;
    grid-template-columns: 2fr 1fr;
    gap: var(--space-2xl);
    align-items: center;
}
.about-text p {
    color: var(--text-secondary);
    margin-bottom: var(--space-md);
    line-height: 1.8;
}
.profile-img {
    width: 220px;
    height: 220px;
    margin: 0 auto;
    border-radius: 50%;
    border: 3px solid var(--accent);
    background: var(--bg-card);
    display: flex;
    align-items: center;
    justify-content: center;
    font-size: 5rem;
    color: var(--accent);
}
@media (max-width: 768px) { .about-content { grid-template-columns: 1fr; } }
"""


def html(info: PersonalInfo) -> str:
    paragraphs = "\n            ".join(
        f"<p>{_html.escape(text)}</p>" for text in [info.bio, *EXTRA_PARAGRAPHS]
    )
    return f"""<section id="about" class="section" role="region" aria-labelledby="about-title">
    <h2 id="about-title" class="section-title fade-in">About Me</h2>
    <div class="about-content">
        <div class="about-text fade-in">
            {paragraphs}
        </div>
        <div class="about-image fade-in">
            <div class="profile-img">
                <i class="fas fa-user"></i>
            </div>
        </div>
    </div>
</section>
"""
