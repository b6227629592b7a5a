"""Default portfolio content and loading of content overrides."""

import json
from pathlib import Path

from .models import Portfolio


GITHUB = "https://github.com/NigelBerewere"


DEFAULT_CONTENT = {
    "personal_info": {
        "name": "Nigel Berewere",
        "title": "Full-Stack Developer",
        "email": "nigelberewere@gmail.com",
        "location": "Harare, Zimbabwe",
        "bio": (
            "Passionate full-stack developer with expertise in building scalable web and mobile "
            "applications. Skilled in modern technologies and committed to delivering innovative "
            "solutions that solve real-world problems."
        ),
    },
    "social_links": {
        "github": GITHUB,
        "linkedin": "https://www.linkedin.com/in/nigel-berewere",
        "twitter": "https://twitter.com/NigelBerewere",
        "instagram": "https://www.instagram.com/nigelberewere",
        "email": "mailto:nigelberewere@gmail.com",
    },
    "skills": [
        {"name": "HTML", "proficiency": 95, "category": "Frontend", "icon": "fab fa-html5"},
        {"name": "CSS", "proficiency": 90, "category": "Frontend", "icon": "fab fa-css3-alt"},
        {"name": "JavaScript", "proficiency": 92, "category": "Frontend", "icon": "fab fa-js"},
        {"name": "Java", "proficiency": 85, "category": "Backend", "icon": "fab fa-java"},
        {"name": "Flutter (Dart)", "proficiency": 88, "category": "Mobile", "icon": "fas fa-mobile-alt"},
        {"name": "Firebase", "proficiency": 87, "category": "Backend", "icon": "fas fa-fire"},
    ],
    "featured_projects": [
        {
            "title": "School Portal",
            "description": "A comprehensive student management and results system for educational institutions",
            "problem": "Schools need efficient digital solutions for managing student data and academic records",
            "solution": (
                "Built a full-stack portal with user authentication, grade tracking, attendance "
                "management, and automated reporting features"
            ),
            "impact": "Streamlined operations for 500+ students and reduced administrative workload by 40%",
            "tech_stack": ["HTML", "CSS", "JavaScript", "Firebase"],
            "github": GITHUB,
            "demo": "#",
            "icon": "fas fa-school",
        },
        {
            "title": "Interns & Companies Connector",
            "description": "Platform connecting students with internship opportunities at companies",
            "problem": "Significant gap between students seeking internships and companies looking to hire talent",
            "solution": (
                "Created a matching platform with user profiles, job listings, application tracking, "
                "and communication features"
            ),
            "impact": (
                "Successfully connected 100+ students with internship opportunities and facilitated "
                "50+ placements"
            ),
            "tech_stack": ["Flutter", "Firebase", "JavaScript"],
            "github": GITHUB,
            "demo": "#",
            "icon": "fas fa-handshake",
        },
        {
            "title": "Numbers",
            "description": "Personal finance management application helping users track and plan their finances",
            "problem": "Users struggle to track daily expenses and create effective budget plans",
            "solution": (
                "Developed mobile app with expense tracking, budget planning, financial insights, "
                "and spending analytics"
            ),
            "impact": "Helped users save an average of 20% more monthly through better financial awareness",
            "tech_stack": ["Flutter (Dart)", "Firebase"],
            "github": GITHUB,
            "demo": "#",
            "icon": "fas fa-chart-line",
        },
        {
            "title": "Project & Staff Manager",
            "description": "Company tool for project management and staff organization",
            "problem": "Companies need centralized systems for managing projects, tasks, and team members",
            "solution": (
                "Built collaborative platform with task assignment, progress tracking, team "
                "communication, and reporting dashboards"
            ),
            "impact": "Increased team productivity by 30% and improved project completion rates",
            "tech_stack": ["Java", "JavaScript", "Firebase"],
            "github": GITHUB,
            "demo": "#",
            "icon": "fas fa-tasks",
        },
    ],
    "other_projects": [
        {"title": "Weather App", "description": "Real-time weather application with forecasts",
         "tech": "JavaScript, API", "github": GITHUB, "icon": "fas fa-cloud-sun"},
        {"title": "Todo List Pro", "description": "Feature-rich task management application",
         "tech": "React, Firebase", "github": GITHUB, "icon": "fas fa-list-check"},
        {"title": "Chat Application", "description": "Real-time messaging platform",
         "tech": "Flutter, Firebase", "github": GITHUB, "icon": "fas fa-comments"},
        {"title": "E-commerce Store", "description": "Full-featured online shopping platform",
         "tech": "React, Java, Firebase", "github": GITHUB, "icon": "fas fa-shopping-cart"},
        {"title": "Blog Platform", "description": "Content management and blogging system",
         "tech": "JavaScript, Firebase", "github": GITHUB, "icon": "fas fa-blog"},
        {"title": "API Integration Hub", "description": "Centralized API management dashboard",
         "tech": "Java, JavaScript", "github": GITHUB, "icon": "fas fa-plug"},
    ],
    "resume": {
        "education": [
            {"degree": "Bachelor of Science in Computer Science",
             "institution": "National University of Science and technology", "year": "2024-2028"},
        ],
        "experience": [
            {"role": "Full-Stack Developer", "company": "Tech Company", "period": "2023-Present",
             "description": "Developed web and mobile applications"},
            {"role": "Junior Developer", "company": "Startup Inc", "period": "2022-2023",
             "description": "Built responsive websites and APIs"},
        ],
        "certifications": [
            {"name": "Firebase Certified Developer", "year": "2024"},
            {"name": "Flutter Development", "year": "2023"},
        ],
    },
    "phrases": [
        'hi, i\'m <span class="highlight">Nigel Berewere</span> — full-stack developer',
        'i build <span class="highlight">web apps</span> with html, css, javascript',
        'i create <span class="highlight">mobile apps</span> with flutter & dart',
        'i work with <span class="highlight">firebase</span> & java backends',
    ],
}


def load_portfolio(content_path: Path | None = None) -> Portfolio:
    """Build the portfolio view model.

    Args:
        content_path: Optional JSON file replacing the default content.

    Raises:
        FileNotFoundError: content_path was given but does not exist.
        pydantic.ValidationError: the content does not match the view model.
    """
    if content_path is None:
        return Portfolio.model_validate(DEFAULT_CONTENT)
    return Portfolio.model_validate(json.loads(Path(content_path).read_text(encoding="utf-8")))
