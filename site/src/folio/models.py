"""Portfolio view model - immutable content consumed by the section renderers."""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PersonalInfo(_Frozen):
    name: str
    title: str
    email: str
    location: str
    bio: str


class SocialLinks(_Frozen):
    github: str = ""
    linkedin: str = ""
    twitter: str = ""
    instagram: str = ""
    email: str = ""


class Skill(_Frozen):
    name: str
    proficiency: int = Field(ge=0, le=100)
    category: str = ""
    icon: str = "fas fa-code"

    @property
    def width(self) -> str:
        """Proficiency as the CSS length recorded on the skill bar."""
        return f"{self.proficiency}%"


class Project(_Frozen):
    title: str
    description: str
    problem: str
    solution: str
    impact: str
    tech_stack: tuple[str, ...] = ()
    github: str = ""
    demo: str = "#"
    icon: str = "fas fa-code"


class OtherProject(_Frozen):
    title: str
    description: str
    tech: str
    github: str = ""
    icon: str = "fas fa-code"


class Education(_Frozen):
    degree: str
    institution: str
    year: str


class Experience(_Frozen):
    role: str
    company: str
    period: str
    description: str = ""


class Certification(_Frozen):
    name: str
    year: str


class Resume(_Frozen):
    education: tuple[Education, ...] = ()
    experience: tuple[Experience, ...] = ()
    certifications: tuple[Certification, ...] = ()


class Portfolio(_Frozen):
    personal_info: PersonalInfo
    social_links: SocialLinks = SocialLinks()
    skills: tuple[Skill, ...] = ()
    featured_projects: tuple[Project, ...] = ()
    other_projects: tuple[OtherProject, ...] = ()
    resume: Resume = Resume()
    phrases: tuple[str, ...] = Field(min_length=1)
    resume_url: str = ""

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.personal_info.name.split() if part).upper()

    @property
    def slug(self) -> str:
        return "-".join(self.personal_info.name.lower().split())
