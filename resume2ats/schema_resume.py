"""
Canonical resume and score-report shapes.

Attributes are snake_case in Python; serialised output uses the camelCase
keys the rest of the job board expects (``model_dump(by_alias=True)``).
Both spellings are accepted on input.
"""

from __future__ import annotations
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume2ats.utils import new_id

SkillLevel = Literal["BEGINNER", "INTERMEDIATE", "ADVANCED", "EXPERT"]
Proficiency = Literal["BASIC", "CONVERSATIONAL", "PROFESSIONAL", "FLUENT", "NATIVE"]
CheckCategory = Literal["formatting", "content", "keywords", "structure"]
Grade = Literal["A", "B", "C", "D", "F"]

MAX_SKILLS = 30
MAX_LANGUAGES = 10
DEFAULT_SKILL_LEVEL: SkillLevel = "INTERMEDIATE"
DEFAULT_PROFICIENCY: Proficiency = "CONVERSATIONAL"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ───────────────────────────────────────── resume ──
class PersonalInfo(_Record):
    """Contact details and the free-text intro of a resume."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    summary: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    portfolio_url: str = ""


class Experience(_Record):
    """One position in the work history. Dates are ``YYYY-MM`` or empty."""

    id: str = Field(default_factory=new_id)
    company_name: str = ""
    title: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""
    achievements: List[str] = Field(default_factory=list)


class Education(_Record):
    id: str = Field(default_factory=new_id)
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    grade: str = ""
    description: str = ""


class Skill(_Record):
    id: str = Field(default_factory=new_id)
    name: str
    level: Optional[SkillLevel] = None


class Certification(_Record):
    id: str = Field(default_factory=new_id)
    name: str
    issuing_organization: str = ""
    issue_date: str = ""
    expiry_date: str = ""
    credential_id: str = ""
    credential_url: str = ""


class Language(_Record):
    id: str = Field(default_factory=new_id)
    name: str
    proficiency: Proficiency = DEFAULT_PROFICIENCY


class Project(_Record):
    id: str = Field(default_factory=new_id)
    name: str = ""
    description: str = ""
    url: str = ""
    technologies: List[str] = Field(default_factory=list)


class StructuredResume(_Record):
    """Output of the segmenter and input of the scorer."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    languages: List[Language] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)


# ───────────────────────────────────────── score ──
class ATSCheck(_Record):
    """Outcome of one weighted scoring rule."""

    id: str
    name: str
    description: str
    category: CheckCategory
    passed: bool
    score: int
    max_score: int
    feedback: str
    suggestions: Optional[List[str]] = None


class ATSScoreResult(_Record):
    overall_score: int
    max_score: int
    percentage: int
    grade: Grade
    checks: List[ATSCheck]
    summary: str
    top_issues: List[str]
