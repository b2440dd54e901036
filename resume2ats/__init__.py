"""
resume2ats: resume text ➜ structured resume ➜ ATS compatibility score.
"""
from resume2ats.ats_scorer import calculate_ats_score, score
from resume2ats.cleaner import format_date_for_input
from resume2ats.extractor import (
    ExtractionError,
    ResumeExtractionError,
    UnsupportedFileType,
    extract_text,
    parse_resume_file,
)
from resume2ats.parser_rule import parse_resume_rule, segment
from resume2ats.schema_resume import (
    ATSCheck,
    ATSScoreResult,
    Certification,
    Education,
    Experience,
    Language,
    PersonalInfo,
    Project,
    Skill,
    StructuredResume,
)

__all__ = [
    "segment",
    "score",
    "parse_resume_rule",
    "calculate_ats_score",
    "parse_resume_file",
    "extract_text",
    "format_date_for_input",
    "ResumeExtractionError",
    "UnsupportedFileType",
    "ExtractionError",
    "StructuredResume",
    "PersonalInfo",
    "Experience",
    "Education",
    "Skill",
    "Certification",
    "Language",
    "Project",
    "ATSCheck",
    "ATSScoreResult",
]
