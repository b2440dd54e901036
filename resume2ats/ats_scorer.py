"""
ATS compatibility scorer.

Runs eight independent weighted checks over a StructuredResume and rolls
them up into a percentage, a letter grade and the three biggest issues.
Pure function of its input: no I/O, no shared state.
"""

from __future__ import annotations
import logging, re
from typing import Any, Callable, List, Mapping, Tuple, Union

from resume2ats.schema_resume import ATSCheck, ATSScoreResult, StructuredResume

logger = logging.getLogger(__name__)

POWER_VERBS = (
    "achieved", "accomplished", "accelerated", "administered", "analyzed",
    "built", "collaborated", "created", "delivered", "designed", "developed",
    "drove", "enhanced", "established", "executed", "expanded", "generated",
    "grew", "improved", "increased", "initiated", "launched", "led",
    "managed", "mentored", "negotiated", "optimized", "orchestrated",
    "pioneered", "planned", "produced", "reduced", "resolved", "scaled",
    "spearheaded", "streamlined", "strengthened", "transformed", "upgraded",
)

MEASURABLE_INDICATORS = (
    "%", "percent", "increased", "decreased", "reduced", "improved",
    "million", "thousand", "revenue", "cost", "saved", "roi",
    "users", "customers", "clients", "team", "projects",
)

# percentage floor ➜ grade
GRADES: Tuple[Tuple[int, str], ...] = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))

_SUMMARIES = (
    (90, "Excellent! Your resume scores {p}% on ATS compatibility. "
         "It's well-optimized for applicant tracking systems."),
    (80, "Great job! Your resume scores {p}% on ATS compatibility. "
         "With a few improvements, it could be even stronger."),
    (70, "Good progress! Your resume scores {p}% on ATS compatibility. "
         "Focus on the suggested improvements to increase your chances."),
    (60, "Your resume needs work. It scores {p}% on ATS compatibility. "
         "Review the suggestions below to improve."),
)
_SUMMARY_FAIL = ("Your resume scores {p}% on ATS compatibility. Significant improvements "
                 "are needed for better results with applicant tracking systems.")

_DIGITS = re.compile(r"\d+")
_PERCENT = re.compile(r"%|percent")
_CURRENCY = re.compile(r"[$£€]|dollar|million|thousand")

# a check below this share of its max is reported as an issue even if it passed
_WEAK_RATIO = 0.7
_TOP_ISSUES = 3


def grade_for(percentage: int) -> str:
    for floor, grade in GRADES:
        if percentage >= floor:
            return grade
    return "F"


def summary_for(percentage: int) -> str:
    for floor, tmpl in _SUMMARIES:
        if percentage >= floor:
            return tmpl.format(p=percentage)
    return _SUMMARY_FAIL.format(p=percentage)


def _check(
    id: str,
    name: str,
    description: str,
    category: str,
    score: int,
    max_score: int,
    threshold: int,
    feedback: Tuple[str, str],
    suggestions: List[str],
) -> ATSCheck:
    """Build a check; ``feedback`` is (passed text, failed text)."""
    passed = score >= threshold
    return ATSCheck(
        id=id,
        name=name,
        description=description,
        category=category,
        passed=passed,
        score=score,
        max_score=max_score,
        feedback=feedback[0] if passed else feedback[1],
        suggestions=suggestions or None,
    )


def _empty_section(id: str, name: str, description: str, max_score: int,
                   feedback: str, suggestion: str) -> ATSCheck:
    return ATSCheck(
        id=id,
        name=name,
        description=description,
        category="content",
        passed=False,
        score=0,
        max_score=max_score,
        feedback=feedback,
        suggestions=[suggestion],
    )


# ───────────────────────────────────────── checks ──
def check_contact_info(r: StructuredResume) -> ATSCheck:
    p = r.personal_info
    score, tips = 0, []
    for present, tip in (
        (p.first_name and p.last_name, "Add your full name"),
        (p.email, "Add your email address"),
        (p.phone, "Add your phone number"),
        (p.location, "Add your location (city, state)"),
        (p.linkedin_url, "Consider adding your LinkedIn profile URL"),
    ):
        if present:
            score += 3
        else:
            tips.append(tip)

    return _check(
        "contact-info", "Contact Information", "Essential contact details for recruiters",
        "content", score, 15, 12,
        ("Contact information is complete and ATS-friendly",
         "Missing important contact information"),
        tips,
    )


def check_professional_summary(r: StructuredResume) -> ATSCheck:
    summary = r.personal_info.summary or ""
    score, tips = 0, []

    if summary:
        score += 3
        low = summary.lower()

        words = len(summary.split())
        if 30 <= words <= 200:
            score += 3
        elif words < 30:
            tips.append("Expand your summary to 50-200 words for better impact")
        else:
            tips.append("Consider shortening your summary to under 200 words")

        if any(v in low for v in POWER_VERBS):
            score += 2
        else:
            tips.append('Use action verbs like "achieved", "led", "developed"')

        if r.skills:
            if any(s.name.lower() in low for s in r.skills):
                score += 2
            else:
                tips.append("Mention key skills in your summary")
    else:
        tips.append("Add a professional summary to introduce yourself")

    return _check(
        "professional-summary", "Professional Summary",
        "Brief overview of your professional background",
        "content", score, 10, 7,
        ("Professional summary is well-written", "Professional summary needs improvement"),
        tips,
    )


def check_work_experience(r: StructuredResume) -> ATSCheck:
    exp = r.experience
    if not exp:
        return _empty_section(
            "work-experience", "Work Experience", "Professional work history", 25,
            "No work experience added", "Add work experience to strengthen your resume",
        )

    score, tips = 5, []
    complete = sum(1 for e in exp if e.title and e.company_name)
    described = sum(1 for e in exp if e.description and len(e.description) > 50)
    dated = sum(1 for e in exp if e.start_date)

    if complete == len(exp):
        score += 5
    else:
        tips.append("Ensure all experience entries have job title and company name")

    if described >= len(exp) * 0.8:
        score += 8
    elif described >= len(exp) * 0.5:
        score += 5
        tips.append("Add detailed descriptions to all work experiences")
    else:
        tips.append("Add descriptions with accomplishments to each position")

    if dated == len(exp):
        score += 4
    else:
        tips.append("Add start and end dates to all positions")

    if any(e.achievements for e in exp):
        score += 3
    else:
        tips.append("Consider adding bullet-point achievements to each position")

    return _check(
        "work-experience", "Work Experience", "Professional work history",
        "content", score, 25, 18,
        ("Work experience section is comprehensive",
         "Work experience section needs more detail"),
        tips,
    )


def check_education(r: StructuredResume) -> ATSCheck:
    edu = r.education
    if not edu:
        return _empty_section(
            "education", "Education", "Academic qualifications", 10,
            "No education information added", "Add your educational background",
        )

    score, tips = 4, []
    if all(e.institution and e.degree for e in edu):
        score += 4
    else:
        tips.append("Complete all education entries with institution and degree")

    if any(e.start_date or e.end_date for e in edu):
        score += 2
    else:
        tips.append("Add graduation dates to your education")

    return _check(
        "education", "Education", "Academic qualifications",
        "content", score, 10, 7,
        ("Education section is complete", "Education section needs more information"),
        tips,
    )


def check_skills(r: StructuredResume) -> ATSCheck:
    skills = r.skills
    if not skills:
        return _empty_section(
            "skills", "Skills Section", "Technical and professional skills", 15,
            "No skills added", "Add relevant skills to your resume",
        )

    score, tips = 5, []
    n = len(skills)
    if 8 <= n <= 25:
        score += 5
    elif n >= 5:
        score += 3
        tips.append("Consider adding more relevant skills (8-20 is optimal)")
    else:
        tips.append("Add more skills to demonstrate your capabilities")

    if any(s.level for s in skills):
        score += 3

    if len({s.name.lower() for s in skills}) == n:
        score += 2
    else:
        tips.append("Remove duplicate skills")

    return _check(
        "skills", "Skills Section", "Technical and professional skills",
        "content", score, 15, 10,
        ("Skills section is well-populated", "Skills section could be improved"),
        tips,
    )


def check_keywords(r: StructuredResume) -> ATSCheck:
    p = r.personal_info
    text = " ".join([
        p.summary,
        p.headline,
        *(f"{e.title} {e.description} {' '.join(e.achievements)}" for e in r.experience),
        *(s.name for s in r.skills),
    ]).lower()

    score, tips = 0, []
    verbs = sum(1 for v in POWER_VERBS if v in text)
    if verbs >= 10:
        score += 5
    elif verbs >= 5:
        score += 3
    else:
        score += 1
        tips.append('Use more action verbs like "achieved", "implemented", "managed"')

    if len(r.skills) >= 5:
        score += 3
    else:
        tips.append("Include industry-specific keywords and technologies")

    if len(p.headline or "") > 5:
        score += 2
    else:
        tips.append("Add a professional headline with your target job title")

    return _check(
        "keywords", "Keyword Optimization", "ATS-friendly keywords and terminology",
        "keywords", score, 10, 7,
        ("Good use of keywords throughout resume",
         "Improve keyword usage for better ATS matching"),
        tips,
    )


def check_quantifiable_achievements(r: StructuredResume) -> ATSCheck:
    text = " ".join(
        f"{e.description} {' '.join(e.achievements)}" for e in r.experience
    ).lower()

    score, tips = 0, []
    if _DIGITS.search(text):
        score += 3
    if _PERCENT.search(text):
        score += 3
    if _CURRENCY.search(text):
        score += 2

    if sum(1 for ind in MEASURABLE_INDICATORS if ind in text) >= 3:
        score += 2
    else:
        tips.append('Quantify achievements with numbers (e.g., "increased sales by 25%")')

    if score < 5:
        tips.append("Add metrics and measurable results to your accomplishments")

    return _check(
        "quantifiable", "Quantifiable Achievements", "Measurable results and metrics",
        "content", score, 10, 6,
        ("Good use of quantifiable achievements", "Add more measurable results to stand out"),
        tips,
    )


def count_words(r: StructuredResume) -> int:
    p = r.personal_info
    text = " ".join([
        p.first_name,
        p.last_name,
        p.summary,
        p.headline,
        *(f"{e.title} {e.company_name} {e.description}" for e in r.experience),
        *(f"{e.institution} {e.degree} {e.field_of_study}" for e in r.education),
        *(s.name for s in r.skills),
    ])
    return len(text.split())


def check_content_length(r: StructuredResume) -> ATSCheck:
    words = count_words(r)
    tips = []
    if 300 <= words <= 1200:
        score = 5
    elif 200 <= words <= 1500:
        score = 3
        if words < 300:
            tips.append("Add more content to strengthen your resume")
        else:
            tips.append("Consider condensing content for better readability")
    elif words < 200:
        score = 1
        tips.append("Your resume seems too brief. Add more details about your experience")
    else:
        score = 2
        tips.append("Your resume may be too long. Focus on the most relevant information")

    return _check(
        "content-length", "Content Length", "Appropriate amount of content",
        "formatting", score, 5, 3,
        ("Resume length is appropriate", "Adjust resume length for better impact"),
        tips,
    )


CHECKS: Tuple[Callable[[StructuredResume], ATSCheck], ...] = (
    check_contact_info,
    check_professional_summary,
    check_work_experience,
    check_education,
    check_skills,
    check_keywords,
    check_quantifiable_achievements,
    check_content_length,
)


def top_issues(checks: List[ATSCheck], limit: int = _TOP_ISSUES) -> List[str]:
    """Feedback of failed or weak checks, biggest point deficit first."""
    weak = [c for c in checks if not c.passed or c.score < c.max_score * _WEAK_RATIO]
    weak.sort(key=lambda c: c.max_score - c.score, reverse=True)
    return [c.feedback for c in weak[:limit]]


def calculate_ats_score(
    resume: Union[StructuredResume, Mapping[str, Any]],
) -> ATSScoreResult:
    """Score a resume for ATS compatibility.

    Accepts a StructuredResume or anything that validates into one (for
    example the camelCase JSON the segmenter emits).
    """
    if not isinstance(resume, StructuredResume):
        resume = StructuredResume.model_validate(resume)

    checks = [check(resume) for check in CHECKS]
    total = sum(c.score for c in checks)
    max_score = sum(c.max_score for c in checks)
    percentage = round(total / max_score * 100)

    result = ATSScoreResult(
        overall_score=total,
        max_score=max_score,
        percentage=percentage,
        grade=grade_for(percentage),
        checks=checks,
        summary=summary_for(percentage),
        top_issues=top_issues(checks),
    )
    logger.debug("ats score %d/%d (%s)", total, max_score, result.grade)
    return result


score = calculate_ats_score
