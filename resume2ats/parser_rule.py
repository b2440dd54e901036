"""
Rule-based résumé segmenter.
Splits raw text into sections by header patterns, then pulls contact info,
experience, education, skills, certifications and languages out of them.

Best effort only: every extractor falls back to empty values, nothing here
raises for any input string.
"""

from __future__ import annotations
import logging, re
from typing import Dict, List, NamedTuple, Optional, Tuple

from resume2ats.cleaner import (
    LANGUAGE_SPLIT,
    SKILL_SPLIT,
    expand_username_url,
    find_dates,
    format_date_for_input,
    is_bullet,
    is_current,
    normalise_bullet,
    normalise_line,
    split_parts,
    strip_bullet,
    strip_dates,
)
from resume2ats.schema_resume import (
    DEFAULT_PROFICIENCY,
    DEFAULT_SKILL_LEVEL,
    MAX_LANGUAGES,
    MAX_SKILLS,
    Certification,
    Education,
    Experience,
    Language,
    PersonalInfo,
    Skill,
    StructuredResume,
)

logger = logging.getLogger(__name__)

EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE = re.compile(
    r"(?:\+?[0-9]{1,3}[-.\s]?)?(?:\([0-9]{2,4}\)|[0-9]{2,4})[-.\s]?[0-9]{3,4}[-.\s]?[0-9]{3,4}"
)
LINKEDIN = re.compile(r"linkedin\.com/(in|pub)/([a-zA-Z0-9-]+)", re.I)
GITHUB = re.compile(r"github\.com/([a-zA-Z0-9-]+)", re.I)
URL = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+")

# City, ST 12345 | City, Region
LOCATION = (
    re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?,\s*[A-Z]{2}\b(?:\s*\d{5})?"),
    re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?,\s*[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?"),
)
_NAME_NOISE = re.compile(r"[0-9@.]")

# tried in this order, first hit wins; word endings cover plurals and
# derived forms ("Experiences", "Educational Background", "Objectives")
SECTION_HEADERS: Tuple[Tuple[str, re.Pattern], ...] = (
    ("experience", re.compile(
        r"^(?:experiences?|work\s*(?:experiences?|history)|employment\s*(?:history)?"
        r"|professional\s*experiences?)\b", re.I)),
    ("education", re.compile(
        r"^(?:education(?:al)?|academic\s*(?:background|history)?|qualifications?)\b", re.I)),
    ("skills", re.compile(
        r"^(?:skills?|technical\s*skills?|core\s*(?:competenc(?:y|ies)|skills)|expertise"
        r"|proficiencies)\b", re.I)),
    ("summary", re.compile(
        r"^(?:summary|professional\s*summary|profile|objectives?|about\s*me"
        r"|career\s*objectives?)\b", re.I)),
    ("certifications", re.compile(
        r"^(?:certifications?|licenses?|credentials?"
        r"|professional\s*(?:certifications?|development))\b", re.I)),
    ("projects", re.compile(
        r"^(?:projects?|portfolio|personal\s*projects?|key\s*projects?)\b", re.I)),
    ("languages", re.compile(
        r"^(?:languages?|language\s*(?:skills|proficiency))\b", re.I)),
)

DEGREE = re.compile(
    r"(?<![a-z])(?:bachelor|master|doctorate|associate|diploma|certificate"
    r"|(?:ph\.?\s?d|m\.?b\.?a|[bm]\.?sc?|[bm]\.?a)(?![a-z]))",
    re.I,
)
INSTITUTION = re.compile(r"university|college|institute|school", re.I)

PROFICIENCY_KEYWORDS = (
    ("native", "NATIVE"),
    ("fluent", "FLUENT"),
    ("advanced", "PROFESSIONAL"),
    ("professional", "PROFESSIONAL"),
    ("intermediate", "CONVERSATIONAL"),
    ("conversational", "CONVERSATIONAL"),
    ("basic", "BASIC"),
    ("elementary", "BASIC"),
    ("beginner", "BASIC"),
)

_EXPERIENCE_HEADER_MAX_LEN = 150


class Section(NamedTuple):
    kind: str
    lines: List[str]


def parse_resume_rule(raw: str) -> StructuredResume:
    """Raw resume text ➜ StructuredResume."""
    lines = [normalise_line(ln) for ln in (raw or "").splitlines()]
    full_text = "\n".join(lines)

    sections: Dict[str, List[str]] = {}
    for sec in detect_sections(lines):
        sections.setdefault(sec.kind, sec.lines)      # first occurrence wins
    logger.debug("detected sections: %s", list(sections))

    info = parse_personal_info(sections.get("header", []), full_text)
    if "summary" in sections:
        info = info.model_copy(update={"summary": parse_summary(sections["summary"])})

    resume = StructuredResume(
        personal_info=info,
        experience=parse_experience(sections.get("experience", [])),
        education=parse_education(sections.get("education", [])),
        skills=parse_skills(sections.get("skills", [])),
        certifications=parse_certifications(sections.get("certifications", [])),
        languages=parse_languages(sections.get("languages", [])),
        projects=[],
    )
    logger.debug(
        "parsed resume: %d experience, %d education, %d skills, %d certifications, %d languages",
        len(resume.experience), len(resume.education), len(resume.skills),
        len(resume.certifications), len(resume.languages),
    )
    return resume


segment = parse_resume_rule


# ───────────────────────────────────────── sections ──
def classify_line(line: str) -> Tuple[Optional[str], str]:
    """Return (section kind, inline content after ':') or (None, '')."""
    for kind, pat in SECTION_HEADERS:
        if m := pat.match(line):
            rest = line[m.end():].strip()
            if rest.startswith(":"):
                return kind, rest[1:].strip()
            return kind, ""
    return None, ""


def detect_sections(lines: List[str]) -> List[Section]:
    """Group non-empty lines under the most recent header.

    Lines before the first header form the ``header`` pseudo-section.
    """
    out: List[Section] = []
    head: Optional[Section] = None
    cur: Optional[Section] = None
    for ln in lines:
        ln = ln.strip()
        if not ln:
            continue
        kind, inline = classify_line(ln)
        if kind:
            if cur:
                out.append(cur)
            cur = Section(kind, [inline] if inline else [])
        elif cur:
            cur.lines.append(ln)
        elif head:
            head.lines.append(ln)
        else:
            head = Section("header", [ln])
            out.append(head)
    if cur:
        out.append(cur)
    return out


# ───────────────────────────────────────── contact ──
def _first(pat: re.Pattern, text: str) -> str:
    m = pat.search(text)
    return m.group() if m else ""


def _split_name(line: str) -> Tuple[str, str]:
    parts = [p for p in line.split() if len(p) > 1 and not _NAME_NOISE.search(p)]
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def _headline(header: List[str]) -> str:
    for ln in header[1:4]:
        if EMAIL.search(ln) or PHONE.search(ln) or URL.search(ln):
            continue
        if 5 < len(ln) < 100:
            return ln
    return ""


def _location(header: List[str]) -> str:
    candidates = [ln for ln in header if not EMAIL.search(ln) and not URL.search(ln)]
    for pat in LOCATION:
        for ln in candidates:
            if m := pat.search(ln):
                return m.group()
    return ""


def _portfolio(header: List[str]) -> str:
    for ln in header:
        for url in URL.findall(ln):
            if not LINKEDIN.search(url) and not GITHUB.search(url):
                return url.rstrip(".,;)")
    return ""


def parse_personal_info(header: List[str], full_text: str) -> PersonalInfo:
    first, last = _split_name(header[0]) if header else ("", "")

    linkedin = ""
    if m := LINKEDIN.search(full_text):
        linkedin = expand_username_url(m.group(2), "linkedin.com", f"{m.group(1).lower()}/")
    github = ""
    if m := GITHUB.search(full_text):
        github = expand_username_url(m.group(1), "github.com")

    return PersonalInfo(
        first_name=first,
        last_name=last,
        email=_first(EMAIL, full_text),
        phone=_first(PHONE, full_text).strip(),
        location=_location(header),
        headline=_headline(header),
        linkedin_url=linkedin,
        github_url=github,
        portfolio_url=_portfolio(header),
    )


def parse_summary(lines: List[str]) -> str:
    return " ".join(lines).strip()


# ───────────────────────────────────────── experience ──
def _experience_head(line: str, dates: List[str]) -> Dict:
    current = bool(dates) and is_current(line)
    start = format_date_for_input(dates[0]) if dates else ""
    end = format_date_for_input(dates[1]) if len(dates) >= 2 and not current else ""

    parts = split_parts(strip_dates(line, current=True))
    title = parts[0] if parts else ""
    return {
        "title": title,
        # a lone part is usually the employer as much as the role
        "company_name": parts[1] if len(parts) > 1 else title,
        "location": parts[2] if len(parts) > 2 else "",
        "start_date": start,
        "end_date": end,
        "is_current": current,
    }


def _push_experience(head: Optional[Dict], desc: List[str], tgt: List[Experience]):
    if head and (head["title"] or head["company_name"]):
        tgt.append(Experience(**head, description="\n".join(desc), achievements=[]))


def parse_experience(lines: List[str]) -> List[Experience]:
    out: List[Experience] = []
    head: Optional[Dict] = None
    desc: List[str] = []
    for i, ln in enumerate(lines):
        dates = find_dates(ln)
        bullet = is_bullet(ln)
        if (dates and len(ln) < _EXPERIENCE_HEADER_MAX_LEN) or (i == 0 and not bullet):
            _push_experience(head, desc, out)
            head, desc = _experience_head(ln, dates), []
        elif head is not None:
            desc.append(normalise_bullet(ln) if bullet else ln)
    _push_experience(head, desc, out)
    return out


# ───────────────────────────────────────── education ──
def _education_head(line: str, dates: List[str]) -> Dict:
    current = is_current(line)
    start = end = ""
    if len(dates) >= 2:
        start = format_date_for_input(dates[0])
        if not current:
            end = format_date_for_input(dates[1])
    elif dates and current:
        start = format_date_for_input(dates[0])
    elif dates:
        # a lone year on an education line is the graduation date
        end = format_date_for_input(dates[0])

    degree = institution = field = ""
    for part in split_parts(strip_dates(line, current=True)):
        if DEGREE.search(part):
            degree = part
        elif INSTITUTION.search(part):
            institution = part
        elif not institution:
            institution = part
        elif not field:
            field = part
    return {
        "institution": institution,
        "degree": degree,
        "field_of_study": field,
        "start_date": start,
        "end_date": end,
        "is_current": bool(dates) and current,
        "description": "",
    }


def _push_education(head: Optional[Dict], tgt: List[Education]):
    if head and (head["institution"] or head["degree"]):
        tgt.append(Education(**head))


def parse_education(lines: List[str]) -> List[Education]:
    out: List[Education] = []
    head: Optional[Dict] = None
    for ln in lines:
        dates = find_dates(ln)
        if dates or DEGREE.search(ln):
            _push_education(head, out)
            head = _education_head(ln, dates)
        elif head is not None:
            if not head["field_of_study"] and not head["degree"]:
                head["field_of_study"] = ln
            elif not head["description"]:
                head["description"] = ln
    _push_education(head, out)
    return out


# ───────────────────────────────────────── lists ──
def parse_skills(lines: List[str]) -> List[Skill]:
    seen, skills = set(), []
    for ln in lines:
        for tok in SKILL_SPLIT.split(ln):
            name = tok.strip()
            if 1 < len(name) < 50 and name.lower() not in seen:
                seen.add(name.lower())
                skills.append(Skill(name=name, level=DEFAULT_SKILL_LEVEL))
    return skills[:MAX_SKILLS]


def parse_certifications(lines: List[str]) -> List[Certification]:
    certs = []
    for ln in lines:
        ln = strip_bullet(ln)
        dates = find_dates(ln)
        residue = strip_dates(ln)
        if len(residue) <= 3:
            continue
        parts = split_parts(residue)
        certs.append(Certification(
            name=parts[0] if parts else residue,
            issuing_organization=parts[1] if len(parts) > 1 else "",
            issue_date=format_date_for_input(dates[0]) if dates else "",
            expiry_date=format_date_for_input(dates[1]) if len(dates) > 1 else "",
        ))
    return certs


def parse_languages(lines: List[str]) -> List[Language]:
    langs = []
    for ln in lines:
        for tok in LANGUAGE_SPLIT.split(ln):
            tok = tok.strip()
            if not 2 <= len(tok) <= 50:
                continue
            name, level = tok, DEFAULT_PROFICIENCY
            for key, prof in PROFICIENCY_KEYWORDS:
                if key in tok.lower():
                    level = prof
                    name = re.sub(r"[():]", "", re.sub(key, "", tok, flags=re.I)).strip()
                    break
            if len(name) > 1:
                langs.append(Language(name=name, proficiency=level))
    return langs[:MAX_LANGUAGES]
