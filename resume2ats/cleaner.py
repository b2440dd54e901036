"""
Shared clean-ups used by the rule-based segmenter.
"""
from __future__ import annotations
import re, unicodedata
from typing import List

_MONTH_NAMES = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
_MONTHS = {
    m: f"{i:02d}"
    for i, m in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun",
         "jul", "aug", "sep", "oct", "nov", "dec"), 1)
}

# "Jan 2020" | "March 2019" | "03/2019" | "2021"
DATE_RE = re.compile(
    rf"\b(?:(?:{_MONTH_NAMES})(?![a-z])\.?\s*\d{{4}}|\d{{1,2}}/\d{{4}}|\d{{4}})\b", re.I
)
CURRENT_RE = re.compile(r"\b(?:present|current|now)\b", re.I)

_MONTH_YEAR = re.compile(rf"(?<![a-z])({_MONTH_NAMES})(?![a-z])\.?\s*(\d{{4}})", re.I)
_MM_YYYY = re.compile(r"(\d{1,2})/(\d{4})")
_YEAR = re.compile(r"\d{4}")

_BULLET_CHARS = "•\\-*‣◦⁃"
BULLET_RE = re.compile(rf"^[{_BULLET_CHARS}]")
_BULLET_PREFIX = re.compile(rf"^[{_BULLET_CHARS}]\s*")
_NUMBERED = re.compile(r"^\d+\.")

ENTRY_SPLIT = re.compile(r"[,|–-]")
SKILL_SPLIT = re.compile(rf"[,;|{_BULLET_CHARS}]")
LANGUAGE_SPLIT = re.compile(r"[,;|•\-*]")


# ───────────────────────────────────────── helpers ──
def normalise_line(s: str) -> str:
    return unicodedata.normalize("NFKC", s or "").strip()


def format_date_for_input(date_str: str) -> str:
    """Normalise a resume date to ``YYYY-MM``; empty string if unrecognised.

    >>> format_date_for_input("January 2020")
    '2020-01'
    >>> format_date_for_input("03/2019")
    '2019-03'
    >>> format_date_for_input("2021")
    '2021-01'
    """
    date_str = date_str or ""
    if m := _MONTH_YEAR.search(date_str):
        return f"{m.group(2)}-{_MONTHS[m.group(1)[:3].lower()]}"
    if (m := _MM_YYYY.search(date_str)) and 1 <= int(m.group(1)) <= 12:
        return f"{m.group(2)}-{int(m.group(1)):02d}"
    if m := _YEAR.search(date_str):
        return f"{m.group()}-01"
    return ""


def find_dates(line: str) -> List[str]:
    return DATE_RE.findall(line)


def is_current(line: str) -> bool:
    return bool(CURRENT_RE.search(line))


def strip_dates(line: str, current: bool = False) -> str:
    """Remove date tokens (and present/current/now when asked)."""
    out = DATE_RE.sub("", line)
    if current:
        out = CURRENT_RE.sub("", out)
    return out.strip()


def split_parts(text: str, pattern: re.Pattern = ENTRY_SPLIT) -> List[str]:
    return [p.strip() for p in pattern.split(text) if p.strip()]


def is_bullet(line: str) -> bool:
    return bool(BULLET_RE.match(line) or _NUMBERED.match(line))


def normalise_bullet(line: str) -> str:
    return _BULLET_PREFIX.sub("• ", line, count=1)


def strip_bullet(line: str) -> str:
    return _BULLET_PREFIX.sub("", line, count=1)


def expand_username_url(token: str, domain: str, path: str = "") -> str:
    token = token.strip()
    if token.startswith("http"):
        return token
    return f"https://{domain}/{path}{token.lstrip('@').split('/')[-1]}" if token else ""
