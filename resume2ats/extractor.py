"""
Document ➜ raw text
– PDF through pdfplumber, plain text / markdown read as UTF-8
– strips `(cid:N)` glyph artifacts
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from pathlib import Path
import re, logging, warnings, pdfplumber

from resume2ats.config import SUPPORTED_SUFFIXES
from resume2ats.parser_rule import parse_resume_rule
from resume2ats.schema_resume import StructuredResume

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

logger = logging.getLogger(__name__)

_CID_RE = re.compile(r"\(cid:\d+\)")


class ResumeExtractionError(Exception):
    """A document could not be turned into resume text."""


class UnsupportedFileType(ResumeExtractionError, ValueError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(
            f"Unsupported file type {self.path.suffix or '(none)'!r}. "
            f"Please upload one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )


class ExtractionError(ResumeExtractionError):
    pass


def pdf_to_text(pdf_path: str | Path) -> str:
    with pdfplumber.open(pdf_path) as pdf:
        pages = [p.extract_text() or "" for p in pdf.pages]
    return _CID_RE.sub("", "\n".join(pages))


def text_file_to_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


def extract_text(path: str | Path) -> str:
    """Read a resume document into plain text.

    Raises UnsupportedFileType for unknown suffixes and ExtractionError when
    the document exists but cannot be read.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFileType(path)

    reader = pdf_to_text if suffix == ".pdf" else text_file_to_text
    try:
        text = reader(path)
    except Exception as e:
        logger.error("Failed to extract text from %s: %s", path, e)
        raise ExtractionError(
            f"Failed to parse {path.name}. Please try a different file."
        ) from e

    if len(text.strip()) < 10:
        logger.warning("Extracted very little text from %s: %d chars", path, len(text))
    else:
        logger.info("Extracted %d characters from %s", len(text), path)
    return text


def parse_resume_file(path: str | Path) -> StructuredResume:
    return parse_resume_rule(extract_text(path))
