from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape

from resume2ats.schema_resume import ATSScoreResult, StructuredResume

_TEMPLATES = {"text": "report.txt.j2", "html": "report.html.j2"}

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=select_autoescape(["html", "html.j2"]),
                  trim_blocks=True, lstrip_blocks=True)

def render_report(result: ATSScoreResult, resume: StructuredResume | None = None,
                  fmt: str = "text") -> str:
    """Render a score report. ``resume`` only feeds the name/headline banner."""
    if fmt not in _TEMPLATES:
        raise ValueError(f"Unknown report format {fmt!r}; expected one of {sorted(_TEMPLATES)}")
    info = resume.personal_info if resume else None
    return env.get_template(_TEMPLATES[fmt]).render(s=result, info=info)
