"""
Command-line entry point: document ➜ parsed resume ➜ ATS report.
"""
from __future__ import annotations
import argparse, json, logging, sys
from typing import List, Optional

from resume2ats.ats_scorer import calculate_ats_score
from resume2ats.config import REPORT_FORMAT, REPORT_FORMATS, get_log_level
from resume2ats.extractor import ResumeExtractionError, extract_text
from resume2ats.generator_rule import render_report
from resume2ats.parser_rule import parse_resume_rule

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume2ats",
        description="Parse a resume and score it for ATS compatibility.",
    )
    parser.add_argument("path", help="resume file (.pdf, .txt, .md) or '-' for text on stdin")
    parser.add_argument("--format", choices=REPORT_FORMATS, default=REPORT_FORMAT,
                        help="report format (default: %(default)s)")
    parser.add_argument("--parse-only", action="store_true",
                        help="print the parsed resume as JSON and skip scoring")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING, ... (default: RESUME2ATS_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        raw = sys.stdin.read() if args.path == "-" else extract_text(args.path)
    except ResumeExtractionError as e:
        logger.debug("extraction failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("parsing %d characters of resume text", len(raw))
    resume = parse_resume_rule(raw)
    if args.parse_only:
        print(resume.model_dump_json(by_alias=True, indent=2))
        return 0

    result = calculate_ats_score(resume)
    if args.format == "json":
        print(json.dumps({
            "resume": resume.model_dump(by_alias=True),
            "score": result.model_dump(by_alias=True),
        }, indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(render_report(result, resume, fmt=args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
