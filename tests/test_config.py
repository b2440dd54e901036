import logging

import pytest

from resume2ats.cli import build_parser
from resume2ats.config import REPORT_FORMATS, get_log_level, get_report_format


@pytest.mark.parametrize("name, expected", [
    ("html", "html"),
    (" JSON ", "json"),
    ("pdf", "text"),
    ("", "text"),
    (None, "text"),
])
def test_report_format_falls_back_to_text(name, expected):
    assert get_report_format(name) == expected


def test_unknown_report_format_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="resume2ats.config"):
        get_report_format("pdf")
    assert "Unknown report format 'pdf'" in caplog.text


def test_cli_default_format_is_a_valid_choice():
    assert build_parser().get_default("format") in REPORT_FORMATS


def test_log_level_names():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.WARNING
