import pytest

from resume2ats.ats_scorer import calculate_ats_score
from resume2ats.generator_rule import render_report
from resume2ats.parser_rule import segment
from resume2ats.schema_resume import PersonalInfo, StructuredResume


def test_text_report(sample_text):
    resume = segment(sample_text)
    result = calculate_ats_score(resume)
    out = render_report(result, resume)
    assert out.startswith("Jane Doe - Senior Software Engineer")
    assert f"ATS score: {result.overall_score}/100 ({result.percentage}%) grade {result.grade}" in out
    assert "[PASS] Contact Information: 15/15" in out
    assert "Consider adding more relevant skills (8-20 is optimal)" in out


def test_text_report_lists_top_issues():
    result = calculate_ats_score(StructuredResume())
    out = render_report(result)
    assert "Top issues:" in out
    assert "1. No work experience added" in out


def test_html_report_escapes_content():
    resume = StructuredResume(personal_info=PersonalInfo(
        first_name="Jane", last_name="<script>", headline="Lead & Co",
    ))
    out = render_report(calculate_ats_score(resume), resume, fmt="html")
    assert "&lt;script&gt;" in out
    assert "<script>" not in out
    assert "Lead &amp; Co" in out
    assert out.count('<tr class="failed">') + out.count('<tr class="passed">') == 8


def test_unknown_format():
    with pytest.raises(ValueError):
        render_report(calculate_ats_score(StructuredResume()), fmt="pdf")
