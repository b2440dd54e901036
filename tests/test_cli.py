import io
import json

from resume2ats.cli import main


def test_text_report(sample_file, capsys):
    assert main([str(sample_file)]) == 0
    out = capsys.readouterr().out
    assert "ATS score:" in out
    assert "Contact Information" in out


def test_json_output(sample_file, capsys):
    assert main([str(sample_file), "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["resume"]["personalInfo"]["firstName"] == "Jane"
    assert len(payload["score"]["checks"]) == 8
    assert payload["score"]["maxScore"] == 100


def test_parse_only(sample_file, capsys):
    assert main([str(sample_file), "--parse-only"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["skills"][0]["name"] == "Python"
    assert "checks" not in payload


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Skills\nPython, Go"))
    assert main(["-", "--parse-only"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [s["name"] for s in payload["skills"]] == ["Python", "Go"]


def test_unsupported_file_exit_code(tmp_path, capsys):
    path = tmp_path / "cv.docx"
    path.write_bytes(b"")
    assert main([str(path)]) == 2
    assert "Unsupported file type" in capsys.readouterr().err
