"""
CLI tests: input loading, error exits and output destinations.
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from main import main

RESULTS = {
    "file_count": 3,
    "violations": [
        {
            "path": "a.cpp",
            "start_line": 10,
            "start_column": 2,
            "message": "empty if statement",
            "rule": {"name": "Empty If Statement", "category": "basic", "priority": 1},
        },
    ],
    "warnings": [
        {"path": "b.cpp", "start_line": 1, "start_column": 1, "message": "unused variable 'x'"},
    ],
}


@pytest.fixture
def results_file(tmp_path: Path) -> Path:
    path = tmp_path / "results.json"
    path.write_text(json.dumps(RESULTS), encoding="utf-8")
    return path


class TestMain:
    def test_writes_output_file(self, results_file, tmp_path, capsys):
        out = tmp_path / "reports" / "report.html"
        main([str(results_file), "-o", str(out), "--identifier", "22.02"])
        html = out.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert 'class="Empty_If_Statement"' in html
        assert 'class="compiler-warning"' in html
        assert "OCLint v22.02" in html
        err = capsys.readouterr().err
        assert "HTML report saved" in err
        assert "[HTML Reporter] Rendered 1 violation(s), 1 compiler diagnostic(s), 0 checker bug(s)." in err

    def test_writes_stdout(self, results_file, capsys):
        main([str(results_file), "--title", "Nightly"])
        captured = capsys.readouterr()
        assert "<h1>Nightly</h1>" in captured.out
        assert "[HTML Reporter] Loaded results" in captured.err

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(RESULTS)))
        main([])
        assert "Empty_If_Statement" in capsys.readouterr().out

    def test_sortable_script_option(self, results_file, capsys):
        main([str(results_file), "--sortable-script", "js/sorttable.js"])
        assert '<script src="js/sorttable.js"></script>' in capsys.readouterr().out

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.json")])
        assert exc.value.code == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(path)])
        assert exc.value.code == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_violation_without_rule(self, tmp_path, capsys):
        path = tmp_path / "norule.json"
        path.write_text(json.dumps({
            "violations": [{"path": "a.cpp", "start_line": 1, "start_column": 1, "message": "m"}],
        }), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(path)])
        assert exc.value.code == 1
        assert "has no rule" in capsys.readouterr().err

    def test_unknown_report_type(self, results_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(results_file), "--report-type", "pdf"])
        assert exc.value.code == 1
        assert "unknown report type" in capsys.readouterr().err
