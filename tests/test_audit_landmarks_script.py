"""
Tests for scripts/audit_landmarks.py.
"""

import importlib.util
import json
from pathlib import Path

import pytest


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "audit_landmarks.py"


@pytest.fixture(scope="module")
def script():
    """Load the script as a module."""
    spec = importlib.util.spec_from_file_location("audit_landmarks", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestAuditScript:
    """Tests for the command line entry point."""

    def test_clean_file(self, script, tmp_path, page, capsys):
        """No findings exits 0 and prints nothing."""
        path = tmp_path / "ok.html"
        path.write_text(page("<main>m</main>"), encoding="utf-8")

        assert script.main([str(path)]) == 0
        assert capsys.readouterr().out == ""

    def test_findings_printed(self, script, tmp_path, page, capsys):
        """Each finding is printed as path:line: severity: message."""
        path = tmp_path / "bad.html"
        path.write_text(
            page("<header>h</header>", "<aside>a</aside>", "<main>m</main>"),
            encoding="utf-8",
        )

        assert script.main([str(path)]) == 1
        out = capsys.readouterr().out
        assert f"{path}:" in out
        assert "hint: Main content should appear first" in out

    def test_json_output(self, script, tmp_path, page, capsys):
        """--json prints reports keyed by path."""
        path = tmp_path / "empty.html"
        path.write_text(page(""), encoding="utf-8")

        assert script.main(["--json", str(path)]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data[str(path)]["findings"][0]["type"] == "missing_main"

    def test_missing_file(self, script, tmp_path):
        """Unreadable files exit 2."""
        assert script.main([str(tmp_path / "nope.html")]) == 2

    def test_undecodable_file_skipped(self, script, tmp_path, page, capsys):
        """A file that is not UTF-8 exits 2 and the remaining files are still audited."""
        bad = tmp_path / "latin1.html"
        bad.write_bytes("<body><main>café</main></body>".encode("latin-1"))
        good = tmp_path / "good.html"
        good.write_text(page(""), encoding="utf-8")

        assert script.main(["--json", str(bad), str(good)]) == 2
        data = json.loads(capsys.readouterr().out)
        assert str(bad) not in data
        assert data[str(good)]["findings"][0]["type"] == "missing_main"
