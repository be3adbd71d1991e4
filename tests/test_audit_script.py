"""
Tests for scripts/audit_freshness.py - Command-line entry point
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "audit_freshness.py"


@pytest.fixture
def audit_script():
    spec = importlib.util.spec_from_file_location("audit_freshness", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestAuditScript:
    """Tests for main()."""

    def test_prints_summary(self, audit_script, write_export, sample_rows, capsys):
        path = write_export(sample_rows)
        assert audit_script.main(["--csv", str(path), "--as-of", "2025-06-15"]) == 0
        out = capsys.readouterr().out
        assert "Total articles: 4" in out
        assert "needs-update: 1" in out

    def test_writes_exports(self, audit_script, write_export, sample_rows, tmp_path):
        path = write_export(sample_rows)
        output_dir = tmp_path / "outputs"
        assert audit_script.main(["--csv", str(path), "--output-dir", str(output_dir)]) == 0
        assert (output_dir / "articles.json").exists()

    def test_missing_export_fails(self, audit_script, tmp_path, capsys):
        assert audit_script.main(["--csv", str(tmp_path / "missing.csv")]) == 1
        assert "missing.csv" in capsys.readouterr().err
