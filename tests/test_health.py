"""Tests for diario.health."""

from diario.health import (
    check_config,
    check_notes_file,
    check_writable,
    format_health_report,
    run_health_check,
)


class TestChecks:
    def test_config_defaults(self):
        status, message = check_config()
        assert status == "-"
        assert "Defaults" in message

    def test_config_ok(self, config_file):
        config_file("[diario]\nclear_screen = false\n")
        assert check_config()[0] == "✓"

    def test_config_broken(self, config_file):
        config_file("not = [toml")
        assert check_config()[0] == "✗"

    def test_config_unknown_log_level(self, config_file):
        config_file('[logging]\nlevel = "LOUD"\n')
        status, message = check_config()
        assert status == "✗"
        assert "LOUD" in message

    def test_notes_file_ok(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("olá\nmundo\n", encoding="utf-8")
        assert check_notes_file(path) == ("✓", "OK (11 bytes, 2 lines)")

    def test_notes_file_missing(self, tmp_path):
        status, message = check_notes_file(tmp_path / "nope.txt")
        assert status == "✗"
        assert "Not found" in message

    def test_notes_file_bad_encoding(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"\xff")
        assert check_notes_file(path) == ("✗", "Not valid UTF-8")

    def test_writable_missing(self, tmp_path):
        assert check_writable(tmp_path / "nope.txt")[0] == "-"

    def test_writable(self, notes_path):
        assert check_writable(notes_path) == ("✓", "Writable")


class TestReport:
    def test_run_uses_env_path(self, notes_path, monkeypatch):
        monkeypatch.setenv("DIARIO_NOTES", str(notes_path))
        checks = run_health_check()
        assert set(checks) == {"Config", "Notes file", "Writable"}
        assert checks["Notes file"][0] == "✓"

    def test_run_with_broken_config_still_checks_file(self, config_file, notes_path, monkeypatch):
        config_file("broken = ")
        monkeypatch.setenv("DIARIO_NOTES", str(notes_path))
        checks = run_health_check()
        assert checks["Config"][0] == "✗"
        assert checks["Notes file"][0] == "✓"

    def test_format(self):
        report = format_health_report({"Config": ("-", "Defaults"), "Notes file": ("✗", "Not found")})
        assert report.splitlines() == [
            "Diario Health Check",
            "-" * 40,
            "- Config: Defaults",
            "✗ Notes file: Not found",
        ]
