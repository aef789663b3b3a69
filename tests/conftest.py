"""Shared fixtures for diario tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config and any DIARIO_NOTES override."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("DIARIO_NOTES", raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Return a writer for $XDG_CONFIG_HOME/diario/config.toml."""
    path = tmp_path / "xdg" / "diario" / "config.toml"

    def write(content: str):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def notes_path(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("", encoding="utf-8")
    return path
