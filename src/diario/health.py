"""
Health check module for Diario.

Reports whether the journal can start and write.
"""

import os
from pathlib import Path

from diario.config import DiarioConfig, get_config_path, get_notes_path, load_config
from diario.errors import ConfigError


def check_config() -> tuple[str, str]:
    """Check config.toml status."""
    config_path = get_config_path()
    if not config_path.exists():
        return "-", "Defaults (no config.toml)"

    try:
        load_config()
        return "✓", f"OK ({config_path})"
    except ConfigError as e:
        return "✗", f"Error: {e}"


def check_notes_file(path: Path) -> tuple[str, str]:
    """Check the notes file can be loaded."""
    if not path.exists():
        return "✗", f"Not found ({path})"

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError:
        return "✗", "Not valid UTF-8"
    except OSError as e:
        return "✗", f"Error: {e}"

    lines = text.count("\n")
    size = len(text.encode("utf-8"))
    return "✓", f"OK ({size} bytes, {lines} lines)"


def check_writable(path: Path) -> tuple[str, str]:
    """Check the notes file can be rewritten in place."""
    if not path.exists():
        return "-", "N/A"

    if os.access(path, os.W_OK):
        return "✓", "Writable"
    return "✗", "Read-only"


def run_health_check() -> dict[str, tuple[str, str]]:
    """Run all health checks."""
    config_status = check_config()

    if config_status[0] == "✗":
        # Broken config: resolve the notes path from env or defaults
        notes_path = get_notes_path(DiarioConfig())
    else:
        notes_path = get_notes_path()

    return {
        "Config": config_status,
        "Notes file": check_notes_file(notes_path),
        "Writable": check_writable(notes_path),
    }


def format_health_report(checks: dict[str, tuple[str, str]]) -> str:
    """Format health check results."""
    lines = ["Diario Health Check", "-" * 40]

    for name, (status, message) in checks.items():
        lines.append(f"{status} {name}: {message}")

    return "\n".join(lines)
