"""
Configuration management for Diario.

Uses XDG base directories:
- Config: ~/.config/diario/config.toml
- Data: notes.txt in the working directory (the journal itself)
"""

from pathlib import Path
from typing import Any
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from diario.errors import ConfigError

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_NOTES_PATH = Path("notes.txt")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class JournalSettings(BaseModel):
    """The [diario] table."""

    notes_path: str = Field(default=str(DEFAULT_NOTES_PATH), description="Backing file")
    atomic_writes: bool = Field(default=False, description="Write to a temp file, then rename")
    clear_screen: bool = Field(default=True, description="Emit ESC c between screens")


class LoggingSettings(BaseModel):
    """The [logging] table."""

    level: str = Field(default="WARNING", description="Root log level")
    file: str = Field(default="", description="Log file; empty means stderr")

    @field_validator("level")
    @classmethod
    def known_level(cls, value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    def level_name(self) -> str:
        return self.level.upper()


class DiarioConfig(BaseModel):
    """Schema for config.toml."""

    diario: JournalSettings = Field(default_factory=JournalSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/diario)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "diario"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_notes_path(config: DiarioConfig | None = None) -> Path:
    """Get the path to the notes file (DIARIO_NOTES, then config, then default)."""
    if env_path := os.environ.get("DIARIO_NOTES"):
        return Path(env_path).expanduser()
    if config is None:
        config = load_config()
    return Path(config.diario.notes_path).expanduser()


def load_config() -> DiarioConfig:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return DiarioConfig.model_validate(get_default_config())

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            raw = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        return DiarioConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "diario": {
            "notes_path": str(DEFAULT_NOTES_PATH),
            "atomic_writes": False,
            "clear_screen": True,
        },
        "logging": {
            "level": "WARNING",
            "file": "",
        },
    }
