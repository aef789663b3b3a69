"""
Exception types for Diario.

Every failure the journal can hit is an I/O failure of some kind and is
fatal to the session. The CLI catches DiarioError and turns it into exit 1.
"""

from pathlib import Path


class DiarioError(Exception):
    """Base class for all Diario failures."""


class StartupFileError(DiarioError):
    """The notes file could not be loaded at launch."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open notes file {path}: {reason}")


class WriteFailure(DiarioError):
    """Rewriting the notes file failed. The in-memory log was left as it was."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write notes file {path}: {reason}")


class ReadFailure(DiarioError):
    """Reloading the notes file failed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read notes file {path}: {reason}")


class InputChannelClosed(DiarioError):
    """End of input reached on the console before an exit command."""

    def __init__(self) -> None:
        super().__init__("Input closed before exit was chosen")


class ConfigError(DiarioError):
    """config.toml is unreadable or fails validation."""


class InputChannelError(DiarioError):
    """The console could not be read (bad encoding or an OS error)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Cannot read console input: {reason}")
