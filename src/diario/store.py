"""
Note store for Diario.

The whole journal is one UTF-8 text file. Notes are concatenated as typed,
with no separator, header or metadata of our own.

Reads always go back to disk. Writes rewrite the full file and only then
update the in-memory copy, so the store never holds text that failed to land.
"""

import logging
import os
import tempfile
from pathlib import Path

from diario.errors import ReadFailure, StartupFileError, WriteFailure

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    # newline="" keeps the file's line terminators untouched
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _overwrite(path: Path, data: bytes) -> None:
    """Truncate and rewrite path in place. Not atomic."""
    with open(path, "wb") as f:
        f.write(data)


def _replace(path: Path, data: bytes) -> None:
    """Write to a sibling temp file, fsync it, then rename it over path."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class NoteStore:
    """Append-only journal backed by a single text file."""

    def __init__(self, path: Path, log: str, atomic: bool = False):
        self._path = path
        self._log = log
        self._atomic = atomic

    @classmethod
    def open(cls, path: Path | str, atomic: bool = False) -> "NoteStore":
        """
        Load the notes file into memory.

        The file must already exist. There is no auto-create: a missing or
        unreadable file is a startup failure.

        Args:
            path: The backing notes file
            atomic: Replace the file via temp file + rename on every append

        Raises:
            StartupFileError: The file is missing, unreadable or not UTF-8
        """
        path = Path(path)
        try:
            log = _read_text(path)
        except FileNotFoundError as e:
            raise StartupFileError(path, "file not found") from e
        except UnicodeDecodeError as e:
            raise StartupFileError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise StartupFileError(path, e.strerror or str(e)) from e

        logger.debug(f"Opened {path} ({len(log)} chars, atomic={atomic})")
        return cls(path, log, atomic=atomic)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def log(self) -> str:
        """The last successfully written log, as held in memory."""
        return self._log

    def append(self, text: str) -> None:
        """
        Append text to the journal.

        The full log is rewritten on every call. The in-memory log only moves
        forward once the write succeeds. A failed non-atomic write may leave
        the file itself truncated.

        Raises:
            WriteFailure: The file could not be rewritten
        """
        new_log = self._log + text
        # Encode first: opening in "wb" truncates the file
        try:
            data = new_log.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.debug(f"Note for {self._path} is not encodable: {e}")
            raise WriteFailure(self._path, f"note is not valid UTF-8 ({e.reason})") from e

        write = _replace if self._atomic else _overwrite
        try:
            write(self._path, data)
        except OSError as e:
            logger.debug(f"Write to {self._path} failed: {e}")
            raise WriteFailure(self._path, e.strerror or str(e)) from e

        self._log = new_log
        logger.debug(f"Appended {len(text)} chars to {self._path}")

    def read_all(self) -> str:
        """
        Return the journal as it currently is on disk.

        Raises:
            ReadFailure: The file could not be read back
        """
        try:
            log = _read_text(self._path)
        except UnicodeDecodeError as e:
            logger.debug(f"Read of {self._path} failed: {e}")
            raise ReadFailure(self._path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            logger.debug(f"Read of {self._path} failed: {e}")
            raise ReadFailure(self._path, e.strerror or str(e)) from e

        logger.debug(f"Read {len(log)} chars from {self._path}")
        return log
