"""A small file logger that can be switched on and off."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional


class LogFile:
    """Writes values to ``<log_dir>/<filename>.log`` while enabled.

    Enabling (re)opens the file, truncating it. Writes while disabled are
    silently dropped.
    """

    def __init__(self, filename: str, enable: bool = False, log_dir: str | Path = "log") -> None:
        self._log_dir = Path(log_dir)
        self._path = self._log_dir / f"{filename}.log"
        self._file: Optional[IO[str]] = None
        if enable:
            self.enable()

    @property
    def path(self) -> Path:
        """Path of the log file."""
        return self._path

    def _open(self) -> None:
        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            self._file = open(self._path, "w", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Failed to open log file: {self._path}") from exc

    def _close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def write(self, *args: object) -> "LogFile":
        """Write each value's string form; a no-op while disabled."""
        if self._file is not None:
            for value in args:
                self._file.write(str(value))
        return self

    def enable(self) -> None:
        """Open the log file for writing if it is not already open."""
        if self._file is None:
            self._open()

    def disable(self) -> None:
        """Close the log file; later writes are dropped."""
        self._close()

    def set_name(self, filename: str) -> None:
        """Change the log file name, reopening it if logging is enabled."""
        was_enabled = bool(self)
        self._close()
        self._path = self._log_dir / f"{filename}.log"
        if was_enabled:
            self._open()

    def __bool__(self) -> bool:
        return self._file is not None

    def __enter__(self) -> "LogFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disable()