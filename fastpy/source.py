"""Source file loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class SourceError(RuntimeError):
    """Raised when a source file cannot be loaded."""


class SourceNotFoundError(SourceError):
    """Raised when the source path does not exist."""


class SourceUnreadableError(SourceError):
    """Raised when the source exists but cannot be read as UTF-8 text."""


class SourceWriteError(SourceError):
    """Raised when formatted text cannot be written back."""


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Raw bytes and decoded text of one file, fixed for the whole run."""

    path: Path
    data: bytes = field(repr=False)
    text: str = field(repr=False)

    @property
    def line_count(self) -> int:
        """Number of lines, where a final terminator does not open a new line."""
        if not self.text:
            return 0
        return self.text.count("\n") + (0 if self.text.endswith("\n") else 1)


def source_from_text(text: str, path: Path | str = "<string>") -> SourceFile:
    """Build a SourceFile from in-memory text."""
    return SourceFile(path=Path(path), data=text.encode("utf-8"), text=text)


def load_source(path: Path) -> SourceFile:
    """Read a file as UTF-8, keeping its bytes and line endings untouched."""
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise SourceNotFoundError(f"File not found: {path}") from None
    except IsADirectoryError:
        raise SourceUnreadableError(f"Not a file: {path}") from None
    except OSError as exc:
        raise SourceUnreadableError(f"Failed to read file: {path} ({exc.strerror})") from exc

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceUnreadableError(f"File is not valid UTF-8: {path} ({exc.reason})") from exc
    return SourceFile(path=path, data=data, text=text)


def write_source(path: Path, text: str) -> None:
    """Overwrite ``path`` in place so its permissions are kept."""
    try:
        path.write_bytes(text.encode("utf-8"))
    except OSError as exc:
        raise SourceWriteError(f"Failed to write changes to file: {path} ({exc.strerror})") from exc
