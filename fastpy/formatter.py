"""Text formatter built from independent line-level and file-level passes.

The formatter never consults the syntax tree, so it works on files that do
not parse cleanly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

LinePass = Callable[[str], str]
FilePass = Callable[[str], str]

_TRAILING_WS = " \t"


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Formatted text and whether it differs from the input."""

    text: str
    changed: bool


def strip_trailing_whitespace(line: str) -> str:
    """Drop spaces and tabs at the end of one line (terminator excluded)."""
    return line.rstrip(_TRAILING_WS)


DEFAULT_LINE_PASSES: tuple[LinePass, ...] = (strip_trailing_whitespace,)
DEFAULT_FILE_PASSES: tuple[FilePass, ...] = ()


class Formatter:
    """Applies line passes to each line, then file passes to the whole text."""

    def __init__(
        self,
        line_passes: Sequence[LinePass] = DEFAULT_LINE_PASSES,
        file_passes: Sequence[FilePass] = DEFAULT_FILE_PASSES,
    ) -> None:
        self.line_passes = tuple(line_passes)
        self.file_passes = tuple(file_passes)

    def format(self, text: str) -> FormatResult:
        pieces: list[str] = []
        for content, terminator in split_lines(text):
            for line_pass in self.line_passes:
                content = line_pass(content)
            pieces.append(content)
            pieces.append(terminator)
        formatted = "".join(pieces)

        for file_pass in self.file_passes:
            formatted = file_pass(formatted)
        return FormatResult(text=formatted, changed=formatted != text)


def split_lines(text: str) -> list[tuple[str, str]]:
    """Split text into ``(content, terminator)`` pairs.

    Only ``\\n`` and ``\\r\\n`` end a line. The last pair has an empty
    terminator when the text does not end with a newline; text that ends
    with a newline yields no trailing empty pair.
    """
    lines: list[tuple[str, str]] = []
    position = 0
    while position < len(text):
        newline = text.find("\n", position)
        if newline == -1:
            lines.append((text[position:], ""))
            break
        if newline > position and text[newline - 1] == "\r":
            lines.append((text[position : newline - 1], "\r\n"))
        else:
            lines.append((text[position:newline], "\n"))
        position = newline + 1
    return lines


def format_code(text: str) -> FormatResult:
    """Format text with the default pass pipeline."""
    return Formatter().format(text)
