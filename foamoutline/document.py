"""Read-only line view over an OpenFOAM dictionary.

Mirrors the minimal text-document surface an editor host exposes:
line count, per-line text, line ranges, and indentation columns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line/character location."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Inclusive start/end position pair."""

    start: Position
    end: Position

    @classmethod
    def for_lines(cls, start_line: int, end_line: int, end_character: int) -> "Range":
        return cls(Position(start_line, 0), Position(end_line, end_character))

    def contains(self, other: "Range") -> bool:
        """Return whether ``other`` lies fully inside this range."""
        return self.start <= other.start and other.end <= self.end

    def contains_line(self, line: int) -> bool:
        return self.start.line <= line <= self.end.line


@dataclass(frozen=True)
class TextLine:
    """One physical line of a document."""

    line_number: int
    text: str

    @property
    def range(self) -> Range:
        return Range.for_lines(self.line_number, self.line_number, len(self.text))

    @property
    def first_non_whitespace_character_index(self) -> int:
        return len(self.text) - len(self.text.lstrip())

    @property
    def is_empty_or_whitespace(self) -> bool:
        return not self.text.strip()


class TextDocument:
    """Immutable snapshot of a document's lines.

    Splitting follows editor semantics: ``\\n``, ``\\r\\n`` and ``\\r`` each end
    a line, and a trailing line break leaves a final empty line.
    """

    def __init__(self, lines: list[str], path: Path | None = None) -> None:
        self._lines = tuple(lines) if lines else ("",)
        self.path = path

    @classmethod
    def from_text(cls, text: str, path: Path | None = None) -> "TextDocument":
        return cls(_LINE_BREAK_RE.split(text), path=path)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> TextLine:
        if index < 0 or index >= len(self._lines):
            raise IndexError(f"line {index} out of range (0..{len(self._lines) - 1})")
        return TextLine(index, self._lines[index])

    def __iter__(self):
        for index, text in enumerate(self._lines):
            yield TextLine(index, text)

    def __len__(self) -> int:
        return len(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def load_document(path: Path) -> TextDocument:
    """Read ``path`` into a ``TextDocument`` snapshot."""
    return TextDocument.from_text(read_text(path), path=path)
