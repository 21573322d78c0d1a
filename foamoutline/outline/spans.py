"""Delimiter matching and forward peeks over a document."""

from __future__ import annotations

import logging

from ..document import TextDocument
from .classifier import is_blank_or_comment
from .patterns import BRACE_LOOKAHEAD_LINES

logger = logging.getLogger(__name__)


def find_closing_line(
    document: TextDocument,
    start_line: int,
    open_char: str,
    close_char: str,
    initial_count: int = 0,
) -> int:
    """Return the index of the line holding the delimiter that balances the opener.

    ``initial_count`` is 1 when the opener sat on the triggering line and 0
    when it is expected on a following line. The first line that leaves the
    count at zero closes the construct, even when no opener was seen there:
    ``edges`` followed by ``(`` ends on the ``(`` line. Unbalanced input
    resolves to the document's last line.
    """
    open_count = initial_count
    for index in range(start_line, document.line_count):
        text = document.line_at(index).text
        stripped = text.strip()
        if open_count == 0 and stripped == open_char:
            open_count = 1
            continue
        if open_count == 0 and stripped.startswith(open_char):
            open_count = 1

        open_count += text.count(open_char)
        open_count -= text.count(close_char)
        if open_count == 0:
            return index

    last_line = document.line_count - 1
    logger.debug(
        "unbalanced %r%r from line %d, falling back to last line %d",
        open_char,
        close_char,
        start_line,
        last_line,
    )
    return last_line


def brace_follows(document: TextDocument, line_index: int, window: int = BRACE_LOOKAHEAD_LINES) -> bool:
    """Return whether the first significant line after ``line_index`` opens a brace.

    Only ``window`` physical lines are inspected; blank and comment lines are
    passed over but still count against the window.
    """
    stop = min(line_index + 1 + window, document.line_count)
    for index in range(line_index + 1, stop):
        stripped = document.line_at(index).text.strip()
        if stripped.startswith("{"):
            return True
        if not is_blank_or_comment(stripped):
            return False
    return False


def find_header_brace_line(document: TextDocument, line_index: int) -> int | None:
    """Locate the line containing the header's ``{`` past blank/comment lines."""
    for index in range(line_index + 1, document.line_count):
        text = document.line_at(index).text
        if "{" in text:
            return index
        if not is_blank_or_comment(text.strip()):
            return None
    return None
