"""Document-symbol provider for OpenFOAM dictionaries.

One forward pass over the document's lines: classify each line, resolve
the span of blocks and lists, and fold the node into the outline tree.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from ..document import Range, TextDocument, TextLine, load_document
from .assembler import OutlineAssembler
from .classifier import LineCategory, LineMatch, classify_line, is_blank_or_comment
from .spans import brace_follows, find_closing_line, find_header_brace_line
from .types import SymbolNode

logger = logging.getLogger(__name__)

LANGUAGE_ID = "openfoam"


def _resolve_end_line(document: TextDocument, line: TextLine, text: str, result: LineMatch) -> int:
    """Return the last line covered by the construct ``result`` opens."""
    index = line.line_number
    if result.category.opens_braces:
        return find_closing_line(document, index + 1, "{", "}", 1 if "{" in text else 0)
    if result.category is LineCategory.LIST:
        return find_closing_line(document, index + 1, "(", ")", 1)
    if result.category is LineCategory.HEADER:
        brace_line = find_header_brace_line(document, index)
        if brace_line is None:
            return index
        return find_closing_line(document, brace_line, "{", "}", 0)
    return index


def provide_document_symbols(document: TextDocument) -> list[SymbolNode]:
    """Build the outline tree for ``document`` and return its root nodes."""
    assembler = OutlineAssembler()
    node_count = 0
    for line in document:
        text = line.text.strip()
        if is_blank_or_comment(text):
            continue

        result = classify_line(text, partial(brace_follows, document, line.line_number))
        if result is None:
            continue

        end_line = _resolve_end_line(document, line, text, result)
        node = SymbolNode(
            name=result.name,
            detail=result.detail,
            kind=result.kind,
            span=Range(line.range.start, document.line_at(end_line).range.end),
            selection_anchor=line.range,
        )
        assembler.insert(node, line.first_non_whitespace_character_index)
        node_count += 1

    logger.debug(
        "outlined %d lines into %d nodes (%d roots)",
        document.line_count,
        node_count,
        len(assembler.roots),
    )
    return assembler.roots


class FoamSymbolProvider:
    """Provider object for hosts that register symbol providers per language."""

    language_id = LANGUAGE_ID

    def provide_document_symbols(self, document: TextDocument) -> list[SymbolNode]:
        return provide_document_symbols(document)


def collect_outline(path: Path) -> tuple[list[SymbolNode], str | None]:
    """Collect outline symbols for a dictionary file.

    Returns ``(symbols, error_message)``; read failures are reported through
    the message rather than raised.
    """
    target = path.resolve()
    if not target.is_file():
        return [], "Symbol outline is available for files only."

    try:
        document = load_document(target)
    except OSError as exc:
        return [], f"Failed to read source for symbols: {exc}"

    return provide_document_symbols(document), None
