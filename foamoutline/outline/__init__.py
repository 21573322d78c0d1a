"""Public API surface for OpenFOAM dictionary outlines.

This package groups the scanning pipeline:
- line classification and brace lookahead
- delimiter matching for block and list spans
- indentation-driven tree assembly and navigation helpers

Callers import from ``foamoutline.outline`` without depending on internal layout.
"""

from __future__ import annotations

from .assembler import OutlineAssembler
from .classifier import LineCategory, LineMatch, classify_line, is_blank_or_comment
from .navigation import breadcrumb, enclosing_symbol_chain, flatten_outline, next_symbol_start_line
from .provider import LANGUAGE_ID, FoamSymbolProvider, collect_outline, provide_document_symbols
from .spans import brace_follows, find_closing_line, find_header_brace_line
from .types import OutlineEntry, SymbolKind, SymbolNode

__all__ = [
    "LANGUAGE_ID",
    "FoamSymbolProvider",
    "LineCategory",
    "LineMatch",
    "OutlineAssembler",
    "OutlineEntry",
    "SymbolKind",
    "SymbolNode",
    "brace_follows",
    "breadcrumb",
    "classify_line",
    "collect_outline",
    "enclosing_symbol_chain",
    "find_closing_line",
    "find_header_brace_line",
    "flatten_outline",
    "is_blank_or_comment",
    "next_symbol_start_line",
    "provide_document_symbols",
]
