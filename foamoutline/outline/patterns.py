"""Line patterns and keyword tables for OpenFOAM dictionary outlines."""

from __future__ import annotations

import re

from .types import SymbolKind

COMMENT_PREFIXES: tuple[str, ...] = ("//", "/*")

# Physical lines inspected after a bare identifier when looking for its `{`.
BRACE_LOOKAHEAD_LINES = 4

HEADER_NAME = "FoamFile"

RESERVED_BLOCK_RE = re.compile(
    r"^(edges|faces|points|internalField|boundary)\s*(\{|$|;)",
    re.IGNORECASE | re.ASCII,
)
NAMED_BLOCK_RE = re.compile(r"^([a-zA-Z]\w*)\s*(\{|$)", re.ASCII)
LIST_RE = re.compile(r"^(\w+)\s*\($", re.ASCII)
UNIT_RE = re.compile(r"^(\w+)\s+\[([^\]]+)\][^;{}]*;", re.ASCII)
KEY_VALUE_RE = re.compile(r"^([a-zA-Z][\w.]*)\s+([^;{}]+);", re.ASCII)

STRUCT_BLOCK_NAMES = frozenset({"boundary", "faces", "points", "edges", "internalField"})
BOUNDARY_PATCH_NAMES = frozenset({"frontAndBack", "inlet", "outlet", "walls", "symmetry"})

KEY_KIND_OVERRIDES: dict[str, SymbolKind] = {
    "class": SymbolKind.CLASS_LIKE,
    "object": SymbolKind.CLASS_LIKE,
    "version": SymbolKind.CONSTANT_LITERAL,
    "format": SymbolKind.CONSTANT_LITERAL,
    "location": SymbolKind.FILE_HEADER,
}

BLOCK_DETAIL = "block"
BOUNDARY_DETAIL = "boundary"
HEADER_DETAIL = "header"
LIST_DETAIL = "list"
