"""Line classification for OpenFOAM dictionaries.

Each trimmed line is matched against a fixed-priority tuple of rules; the
first rule returning a ``LineMatch`` wins. Lines no rule accepts produce no
outline node.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .patterns import (
    BLOCK_DETAIL,
    BOUNDARY_DETAIL,
    BOUNDARY_PATCH_NAMES,
    COMMENT_PREFIXES,
    HEADER_DETAIL,
    HEADER_NAME,
    KEY_KIND_OVERRIDES,
    KEY_VALUE_RE,
    LIST_DETAIL,
    LIST_RE,
    NAMED_BLOCK_RE,
    RESERVED_BLOCK_RE,
    STRUCT_BLOCK_NAMES,
    UNIT_RE,
)
from .types import SymbolKind

logger = logging.getLogger(__name__)

BracePeek = Callable[[], bool]


class LineCategory(Enum):
    RESERVED_BLOCK = "reserved_block"
    NAMED_BLOCK = "named_block"
    LIST = "list"
    HEADER = "header"
    UNIT_ASSIGNMENT = "unit_assignment"
    KEY_VALUE = "key_value"

    @property
    def opens_braces(self) -> bool:
        return self in {LineCategory.RESERVED_BLOCK, LineCategory.NAMED_BLOCK}


@dataclass(frozen=True)
class LineMatch:
    """Classification result for one line."""

    category: LineCategory
    name: str
    detail: str
    kind: SymbolKind


def is_blank_or_comment(stripped: str) -> bool:
    """Return whether a trimmed line contributes nothing to the outline."""
    return not stripped or stripped.startswith(COMMENT_PREFIXES)


def block_kind_for_name(name: str) -> tuple[SymbolKind, str]:
    """Resolve ``(kind, detail)`` for a named ``{}`` block."""
    if name in STRUCT_BLOCK_NAMES:
        return SymbolKind.STRUCT, name
    if name in BOUNDARY_PATCH_NAMES:
        return SymbolKind.INTERFACE_BLOCK, BOUNDARY_DETAIL
    return SymbolKind.OBJECT_BLOCK, BLOCK_DETAIL


def _match_reserved_block(text: str, brace_follows: BracePeek) -> LineMatch | None:
    match = RESERVED_BLOCK_RE.match(text)
    if match is None:
        return None
    # `internalField;` style statements are not blocks.
    if text.endswith(";") and "{" not in text:
        return None
    name = match.group(1)
    return LineMatch(LineCategory.RESERVED_BLOCK, name, name, SymbolKind.STRUCT)


def _match_named_block(text: str, brace_follows: BracePeek) -> LineMatch | None:
    match = NAMED_BLOCK_RE.match(text)
    if match is None:
        return None
    name = match.group(1)
    if "{" not in text and not brace_follows():
        logger.debug("bare identifier %r has no brace within the lookahead window", name)
        return None
    kind, detail = block_kind_for_name(name)
    return LineMatch(LineCategory.NAMED_BLOCK, name, detail, kind)


def _match_list(text: str, brace_follows: BracePeek) -> LineMatch | None:
    match = LIST_RE.match(text)
    if match is None:
        return None
    return LineMatch(LineCategory.LIST, match.group(1), LIST_DETAIL, SymbolKind.ARRAY_LIST)


def _match_header(text: str, brace_follows: BracePeek) -> LineMatch | None:
    if text != HEADER_NAME:
        return None
    return LineMatch(LineCategory.HEADER, HEADER_NAME, HEADER_DETAIL, SymbolKind.FILE_HEADER)


def _match_unit_assignment(text: str, brace_follows: BracePeek) -> LineMatch | None:
    match = UNIT_RE.match(text)
    if match is None:
        return None
    return LineMatch(
        LineCategory.UNIT_ASSIGNMENT,
        match.group(1),
        match.group(2).strip(),
        SymbolKind.CONSTANT_UNIT,
    )


def _match_key_value(text: str, brace_follows: BracePeek) -> LineMatch | None:
    match = KEY_VALUE_RE.match(text)
    if match is None:
        return None
    name = match.group(1)
    kind = KEY_KIND_OVERRIDES.get(name, SymbolKind.PROPERTY)
    return LineMatch(LineCategory.KEY_VALUE, name, match.group(2).strip(), kind)


LINE_RULES: tuple[Callable[[str, BracePeek], LineMatch | None], ...] = (
    _match_reserved_block,
    _match_named_block,
    _match_list,
    _match_header,
    _match_unit_assignment,
    _match_key_value,
)


def _no_brace() -> bool:
    return False


def classify_line(text: str, brace_follows: BracePeek = _no_brace) -> LineMatch | None:
    """Classify one trimmed line.

    ``brace_follows`` is consulted only for a bare identifier line and reports
    whether its opening brace appears within the lookahead window.
    """
    if is_blank_or_comment(text):
        return None
    for rule in LINE_RULES:
        result = rule(text, brace_follows)
        if result is not None:
            return result
    return None
