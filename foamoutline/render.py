"""Text renderers for outline trees.

Plain trees and picker rows use a small ANSI palette per symbol kind; JSON
output is coloured with Pygments.
"""

from __future__ import annotations

import json

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE
from .outline.types import OutlineEntry, SymbolKind, SymbolNode

RESET = "\033[0m"
DIM = "\033[2m"

KIND_COLORS: dict[SymbolKind, str] = {
    SymbolKind.STRUCT: "\033[1;38;5;81m",
    SymbolKind.OBJECT_BLOCK: "\033[1;34m",
    SymbolKind.INTERFACE_BLOCK: "\033[38;5;214m",
    SymbolKind.ARRAY_LIST: "\033[38;5;42m",
    SymbolKind.FILE_HEADER: "\033[38;5;229m",
    SymbolKind.CONSTANT_UNIT: "\033[38;5;110m",
    SymbolKind.PROPERTY: "\033[38;5;252m",
    SymbolKind.CLASS_LIKE: "\033[38;5;177m",
    SymbolKind.CONSTANT_LITERAL: "\033[38;5;109m",
}

_FORMATTERS: dict[str, Terminal256Formatter] = {}


def _line_span_label(node: SymbolNode) -> str:
    start = node.span.start.line + 1
    end = node.span.end.line + 1
    return f"L{start}" if start == end else f"L{start}-{end}"


def render_tree(symbols: list[SymbolNode], no_color: bool = False, indent: str = "  ") -> str:
    """Render the outline as an indented tree, one node per line."""
    out: list[str] = []

    def emit(node: SymbolNode, depth: int) -> None:
        name = node.name
        meta = node.kind.value
        if node.detail:
            meta += f" {node.detail}"
        lines = _line_span_label(node)
        if not no_color:
            name = KIND_COLORS[node.kind] + name + RESET
            meta = DIM + meta + RESET
            lines = DIM + lines + RESET
        out.append(f"{indent * depth}{name}  {meta}  {lines}\n")
        for child in node.children:
            emit(child, depth + 1)

    for root in symbols:
        emit(root, 0)
    return "".join(out)


def render_entries(entries: list[OutlineEntry], no_color: bool = False) -> str:
    """Render picker rows, one label per line."""
    out: list[str] = []
    for entry in entries:
        if no_color:
            out.append(entry.label + "\n")
        else:
            out.append(KIND_COLORS[entry.kind] + entry.label + RESET + "\n")
    return "".join(out)


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    """Return cached Pygments terminal formatter for style name."""
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def render_json(symbols: list[SymbolNode], style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Serialize the outline as a JSON array of nested node objects."""
    text = json.dumps([node.to_dict() for node in symbols], indent=2) + "\n"
    if no_color:
        return text
    return highlight(text, JsonLexer(), _formatter_for_style(normalize_style(style)))
