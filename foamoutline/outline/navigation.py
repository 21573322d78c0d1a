"""Navigation helpers built on a finished outline tree."""

from __future__ import annotations

from .types import OutlineEntry, SymbolKind, SymbolNode

PATH_SEPARATOR = "/"


def _format_label(kind: SymbolKind, path: str, line: int) -> str:
    """Build fixed-width picker label for an outline entry."""
    clean_path = path if len(path) <= 220 else (path[:217] + "...")
    return f"{kind.value:9} L{line + 1:>5}  {clean_path}"


def flatten_outline(symbols: list[SymbolNode], max_symbols: int = 2000) -> list[OutlineEntry]:
    """Flatten the tree depth-first into picker rows, in document order."""
    entries: list[OutlineEntry] = []
    pending: list[tuple[SymbolNode, int, str]] = [(node, 0, "") for node in reversed(symbols)]
    while pending and len(entries) < max_symbols:
        node, depth, parent_path = pending.pop()
        path = f"{parent_path}{PATH_SEPARATOR}{node.name}" if parent_path else node.name
        start = node.selection_anchor.start
        entries.append(
            OutlineEntry(
                kind=node.kind,
                name=node.name,
                detail=node.detail,
                line=start.line,
                column=start.character,
                depth=depth,
                path=path,
                label=_format_label(node.kind, path, start.line),
            )
        )
        for child in reversed(node.children):
            pending.append((child, depth + 1, path))
    return entries


def enclosing_symbol_chain(symbols: list[SymbolNode], line: int) -> list[SymbolNode]:
    """Return nodes whose span covers ``line`` (0-based), outermost first.

    When sibling spans overlap, the latest sibling starting at or before
    ``line`` wins.
    """
    chain: list[SymbolNode] = []
    candidates = symbols
    while candidates:
        covering = None
        for node in candidates:
            if node.span.start.line > line:
                break
            if node.span.contains_line(line):
                covering = node
        if covering is None:
            break
        chain.append(covering)
        candidates = covering.children
    return chain


def breadcrumb(symbols: list[SymbolNode], line: int, separator: str = " > ") -> str:
    """Join the enclosing chain of ``line`` into a display string."""
    return separator.join(node.name for node in enclosing_symbol_chain(symbols, line))


def next_symbol_start_line(symbols: list[SymbolNode], after_line: int) -> int | None:
    """Return the next block/list/header start line (1-based) after ``after_line``."""
    start_line = max(1, int(after_line))
    for root in symbols:
        for node in root.walk():
            node_line = node.selection_anchor.start.line + 1
            if node.kind.is_container and node_line > start_line:
                return node_line
    return None
