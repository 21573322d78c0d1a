"""Public package surface for foamoutline.

Exports ``provide_document_symbols`` for hosts and ``main`` for programmatic
CLI invocation. Most implementation lives in ``foamoutline.outline``.
"""

from __future__ import annotations

from .document import Position, Range, TextDocument
from .outline import FoamSymbolProvider, SymbolKind, SymbolNode, provide_document_symbols


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "FoamSymbolProvider",
    "Position",
    "Range",
    "SymbolKind",
    "SymbolNode",
    "TextDocument",
    "main",
    "provide_document_symbols",
]
