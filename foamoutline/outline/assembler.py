"""Indentation-driven tree assembly for outline nodes."""

from __future__ import annotations

from .types import SymbolNode


class OutlineAssembler:
    """Fold ``(node, indent)`` pairs into a nested outline in one forward pass.

    A node closes every open ancestor whose indent is at least its own; it
    then becomes a child of the remaining top of the stack, or a root when
    nothing remains open.
    """

    def __init__(self) -> None:
        self.roots: list[SymbolNode] = []
        self._stack: list[tuple[SymbolNode, int]] = []

    def insert(self, node: SymbolNode, indent: int) -> None:
        while self._stack and self._stack[-1][1] >= indent:
            self._stack.pop()

        if self._stack:
            self._stack[-1][0].children.append(node)
        else:
            self.roots.append(node)
        self._stack.append((node, indent))

    @property
    def open_nodes(self) -> list[SymbolNode]:
        """Currently open ancestors, outermost first."""
        return [node for node, _indent in self._stack]
