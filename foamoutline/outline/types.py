"""Shared outline datatypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..document import Range


class SymbolKind(Enum):
    """Semantic role of an outline node."""

    STRUCT = "struct"
    OBJECT_BLOCK = "object"
    INTERFACE_BLOCK = "interface"
    ARRAY_LIST = "array"
    FILE_HEADER = "file"
    CONSTANT_UNIT = "unit"
    PROPERTY = "property"
    CLASS_LIKE = "class"
    CONSTANT_LITERAL = "constant"

    @property
    def is_container(self) -> bool:
        """Kinds whose span may cover several lines."""
        return self in _CONTAINER_KINDS


_CONTAINER_KINDS = frozenset(
    {
        SymbolKind.STRUCT,
        SymbolKind.OBJECT_BLOCK,
        SymbolKind.INTERFACE_BLOCK,
        SymbolKind.ARRAY_LIST,
        SymbolKind.FILE_HEADER,
    }
)


@dataclass
class SymbolNode:
    """One outline node; ``children`` keep document order."""

    name: str
    detail: str
    kind: SymbolKind
    span: Range
    selection_anchor: Range
    children: list["SymbolNode"] = field(default_factory=list)

    def walk(self):
        """Yield this node and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "detail": self.detail,
            "kind": self.kind.value,
            "span": _range_to_dict(self.span),
            "selection": _range_to_dict(self.selection_anchor),
            "children": [child.to_dict() for child in self.children],
        }


def _range_to_dict(value: Range) -> dict[str, list[int]]:
    return {
        "start": [value.start.line, value.start.character],
        "end": [value.end.line, value.end.character],
    }


@dataclass(frozen=True)
class OutlineEntry:
    """Flattened outline row used by pickers and the symbol palette."""

    kind: SymbolKind
    name: str
    detail: str
    line: int
    column: int
    depth: int
    path: str
    label: str
