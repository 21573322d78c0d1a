"""Line classification rules and their priority order."""

from __future__ import annotations

import unittest

from foamoutline.outline.classifier import (
    LineCategory,
    block_kind_for_name,
    classify_line,
    is_blank_or_comment,
)
from foamoutline.outline.types import SymbolKind


def _brace(result: bool):
    calls: list[int] = []

    def peek() -> bool:
        calls.append(1)
        return result

    peek.calls = calls
    return peek


class ClassifierRuleTests(unittest.TestCase):
    def test_blank_and_comment_lines_are_skipped(self) -> None:
        for text in ("", "// comment", "/* block", "/*---*\\"):
            self.assertTrue(is_blank_or_comment(text))
            self.assertIsNone(classify_line(text, _brace(True)))
        self.assertFalse(is_blank_or_comment("a 1;"))

    def test_reserved_name_with_brace_is_struct(self) -> None:
        result = classify_line("boundary {")
        self.assertEqual(result.category, LineCategory.RESERVED_BLOCK)
        self.assertEqual(result.kind, SymbolKind.STRUCT)
        self.assertEqual((result.name, result.detail), ("boundary", "boundary"))

    def test_reserved_name_matches_case_insensitively_and_keeps_spelling(self) -> None:
        result = classify_line("Edges")
        self.assertEqual(result.category, LineCategory.RESERVED_BLOCK)
        self.assertEqual((result.name, result.detail), ("Edges", "Edges"))

    def test_bare_reserved_name_does_not_consult_lookahead(self) -> None:
        peek = _brace(False)
        result = classify_line("points", peek)
        self.assertEqual(result.category, LineCategory.RESERVED_BLOCK)
        self.assertEqual(peek.calls, [])

    def test_terminated_reserved_statement_is_not_a_block(self) -> None:
        self.assertIsNone(classify_line("internalField;"))

    def test_reserved_statement_with_value_falls_through_to_key_value(self) -> None:
        result = classify_line("internalField uniform 0;")
        self.assertEqual(result.category, LineCategory.KEY_VALUE)
        self.assertEqual(result.kind, SymbolKind.PROPERTY)
        self.assertEqual((result.name, result.detail), ("internalField", "uniform 0"))

    def test_named_block_with_brace_on_line(self) -> None:
        peek = _brace(False)
        result = classify_line("solvers {", peek)
        self.assertEqual(result.category, LineCategory.NAMED_BLOCK)
        self.assertEqual(result.kind, SymbolKind.OBJECT_BLOCK)
        self.assertEqual(result.detail, "block")
        self.assertEqual(peek.calls, [])

    def test_bare_identifier_needs_following_brace(self) -> None:
        with self.assertLogs("foamoutline.outline.classifier", level="DEBUG") as logs:
            self.assertIsNone(classify_line("solvers", _brace(False)))
        self.assertIn("'solvers'", logs.output[0])
        result = classify_line("solvers", _brace(True))
        self.assertEqual(result.category, LineCategory.NAMED_BLOCK)
        self.assertEqual(result.name, "solvers")

    def test_boundary_patch_names_are_interface_blocks(self) -> None:
        for name in ("frontAndBack", "inlet", "outlet", "walls", "symmetry"):
            result = classify_line(name, _brace(True))
            self.assertEqual(result.kind, SymbolKind.INTERFACE_BLOCK)
            self.assertEqual(result.detail, "boundary")

    def test_block_kind_lookup(self) -> None:
        self.assertEqual(block_kind_for_name("internalField"), (SymbolKind.STRUCT, "internalField"))
        self.assertEqual(block_kind_for_name("FoamFile"), (SymbolKind.OBJECT_BLOCK, "block"))
        self.assertEqual(block_kind_for_name("PIMPLE"), (SymbolKind.OBJECT_BLOCK, "block"))

    def test_list_opener_requires_paren_at_end_of_line(self) -> None:
        result = classify_line("vertices(")
        self.assertEqual(result.category, LineCategory.LIST)
        self.assertEqual(result.kind, SymbolKind.ARRAY_LIST)
        self.assertEqual((result.name, result.detail), ("vertices", "list"))
        self.assertEqual(classify_line("blocks (").name, "blocks")
        self.assertIsNone(classify_line("vertices ( 0 0 0"))

    def test_foamfile_with_nearby_brace_is_plain_block(self) -> None:
        for text, peek in (("FoamFile", _brace(True)), ("FoamFile {", _brace(False))):
            result = classify_line(text, peek)
            self.assertEqual(result.category, LineCategory.NAMED_BLOCK)
            self.assertEqual((result.kind, result.detail), (SymbolKind.OBJECT_BLOCK, "block"))

    def test_foamfile_without_nearby_brace_is_header(self) -> None:
        result = classify_line("FoamFile", _brace(False))
        self.assertEqual(result.category, LineCategory.HEADER)
        self.assertEqual(result.kind, SymbolKind.FILE_HEADER)
        self.assertEqual(result.detail, "header")

    def test_unit_assignment_detail_is_bracket_contents(self) -> None:
        result = classify_line("nu [0 2 -1 0 0 0 0] 1e-05;")
        self.assertEqual(result.category, LineCategory.UNIT_ASSIGNMENT)
        self.assertEqual(result.kind, SymbolKind.CONSTANT_UNIT)
        self.assertEqual((result.name, result.detail), ("nu", "0 2 -1 0 0 0 0"))

    def test_unit_assignment_without_value(self) -> None:
        result = classify_line("dimensions [ 0 1 -1 0 0 0 0 ];")
        self.assertEqual(result.kind, SymbolKind.CONSTANT_UNIT)
        self.assertEqual(result.detail, "0 1 -1 0 0 0 0")

    def test_key_value_kind_overrides(self) -> None:
        expected = {
            "class dictionary;": SymbolKind.CLASS_LIKE,
            "object controlDict;": SymbolKind.CLASS_LIKE,
            "version 2.0;": SymbolKind.CONSTANT_LITERAL,
            "format ascii;": SymbolKind.CONSTANT_LITERAL,
            'location "system";': SymbolKind.FILE_HEADER,
            "endTime 1000;": SymbolKind.PROPERTY,
        }
        for text, kind in expected.items():
            self.assertEqual(classify_line(text).kind, kind, text)

    def test_key_value_detail_is_trimmed_value(self) -> None:
        result = classify_line("writeControl    timeStep  ;")
        self.assertEqual((result.name, result.detail), ("writeControl", "timeStep"))
        result = classify_line("mesh.level 2;")
        self.assertEqual(result.name, "mesh.level")

    def test_unrecognized_lines_produce_nothing(self) -> None:
        for text in (
            "}",
            ");",
            "(0 0 0)",
            "#include \"initialConditions\"",
            "$var;",
            "1e-05;",
            "div(phi,U)      bounded Gauss linearUpwind grad(U);",
        ):
            self.assertIsNone(classify_line(text, _brace(True)), text)


if __name__ == "__main__":
    unittest.main()
