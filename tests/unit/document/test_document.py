"""Line view splitting, ranges, and tolerant file reading."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from foamoutline.document import Position, Range, TextDocument, load_document, read_text


class TextDocumentTests(unittest.TestCase):
    def test_splits_on_all_line_break_styles(self) -> None:
        document = TextDocument.from_text("a\r\nb\rc\nd")
        self.assertEqual([line.text for line in document], ["a", "b", "c", "d"])

    def test_trailing_break_leaves_empty_last_line(self) -> None:
        document = TextDocument.from_text("a\n")
        self.assertEqual(document.line_count, 2)
        self.assertEqual(document.line_at(1).text, "")

    def test_empty_text_has_one_line(self) -> None:
        document = TextDocument.from_text("")
        self.assertEqual(document.line_count, 1)
        self.assertEqual(len(document), 1)

    def test_line_range_and_indent(self) -> None:
        line = TextDocument.from_text("x\n\t  key value;\n").line_at(1)
        self.assertEqual(line.range, Range(Position(1, 0), Position(1, 13)))
        self.assertEqual(line.first_non_whitespace_character_index, 3)
        self.assertFalse(line.is_empty_or_whitespace)

    def test_whitespace_only_line_indent_is_its_length(self) -> None:
        line = TextDocument.from_text("   ").line_at(0)
        self.assertEqual(line.first_non_whitespace_character_index, 3)
        self.assertTrue(line.is_empty_or_whitespace)

    def test_line_at_out_of_range(self) -> None:
        with self.assertRaises(IndexError):
            TextDocument.from_text("a").line_at(1)
        with self.assertRaises(IndexError):
            TextDocument.from_text("a").line_at(-1)

    def test_range_helpers(self) -> None:
        outer = Range(Position(1, 0), Position(4, 1))
        self.assertTrue(outer.contains(Range(Position(1, 0), Position(1, 9))))
        self.assertFalse(outer.contains(Range(Position(4, 0), Position(4, 2))))
        self.assertTrue(outer.contains_line(4))
        self.assertFalse(outer.contains_line(5))

    def test_text_round_trip(self) -> None:
        self.assertEqual(TextDocument.from_text("a\r\nb\n").text(), "a\nb\n")


class ReadTextTests(unittest.TestCase):
    def test_latin1_fallback(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "transportProperties"
            path.write_bytes("nu caf\xe9;\n".encode("latin-1"))
            self.assertEqual(read_text(path), "nu caf\xe9;\n")

    def test_load_document_keeps_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "controlDict"
            path.write_text("endTime 1;\n", encoding="utf-8")
            document = load_document(path)
        self.assertEqual(document.path, path)
        self.assertEqual(document.line_at(0).text, "endTime 1;")


if __name__ == "__main__":
    unittest.main()
