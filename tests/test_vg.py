"""Tests for drawing argument types."""

from __future__ import annotations

import unittest

from vgrecord.vg import (
    CENTIMETER,
    INCH,
    MILLIMETER,
    Font,
    Path,
    PathComp,
    PathCompKind,
    parse_length,
)


class LengthTests(unittest.TestCase):
    def test_unit_constants(self) -> None:
        self.assertEqual(INCH, 72)
        self.assertAlmostEqual(CENTIMETER * 2.54, INCH)
        self.assertAlmostEqual(MILLIMETER * 10, CENTIMETER)

    def test_parse_length_converts_to_points(self) -> None:
        self.assertEqual(parse_length("12"), 12)
        self.assertEqual(parse_length("12pt"), 12)
        self.assertEqual(parse_length("2in"), 144)
        self.assertAlmostEqual(parse_length("2.54cm"), 72)
        self.assertAlmostEqual(parse_length(" 10mm "), CENTIMETER)
        self.assertEqual(parse_length("-.5in"), -36)

    def test_parse_length_rejects_unknown_units(self) -> None:
        with self.assertRaises(ValueError):
            parse_length("3km")

    def test_parse_length_rejects_garbage(self) -> None:
        with self.assertRaises(ValueError):
            parse_length("wide")
        with self.assertRaises(ValueError):
            parse_length("")


class FontTests(unittest.TestCase):
    def test_width_scales_with_size(self) -> None:
        small = Font("Helvetica", 10).width("Hello")
        large = Font("Helvetica", 20).width("Hello")
        self.assertGreater(small, 0)
        self.assertAlmostEqual(large, small * 2)

    def test_empty_text_has_no_width(self) -> None:
        self.assertEqual(Font("Helvetica", 10).width(""), 0)


class PathTests(unittest.TestCase):
    def test_builder_appends_components(self) -> None:
        path = Path().move(0, 0).line(1, 0).arc(0, 0, 1, 0, 1.5).close()
        self.assertEqual(
            [comp.kind for comp in path],
            [PathCompKind.MOVE, PathCompKind.LINE, PathCompKind.ARC, PathCompKind.CLOSE],
        )
        self.assertEqual(len(path), 4)
        self.assertEqual(path[2], PathComp(PathCompKind.ARC, x=0, y=0, radius=1, start=0, angle=1.5))

    def test_paths_compare_by_components(self) -> None:
        self.assertEqual(Path().move(1, 2), Path([PathComp(PathCompKind.MOVE, x=1, y=2)]))
        self.assertNotEqual(Path().move(1, 2), Path().line(1, 2))

    def test_path_copies_initial_components(self) -> None:
        components = [PathComp(PathCompKind.MOVE)]
        path = Path(components)
        components.append(PathComp(PathCompKind.CLOSE))
        self.assertEqual(len(path), 1)


if __name__ == "__main__":
    unittest.main()
