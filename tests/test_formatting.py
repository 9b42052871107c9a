"""Tests for action rendering helpers."""

from __future__ import annotations

import unittest
from dataclasses import dataclass

from reportlab.lib import colors

from vgrecord.recorder.caller import CallSite
from vgrecord.recorder.formatting import (
    format_call,
    format_color,
    format_lengths,
    format_number,
    format_path,
    format_string,
    format_value,
)
from vgrecord.vg import Path, PathComp, PathCompKind


class NumberFormattingTests(unittest.TestCase):
    def test_integral_floats_drop_the_fraction(self) -> None:
        self.assertEqual(format_number(12.0), "12")
        self.assertEqual(format_number(0.0), "0")
        self.assertEqual(format_number(-0.0), "-0")

    def test_fractions_use_shortest_round_trip_form(self) -> None:
        self.assertEqual(format_number(0.72), "0.72")
        self.assertEqual(format_number(1 / 3), "0.3333333333333333")
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")

    def test_large_and_small_values_use_exponents(self) -> None:
        self.assertEqual(format_number(1e16), "1e+16")
        self.assertEqual(format_number(1e-7), "1e-07")

    def test_ints_render_unchanged(self) -> None:
        self.assertEqual(format_number(72), "72")
        self.assertEqual(format_number(-3), "-3")

    def test_non_finite_values(self) -> None:
        self.assertEqual(format_number(float("inf")), "+Inf")
        self.assertEqual(format_number(float("-inf")), "-Inf")
        self.assertEqual(format_number(float("nan")), "NaN")


class StringFormattingTests(unittest.TestCase):
    def test_strings_are_double_quoted_and_escaped(self) -> None:
        self.assertEqual(format_string("Bar"), '"Bar"')
        self.assertEqual(format_string('say "hi"\n'), '"say \\"hi\\"\\n"')
        self.assertEqual(format_string("tab\there"), '"tab\\there"')

    def test_non_ascii_text_is_kept(self) -> None:
        self.assertEqual(format_string("café"), '"café"')


class CompositeFormattingTests(unittest.TestCase):
    def test_lengths(self) -> None:
        self.assertEqual(format_lengths([1, 2.5]), "[1, 2.5]")
        self.assertEqual(format_lengths(()), "[]")

    def test_rgb_color_dumps_every_channel(self) -> None:
        self.assertEqual(
            format_color(colors.Color(0, 0.5, 1, 0.25)),
            "Color(red=0, green=0.5, blue=1, alpha=0.25)",
        )

    def test_cmyk_color_dumps_every_channel(self) -> None:
        self.assertEqual(
            format_color(colors.CMYKColor(0, 1, 0, 0)),
            "CMYKColor(cyan=0, magenta=1, yellow=0, black=0, alpha=1)",
        )

    def test_path_dumps_every_component_field(self) -> None:
        path = Path().move(3, 4).arc(1, 2, 5, 0.5, 1.25).close()
        self.assertEqual(
            format_path(path),
            "Path["
            'PathComp(kind="move", x=3, y=4, radius=0, start=0, angle=0), '
            'PathComp(kind="arc", x=1, y=2, radius=5, start=0.5, angle=1.25), '
            'PathComp(kind="close", x=0, y=0, radius=0, start=0, angle=0)'
            "]",
        )

    def test_empty_path(self) -> None:
        self.assertEqual(format_path(()), "Path[]")

    def test_structurally_equal_paths_render_equal(self) -> None:
        left = (PathComp(PathCompKind.LINE, x=1.0, y=2.0),)
        right = Path().line(1, 2)
        self.assertEqual(format_path(left), format_path(right))
        self.assertNotEqual(format_path(left), format_path(Path().move(1, 2)))


@dataclass(frozen=True)
class _Marker:
    label: str
    size: float


class _Anchor:
    def __init__(self, x: float, label: str) -> None:
        self.x = x
        self.label = label


class ValueFormattingTests(unittest.TestCase):
    def test_dataclasses_dump_their_fields(self) -> None:
        self.assertEqual(format_value(_Marker("dot", 2.0)), '_Marker(label="dot", size=2)')

    def test_sequences_and_scalars(self) -> None:
        self.assertEqual(format_value([1.0, "a", True]), '[1, "a", True]')
        self.assertEqual(format_value(colors.Color(1, 1, 1)), "Color(red=1, green=1, blue=1, alpha=1)")

    def test_plain_objects_dump_attributes_in_name_order(self) -> None:
        self.assertEqual(format_value(_Anchor(2.0, "top")), '_Anchor(label="top", x=2)')
        self.assertEqual(format_value(_Anchor(1, "a")), format_value(_Anchor(1.0, "a")))
        self.assertNotIn(" at 0x", format_value(_Anchor(1, "a")))


class CallFormattingTests(unittest.TestCase):
    def test_call_without_site(self) -> None:
        self.assertEqual(format_call(None, "Scale", ["1", "2"]), "Scale(1, 2)")
        self.assertEqual(format_call(None, "Push"), "Push()")

    def test_call_with_site(self) -> None:
        site = CallSite(file="/tmp/plot.py", line=20)
        self.assertEqual(format_call(site, "Pop"), "/tmp/plot.py:20 Pop()")


if __name__ == "__main__":
    unittest.main()
