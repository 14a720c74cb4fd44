from __future__ import annotations

import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from doppelganger import DoppelgangerError
from doppelganger.formatting import (
    Color,
    color_to_svg,
    escape_xml,
    fmt_num,
    hsl,
    hsla,
    matrix,
    points,
    points_from,
    rgb,
    rgba,
    rotate,
    scale,
    skew_x,
    skew_y,
    transforms,
    translate,
    view_box,
)


class NumberFormattingTests(unittest.TestCase):
    def test_integers_and_integral_floats(self) -> None:
        self.assertEqual(fmt_num(10), "10")
        self.assertEqual(fmt_num(10.0), "10")
        self.assertEqual(fmt_num(-3.0), "-3")

    def test_fractional_floats_are_trimmed(self) -> None:
        self.assertEqual(fmt_num(2.5), "2.5")
        self.assertEqual(fmt_num(1 / 3), "0.333")
        self.assertEqual(fmt_num(-0.25), "-0.25")
        self.assertEqual(fmt_num(-0.0001), "0")

    def test_large_values_keep_their_fraction(self) -> None:
        self.assertEqual(fmt_num(10000000000.5), "10000000000.5")
        self.assertEqual(fmt_num(10000000000.0), "10000000000")
        self.assertEqual(fmt_num(1e-12), "0")

    def test_bools_and_strings(self) -> None:
        self.assertEqual(fmt_num(True), "1")
        self.assertEqual(fmt_num(False), "0")
        self.assertEqual(fmt_num("50%"), "50%")


class EscapeTests(unittest.TestCase):
    def test_reserved_characters(self) -> None:
        self.assertEqual(escape_xml("a&b<c>\"d'"), "a&amp;b&lt;c&gt;&quot;d&apos;")

    def test_existing_entities_are_escaped_once(self) -> None:
        self.assertEqual(escape_xml("&lt;"), "&amp;lt;")
        self.assertEqual(escape_xml("<"), "&lt;")

    def test_plain_text_unchanged(self) -> None:
        self.assertEqual(escape_xml("url(#g1)"), "url(#g1)")


class ColorTests(unittest.TestCase):
    def test_opaque_color_is_hex(self) -> None:
        self.assertEqual(color_to_svg(0, 0, 255), "#0000FF")
        self.assertEqual(color_to_svg(0, 0, 255, 1.0), "#0000FF")
        self.assertEqual(Color(171, 205, 239).to_svg(), "#ABCDEF")

    def test_near_opaque_threshold(self) -> None:
        self.assertEqual(color_to_svg(255, 0, 0, 0.9995), "#FF0000")
        self.assertEqual(color_to_svg(255, 0, 0, 0.998), "rgba(255,0,0,0.998)")

    def test_translucent_color_is_rgba(self) -> None:
        self.assertEqual(color_to_svg(0, 0, 255, 0.5), "rgba(0,0,255,0.5)")
        self.assertEqual(color_to_svg(10, 20, 30, 0.12345), "rgba(10,20,30,0.123)")
        self.assertEqual(color_to_svg(255, 0, 0, 0.0), "rgba(255,0,0,0)")

    def test_channels_are_rounded_and_clamped(self) -> None:
        color = Color(300, -4, 127.6)
        self.assertEqual(color.channels, (255, 0, 128))
        self.assertEqual(color.to_svg(), "#FF0080")
        self.assertEqual(Color(0.5, 1.5, 2.5).channels, (1, 2, 3))

    def test_with_alpha_and_str(self) -> None:
        color = Color(0, 128, 0).with_alpha(0.25)
        self.assertEqual(str(color), "rgba(0,128,0,0.25)")

    def test_parse_css_colors(self) -> None:
        self.assertEqual(Color.parse("blue"), Color(0, 0, 255))
        self.assertEqual(Color.parse("#0af").channels, (0, 170, 255))
        self.assertEqual(Color.parse(" #FF8000 ").to_svg(), "#FF8000")
        self.assertEqual(Color.parse("#ff000080").to_svg(), "rgba(255,0,0,0.502)")

    def test_parse_css_functions(self) -> None:
        self.assertEqual(Color.parse("rgb(255, 0, 0)"), Color(255, 0, 0))
        self.assertEqual(Color.parse("hsl(120, 100%, 50%)").to_svg(), "#00FF00")
        self.assertEqual(Color.parse("hsl(240, 100%, 50%)").channels, (0, 0, 255))

    def test_parse_reads_back_rgba_output(self) -> None:
        color = Color(0, 0, 255, 0.5)
        self.assertEqual(Color.parse(str(color)), color)
        self.assertEqual(Color.parse("rgba(10, 20, 30, .25)").to_svg(), "rgba(10,20,30,0.25)")
        self.assertEqual(Color.parse("RGBA(1,2,3,0)").alpha, 0.0)

    def test_parse_unknown_color(self) -> None:
        with self.assertRaises(DoppelgangerError) as ctx:
            Color.parse("not-a-color")
        self.assertEqual(ctx.exception.code, "E_COLOR")
        self.assertIn("not-a-color", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)


class TransformTests(unittest.TestCase):
    def test_individual_transforms(self) -> None:
        self.assertEqual(translate(50, 50), "translate(50, 50)")
        self.assertEqual(rotate(45), "rotate(45)")
        self.assertEqual(rotate(45, 10, 20), "rotate(45, 10, 20)")
        self.assertEqual(rotate(45, cx=10), "rotate(45)")
        self.assertEqual(scale(2), "scale(2)")
        self.assertEqual(scale(2, 0.5), "scale(2, 0.5)")
        self.assertEqual(skew_x(30), "skewX(30)")
        self.assertEqual(skew_y(-15.5), "skewY(-15.5)")
        self.assertEqual(matrix(1, 0, 0, 1, 0, 0), "matrix(1, 0, 0, 1, 0, 0)")

    def test_combined_transforms_keep_order(self) -> None:
        combined = transforms(translate(10, 20), rotate(45), scale(2))
        self.assertEqual(combined, "translate(10, 20) rotate(45) scale(2)")
        self.assertEqual(transforms(scale(2), translate(10, 20)), "scale(2) translate(10, 20)")
        self.assertEqual(transforms(), "")


class CoordinateTests(unittest.TestCase):
    def test_points(self) -> None:
        self.assertEqual(points((10, 10), (20, 30), (30.5, 10.0)), "10,10 20,30 30.5,10")
        self.assertEqual(points_from([(0, 0), (1, 1)]), "0,0 1,1")
        self.assertEqual(points(), "")

    def test_view_box(self) -> None:
        self.assertEqual(view_box(0, 0, 100, 100), "0 0 100 100")
        self.assertEqual(view_box(-10, -10.5, 20, 21), "-10 -10.5 20 21")


class CssColorFunctionTests(unittest.TestCase):
    def test_templates(self) -> None:
        self.assertEqual(rgb(255, 0, 0), "rgb(255, 0, 0)")
        self.assertEqual(rgba(0, 0, 0, 0.5), "rgba(0, 0, 0, 0.5)")
        self.assertEqual(hsl(120, 100, 50), "hsl(120, 100%, 50%)")
        self.assertEqual(hsla(120, 100, 50, 0.3), "hsla(120, 100%, 50%, 0.3)")


if __name__ == "__main__":
    unittest.main()
