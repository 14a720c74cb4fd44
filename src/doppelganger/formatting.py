"""Attribute-value formatting helpers for colors, transforms and coordinates."""
from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Iterable, Optional, Tuple, Union
from xml.sax.saxutils import escape as _sax_escape

from PIL import ImageColor

from .errors import DoppelgangerError

Number = Union[int, float]
Value = Union[int, float, str]

SVG_NS = "http://www.w3.org/2000/svg"
OPAQUE_ALPHA = 0.999
ALPHA_DECIMALS = 3
NUMBER_DECIMALS = 3
INTEGRAL_TOLERANCE = 1e-9

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Pillow only reads 0-255 alpha, so the rgba() form written by Color.to_svg is
# handled here.
_RGBA_RE = re.compile(
    r"^rgba\(\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)\s*,\s*(\d*\.?\d+)\s*\)$",
    re.IGNORECASE,
)


def fmt_num(value: Value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return str(value)
    if math.isclose(value, round(value), rel_tol=0.0, abs_tol=INTEGRAL_TOLERANCE):
        return str(int(round(value)))
    text = f"{value:.{NUMBER_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def escape_xml(value: str) -> str:
    """Escape ``& < > " '`` for attribute values and text content.

    ``&`` is replaced first so entities introduced by the later
    substitutions are never escaped twice.
    """
    return _sax_escape(value, _QUOTE_ENTITIES)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_channel(text: str) -> Number:
    return float(text) if "." in text else int(text)


def _clamp_channel(value: Number) -> int:
    return max(0, min(255, _round_half_up(value)))


@dataclass(frozen=True)
class Color:
    """An sRGB color with 0-255 channels and a 0.0-1.0 alpha."""

    red: Number
    green: Number
    blue: Number
    alpha: float = 1.0

    @classmethod
    def parse(cls, spec: str) -> "Color":
        """Resolve a CSS color string (``"teal"``, ``"#0af"``, ``"hsl(...)"``).

        ``rgba(r,g,b,a)`` with a 0.0-1.0 alpha is accepted, so the output of
        ``to_svg`` always parses back.
        """
        match = _RGBA_RE.match(spec.strip())
        if match:
            r, g, b = (_parse_channel(group) for group in match.groups()[:3])
            return cls(r, g, b, float(match.group(4)))
        try:
            channels = ImageColor.getrgb(spec.strip())
        except ValueError as exc:
            raise DoppelgangerError("E_COLOR", f'unrecognised color "{spec}"') from exc
        if len(channels) == 4:
            r, g, b, a = channels
            return cls(r, g, b, a / 255.0)
        r, g, b = channels
        return cls(r, g, b)

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.red, self.green, self.blue, alpha)

    @property
    def channels(self) -> Tuple[int, int, int]:
        return (_clamp_channel(self.red), _clamp_channel(self.green), _clamp_channel(self.blue))

    def to_svg(self) -> str:
        r, g, b = self.channels
        if self.alpha >= OPAQUE_ALPHA:
            return f"#{r:02X}{g:02X}{b:02X}"
        scale = 10 ** ALPHA_DECIMALS
        alpha = _round_half_up(self.alpha * scale) / scale
        return f"rgba({r},{g},{b},{fmt_num(alpha)})"

    def __str__(self) -> str:
        return self.to_svg()


def color_to_svg(red: Number, green: Number, blue: Number, alpha: float = 1.0) -> str:
    return Color(red, green, blue, alpha).to_svg()


def paint(value: Union[str, Color]) -> str:
    if isinstance(value, Color):
        return value.to_svg()
    return value


# Transform functions. Each returns one transform-list item; combine them with
# ``transforms`` to get a single ``transform`` attribute value.


def translate(x: Number, y: Number) -> str:
    return f"translate({fmt_num(x)}, {fmt_num(y)})"


def rotate(angle: Number, cx: Optional[Number] = None, cy: Optional[Number] = None) -> str:
    if cx is not None and cy is not None:
        return f"rotate({fmt_num(angle)}, {fmt_num(cx)}, {fmt_num(cy)})"
    return f"rotate({fmt_num(angle)})"


def scale(x: Number, y: Optional[Number] = None) -> str:
    if y is not None:
        return f"scale({fmt_num(x)}, {fmt_num(y)})"
    return f"scale({fmt_num(x)})"


def skew_x(angle: Number) -> str:
    return f"skewX({fmt_num(angle)})"


def skew_y(angle: Number) -> str:
    return f"skewY({fmt_num(angle)})"


def matrix(a: Number, b: Number, c: Number, d: Number, e: Number, f: Number) -> str:
    """Affine ``matrix(a, b, c, d, e, f)``.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``; the identity is
    ``matrix(1, 0, 0, 1, 0, 0)``.
    """
    return "matrix(" + ", ".join(fmt_num(v) for v in (a, b, c, d, e, f)) + ")"


def transforms(*parts: str) -> str:
    return " ".join(parts)


def points(*coords: Tuple[Number, Number]) -> str:
    return " ".join(f"{fmt_num(x)},{fmt_num(y)}" for x, y in coords)


def points_from(coords: Iterable[Tuple[Number, Number]]) -> str:
    return points(*coords)


def view_box(min_x: Number, min_y: Number, width: Number, height: Number) -> str:
    return f"{fmt_num(min_x)} {fmt_num(min_y)} {fmt_num(width)} {fmt_num(height)}"


# CSS color functions. Ranges are documented, not checked:
# channels 0-255, hue 0-360, saturation/lightness 0-100, alpha 0.0-1.0.


def rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def rgba(r: int, g: int, b: int, a: float) -> str:
    return f"rgba({r}, {g}, {b}, {fmt_num(a)})"


def hsl(h: Number, s: Number, l: Number) -> str:
    return f"hsl({fmt_num(h)}, {fmt_num(s)}%, {fmt_num(l)}%)"


def hsla(h: Number, s: Number, l: Number, a: float) -> str:
    return f"hsla({fmt_num(h)}, {fmt_num(s)}%, {fmt_num(l)}%, {fmt_num(a)})"


__all__ = [
    "ALPHA_DECIMALS",
    "Color",
    "INTEGRAL_TOLERANCE",
    "NUMBER_DECIMALS",
    "OPAQUE_ALPHA",
    "SVG_NS",
    "color_to_svg",
    "escape_xml",
    "fmt_num",
    "hsl",
    "hsla",
    "matrix",
    "paint",
    "points",
    "points_from",
    "rgb",
    "rgba",
    "rotate",
    "scale",
    "skew_x",
    "skew_y",
    "transforms",
    "translate",
    "view_box",
]
