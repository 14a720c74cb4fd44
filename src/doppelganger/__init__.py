"""Public API for doppelganger."""
from .builders import GradientUnits
from .document import svg, to_svg_string
from .errors import DoppelgangerError
from .formatting import (
    Color,
    color_to_svg,
    hsl,
    hsla,
    matrix,
    points,
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

__all__ = [
    "Color",
    "DoppelgangerError",
    "GradientUnits",
    "color_to_svg",
    "hsl",
    "hsla",
    "matrix",
    "points",
    "rgb",
    "rgba",
    "rotate",
    "scale",
    "skew_x",
    "skew_y",
    "svg",
    "to_svg_string",
    "transforms",
    "translate",
    "view_box",
]
