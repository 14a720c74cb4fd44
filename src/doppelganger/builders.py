"""Chainable builders that populate the element tree.

Each builder owns exactly one element. Setters write straight into the
element's attribute map (last write wins) and return the builder so calls can
be chained inside a lambda. Child adders create the matching child builder,
hand it to the caller's configuration routine, then append the built child.
Builders only expose the setters and children that are valid for their tag.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, ClassVar, Generic, Optional, Tuple, Type, TypeVar, Union

from .elements import (
    Circle,
    ClipPath,
    Defs,
    Element,
    Ellipse,
    G,
    Line,
    LinearGradient,
    Mask,
    Path,
    Polygon,
    Polyline,
    RadialGradient,
    Rect,
    Stop,
    Svg,
    Symbol,
    Text,
    TSpan,
    Use,
)
from .formatting import SVG_NS, Color, Number, Value, fmt_num, paint
from .formatting import points as _format_points
from .formatting import view_box as _format_view_box
from .path_data import PathData

E = TypeVar("E", bound=Element)
B = TypeVar("B", bound="ElementBuilder")
C = TypeVar("C", bound="ElementBuilder")

Configure = Optional[Callable[[C], object]]
Paint = Union[str, Color]


class GradientUnits(str, Enum):
    OBJECT_BOUNDING_BOX = "objectBoundingBox"
    USER_SPACE_ON_USE = "userSpaceOnUse"

    def __str__(self) -> str:
        return self.value


class ElementBuilder(Generic[E]):
    element_class: ClassVar[Type[Element]] = Element

    def __init__(self) -> None:
        self.element: E = self.element_class()  # type: ignore[assignment]

    def attr(self: B, name: str, value: Value) -> B:
        self.element.attributes[name] = fmt_num(value)
        return self

    def _child(self: B, builder_class: Type[C], configure: Configure) -> B:
        builder = builder_class()
        if configure is not None:
            configure(builder)
        self.element.children.append(builder.build())
        return self

    def build(self) -> E:
        return self.element

    # Presentation attributes shared by every element kind.

    def id(self: B, value: str) -> B:
        return self.attr("id", value)

    def class_name(self: B, value: str) -> B:
        return self.attr("class", value)

    def style(self: B, value: str) -> B:
        return self.attr("style", value)

    def transform(self: B, value: str) -> B:
        return self.attr("transform", value)

    def opacity(self: B, value: Number) -> B:
        return self.attr("opacity", value)

    def fill(self: B, color: Paint) -> B:
        return self.attr("fill", paint(color))

    def fill_opacity(self: B, value: Number) -> B:
        return self.attr("fill-opacity", value)

    def fill_rule(self: B, value: str) -> B:
        return self.attr("fill-rule", value)

    def stroke(self: B, color: Paint) -> B:
        return self.attr("stroke", paint(color))

    def stroke_width(self: B, value: Number) -> B:
        return self.attr("stroke-width", value)

    def stroke_opacity(self: B, value: Number) -> B:
        return self.attr("stroke-opacity", value)

    def stroke_linecap(self: B, value: str) -> B:
        return self.attr("stroke-linecap", value)

    def stroke_linejoin(self: B, value: str) -> B:
        return self.attr("stroke-linejoin", value)

    def stroke_dasharray(self: B, value: str) -> B:
        return self.attr("stroke-dasharray", value)

    def stroke_dashoffset(self: B, value: Number) -> B:
        return self.attr("stroke-dashoffset", value)

    def clip_path(self: B, value: str) -> B:
        return self.attr("clip-path", value)

    def mask(self: B, value: str) -> B:
        return self.attr("mask", value)

    def filter(self: B, value: str) -> B:
        return self.attr("filter", value)


# Tag-specific attribute groups. A builder mixes in only the groups its tag
# supports.


class _Position:
    def x(self: B, value: Value) -> B:
        return self.attr("x", value)

    def y(self: B, value: Value) -> B:
        return self.attr("y", value)


class _Size:
    def width(self: B, value: Value) -> B:
        return self.attr("width", value)

    def height(self: B, value: Value) -> B:
        return self.attr("height", value)


class _Center:
    def cx(self: B, value: Value) -> B:
        return self.attr("cx", value)

    def cy(self: B, value: Value) -> B:
        return self.attr("cy", value)


class _Radii:
    def rx(self: B, value: Value) -> B:
        return self.attr("rx", value)

    def ry(self: B, value: Value) -> B:
        return self.attr("ry", value)


class _Endpoints:
    def x1(self: B, value: Value) -> B:
        return self.attr("x1", value)

    def y1(self: B, value: Value) -> B:
        return self.attr("y1", value)

    def x2(self: B, value: Value) -> B:
        return self.attr("x2", value)

    def y2(self: B, value: Value) -> B:
        return self.attr("y2", value)


class _Points:
    def points(self: B, *coords: Union[str, Tuple[Number, Number]]) -> B:
        """Set ``points`` from a raw string or from ``(x, y)`` pairs."""
        if len(coords) == 1 and isinstance(coords[0], str):
            return self.attr("points", coords[0])
        return self.attr("points", _format_points(*coords))


class _Viewport:
    def view_box(self: B, min_x: Number, min_y: Number, width: Number, height: Number) -> B:
        return self.attr("viewBox", _format_view_box(min_x, min_y, width, height))

    def preserve_aspect_ratio(self: B, value: str) -> B:
        return self.attr("preserveAspectRatio", value)


class _TextLayout(_Position):
    def dx(self: B, value: Value) -> B:
        return self.attr("dx", value)

    def dy(self: B, value: Value) -> B:
        return self.attr("dy", value)

    def content(self: B, text: str) -> B:
        self.element.text_content = text
        return self


class _Gradient:
    def gradient_units(self: B, value: Union[str, GradientUnits]) -> B:
        return self.attr("gradientUnits", str(value))

    def gradient_transform(self: B, value: str) -> B:
        return self.attr("gradientTransform", value)

    def spread_method(self: B, value: str) -> B:
        return self.attr("spreadMethod", value)

    def stop(self: B, configure: Configure["StopBuilder"] = None) -> B:
        return self._child(StopBuilder, configure)


# Leaf builders.


class RectBuilder(_Position, _Size, _Radii, ElementBuilder[Rect]):
    element_class = Rect


class CircleBuilder(_Center, ElementBuilder[Circle]):
    element_class = Circle

    def r(self, value: Value) -> "CircleBuilder":
        return self.attr("r", value)


class EllipseBuilder(_Center, _Radii, ElementBuilder[Ellipse]):
    element_class = Ellipse


class LineBuilder(_Endpoints, ElementBuilder[Line]):
    element_class = Line


class PolylineBuilder(_Points, ElementBuilder[Polyline]):
    element_class = Polyline


class PolygonBuilder(_Points, ElementBuilder[Polygon]):
    element_class = Polygon


class PathBuilder(ElementBuilder[Path]):
    """Builds ``<path>``; drawing commands accumulate until ``build``.

    Uppercase commands take absolute coordinates, the ``*_relative`` variants
    emit the lowercase letter. Raw ``d`` and the command methods are
    order-dependent: ``d`` discards any commands queued before it, and
    commands queued after it replace it when the path is built.
    """

    element_class = Path

    def __init__(self) -> None:
        super().__init__()
        self._data = PathData()

    def d(self, value: str) -> "PathBuilder":
        self._data.clear()
        return self.attr("d", value)

    def _command(self, letter: str, *args: Value) -> "PathBuilder":
        self._data.append(letter, *args)
        return self

    def move_to(self, x: Number, y: Number) -> "PathBuilder":
        return self._command("M", x, y)

    def move_to_relative(self, dx: Number, dy: Number) -> "PathBuilder":
        return self._command("m", dx, dy)

    def line_to(self, x: Number, y: Number) -> "PathBuilder":
        return self._command("L", x, y)

    def line_to_relative(self, dx: Number, dy: Number) -> "PathBuilder":
        return self._command("l", dx, dy)

    def horizontal_line_to(self, x: Number) -> "PathBuilder":
        return self._command("H", x)

    def horizontal_line_to_relative(self, dx: Number) -> "PathBuilder":
        return self._command("h", dx)

    def vertical_line_to(self, y: Number) -> "PathBuilder":
        return self._command("V", y)

    def vertical_line_to_relative(self, dy: Number) -> "PathBuilder":
        return self._command("v", dy)

    def curve_to(
        self, x1: Number, y1: Number, x2: Number, y2: Number, x: Number, y: Number
    ) -> "PathBuilder":
        return self._command("C", x1, y1, x2, y2, x, y)

    def curve_to_relative(
        self, dx1: Number, dy1: Number, dx2: Number, dy2: Number, dx: Number, dy: Number
    ) -> "PathBuilder":
        return self._command("c", dx1, dy1, dx2, dy2, dx, dy)

    def smooth_curve_to(self, x2: Number, y2: Number, x: Number, y: Number) -> "PathBuilder":
        # First control point is the reflection of the previous curve's second.
        return self._command("S", x2, y2, x, y)

    def smooth_curve_to_relative(self, dx2: Number, dy2: Number, dx: Number, dy: Number) -> "PathBuilder":
        return self._command("s", dx2, dy2, dx, dy)

    def quadratic_curve_to(self, x1: Number, y1: Number, x: Number, y: Number) -> "PathBuilder":
        return self._command("Q", x1, y1, x, y)

    def quadratic_curve_to_relative(self, dx1: Number, dy1: Number, dx: Number, dy: Number) -> "PathBuilder":
        return self._command("q", dx1, dy1, dx, dy)

    def smooth_quadratic_curve_to(self, x: Number, y: Number) -> "PathBuilder":
        return self._command("T", x, y)

    def smooth_quadratic_curve_to_relative(self, dx: Number, dy: Number) -> "PathBuilder":
        return self._command("t", dx, dy)

    def arc_to(
        self,
        rx: Number,
        ry: Number,
        x_axis_rotation: Number,
        large_arc: Union[bool, int],
        sweep: Union[bool, int],
        x: Number,
        y: Number,
    ) -> "PathBuilder":
        return self._command("A", rx, ry, x_axis_rotation, int(large_arc), int(sweep), x, y)

    def arc_to_relative(
        self,
        rx: Number,
        ry: Number,
        x_axis_rotation: Number,
        large_arc: Union[bool, int],
        sweep: Union[bool, int],
        dx: Number,
        dy: Number,
    ) -> "PathBuilder":
        return self._command("a", rx, ry, x_axis_rotation, int(large_arc), int(sweep), dx, dy)

    def close_path(self) -> "PathBuilder":
        return self._command("Z")

    def build(self) -> Path:
        if self._data:
            self.element.attributes["d"] = self._data.compile()
            self._data.clear()
        return super().build()


class StopBuilder(ElementBuilder[Stop]):
    element_class = Stop

    def offset(self, value: Value) -> "StopBuilder":
        return self.attr("offset", value)

    def stop_color(self, value: Paint) -> "StopBuilder":
        return self.attr("stop-color", paint(value))

    def stop_opacity(self, value: Number) -> "StopBuilder":
        return self.attr("stop-opacity", value)


class UseBuilder(_Position, _Size, ElementBuilder[Use]):
    element_class = Use

    def href(self, value: str) -> "UseBuilder":
        return self.attr("href", value)

    def xlink_href(self, value: str) -> "UseBuilder":
        return self.attr("xlink:href", value)


# Text builders.


class TSpanBuilder(_TextLayout, ElementBuilder[TSpan]):
    element_class = TSpan


class TextBuilder(_TextLayout, ElementBuilder[Text]):
    element_class = Text

    def text_anchor(self, value: str) -> "TextBuilder":
        return self.attr("text-anchor", value)

    def font_size(self, value: Value) -> "TextBuilder":
        return self.attr("font-size", value)

    def font_family(self, value: str) -> "TextBuilder":
        return self.attr("font-family", value)

    def font_weight(self, value: Value) -> "TextBuilder":
        return self.attr("font-weight", value)

    def font_style(self, value: str) -> "TextBuilder":
        return self.attr("font-style", value)

    def text_decoration(self, value: str) -> "TextBuilder":
        return self.attr("text-decoration", value)

    def tspan(self, configure: Configure[TSpanBuilder] = None) -> "TextBuilder":
        return self._child(TSpanBuilder, configure)


# Paint servers and other definitions.


class LinearGradientBuilder(_Endpoints, _Gradient, ElementBuilder[LinearGradient]):
    element_class = LinearGradient


class RadialGradientBuilder(_Center, _Gradient, ElementBuilder[RadialGradient]):
    element_class = RadialGradient

    def r(self, value: Value) -> "RadialGradientBuilder":
        return self.attr("r", value)

    def fx(self, value: Value) -> "RadialGradientBuilder":
        return self.attr("fx", value)

    def fy(self, value: Value) -> "RadialGradientBuilder":
        return self.attr("fy", value)


class ClipPathBuilder(ElementBuilder[ClipPath]):
    element_class = ClipPath

    def clip_path_units(self, value: Union[str, GradientUnits]) -> "ClipPathBuilder":
        return self.attr("clipPathUnits", str(value))

    def rect(self, configure: Configure[RectBuilder] = None) -> "ClipPathBuilder":
        return self._child(RectBuilder, configure)

    def circle(self, configure: Configure[CircleBuilder] = None) -> "ClipPathBuilder":
        return self._child(CircleBuilder, configure)

    def ellipse(self, configure: Configure[EllipseBuilder] = None) -> "ClipPathBuilder":
        return self._child(EllipseBuilder, configure)

    def path(self, configure: Configure[PathBuilder] = None) -> "ClipPathBuilder":
        return self._child(PathBuilder, configure)


class GBuilder(ElementBuilder[G]):
    element_class = G

    def rect(self, configure: Configure[RectBuilder] = None) -> "GBuilder":
        return self._child(RectBuilder, configure)

    def circle(self, configure: Configure[CircleBuilder] = None) -> "GBuilder":
        return self._child(CircleBuilder, configure)

    def ellipse(self, configure: Configure[EllipseBuilder] = None) -> "GBuilder":
        return self._child(EllipseBuilder, configure)

    def line(self, configure: Configure[LineBuilder] = None) -> "GBuilder":
        return self._child(LineBuilder, configure)

    def polyline(self, configure: Configure[PolylineBuilder] = None) -> "GBuilder":
        return self._child(PolylineBuilder, configure)

    def polygon(self, configure: Configure[PolygonBuilder] = None) -> "GBuilder":
        return self._child(PolygonBuilder, configure)

    def path(self, configure: Configure[PathBuilder] = None) -> "GBuilder":
        return self._child(PathBuilder, configure)

    def text(self, configure: Configure[TextBuilder] = None) -> "GBuilder":
        return self._child(TextBuilder, configure)

    def g(self, configure: Configure["GBuilder"] = None) -> "GBuilder":
        return self._child(GBuilder, configure)

    def use(self, configure: Configure[UseBuilder] = None) -> "GBuilder":
        return self._child(UseBuilder, configure)


class MaskBuilder(ElementBuilder[Mask]):
    element_class = Mask

    def mask_units(self, value: Union[str, GradientUnits]) -> "MaskBuilder":
        return self.attr("maskUnits", str(value))

    def mask_content_units(self, value: Union[str, GradientUnits]) -> "MaskBuilder":
        return self.attr("maskContentUnits", str(value))

    def rect(self, configure: Configure[RectBuilder] = None) -> "MaskBuilder":
        return self._child(RectBuilder, configure)

    def circle(self, configure: Configure[CircleBuilder] = None) -> "MaskBuilder":
        return self._child(CircleBuilder, configure)

    def g(self, configure: Configure[GBuilder] = None) -> "MaskBuilder":
        return self._child(GBuilder, configure)


class SymbolBuilder(_Viewport, ElementBuilder[Symbol]):
    element_class = Symbol

    def rect(self, configure: Configure[RectBuilder] = None) -> "SymbolBuilder":
        return self._child(RectBuilder, configure)

    def circle(self, configure: Configure[CircleBuilder] = None) -> "SymbolBuilder":
        return self._child(CircleBuilder, configure)

    def path(self, configure: Configure[PathBuilder] = None) -> "SymbolBuilder":
        return self._child(PathBuilder, configure)

    def g(self, configure: Configure[GBuilder] = None) -> "SymbolBuilder":
        return self._child(GBuilder, configure)


class DefsBuilder(ElementBuilder[Defs]):
    element_class = Defs

    def linear_gradient(self, configure: Configure[LinearGradientBuilder] = None) -> "DefsBuilder":
        return self._child(LinearGradientBuilder, configure)

    def radial_gradient(self, configure: Configure[RadialGradientBuilder] = None) -> "DefsBuilder":
        return self._child(RadialGradientBuilder, configure)

    # A string argument still sets the clip-path/mask attribute; anything else
    # adds a <clipPath>/<mask> child.

    def clip_path(  # type: ignore[override]
        self, configure: Union[str, Configure[ClipPathBuilder]] = None
    ) -> "DefsBuilder":
        if isinstance(configure, str):
            return super().clip_path(configure)
        return self._child(ClipPathBuilder, configure)

    def mask(  # type: ignore[override]
        self, configure: Union[str, Configure[MaskBuilder]] = None
    ) -> "DefsBuilder":
        if isinstance(configure, str):
            return super().mask(configure)
        return self._child(MaskBuilder, configure)

    def symbol(self, configure: Configure[SymbolBuilder] = None) -> "DefsBuilder":
        return self._child(SymbolBuilder, configure)


class SvgBuilder(_Size, _Viewport, ElementBuilder[Svg]):
    """Root ``<svg>`` builder."""

    element_class = Svg

    def xmlns(self, value: str = SVG_NS) -> "SvgBuilder":
        return self.attr("xmlns", value)

    def rect(self, configure: Configure[RectBuilder] = None) -> "SvgBuilder":
        return self._child(RectBuilder, configure)

    def circle(self, configure: Configure[CircleBuilder] = None) -> "SvgBuilder":
        return self._child(CircleBuilder, configure)

    def ellipse(self, configure: Configure[EllipseBuilder] = None) -> "SvgBuilder":
        return self._child(EllipseBuilder, configure)

    def line(self, configure: Configure[LineBuilder] = None) -> "SvgBuilder":
        return self._child(LineBuilder, configure)

    def polyline(self, configure: Configure[PolylineBuilder] = None) -> "SvgBuilder":
        return self._child(PolylineBuilder, configure)

    def polygon(self, configure: Configure[PolygonBuilder] = None) -> "SvgBuilder":
        return self._child(PolygonBuilder, configure)

    def path(self, configure: Configure[PathBuilder] = None) -> "SvgBuilder":
        return self._child(PathBuilder, configure)

    def text(self, configure: Configure[TextBuilder] = None) -> "SvgBuilder":
        return self._child(TextBuilder, configure)

    def g(self, configure: Configure[GBuilder] = None) -> "SvgBuilder":
        return self._child(GBuilder, configure)

    def defs(self, configure: Configure[DefsBuilder] = None) -> "SvgBuilder":
        return self._child(DefsBuilder, configure)

    def use(self, configure: Configure[UseBuilder] = None) -> "SvgBuilder":
        return self._child(UseBuilder, configure)

    def symbol(self, configure: Configure[SymbolBuilder] = None) -> "SvgBuilder":
        return self._child(SymbolBuilder, configure)


__all__ = [
    "CircleBuilder",
    "ClipPathBuilder",
    "DefsBuilder",
    "ElementBuilder",
    "EllipseBuilder",
    "GBuilder",
    "GradientUnits",
    "LineBuilder",
    "LinearGradientBuilder",
    "MaskBuilder",
    "PathBuilder",
    "PolygonBuilder",
    "PolylineBuilder",
    "RadialGradientBuilder",
    "RectBuilder",
    "StopBuilder",
    "SvgBuilder",
    "SymbolBuilder",
    "TSpanBuilder",
    "TextBuilder",
    "UseBuilder",
]
