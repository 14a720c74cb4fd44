"""Element tree for SVG documents and its markup serialization."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterator, List

from .formatting import escape_xml


@dataclass
class Element:
    """One markup tag instance.

    ``attributes`` keeps insertion order, which is also serialization order.
    ``children`` are emitted exactly as appended (painter's order). Leaf kinds
    set ``self_closing`` and always render as ``<tag .../>``; container kinds
    always render an open and a close tag, even when empty.
    """

    tag: ClassVar[str] = ""
    self_closing: ClassVar[bool] = False

    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)

    def render(self) -> str:
        attrs = _render_attributes(self.attributes)
        if self.self_closing:
            return f"<{self.tag}{attrs}/>"
        return f"<{self.tag}{attrs}>{self._render_content()}</{self.tag}>"

    def _render_content(self) -> str:
        return "".join(child.render() for child in self.children)

    def iter(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            yield from child.iter()

    def __str__(self) -> str:
        return self.render()


def _render_attributes(attributes: Dict[str, str]) -> str:
    if not attributes:
        return ""
    return " " + " ".join(f'{name}="{escape_xml(value)}"' for name, value in attributes.items())


@dataclass
class _TextBearing(Element):
    text_content: str = ""

    def _render_content(self) -> str:
        return escape_xml(self.text_content) + super()._render_content()


class Svg(Element):
    tag = "svg"

    def to_svg_string(self) -> str:
        return self.render()


class G(Element):
    tag = "g"


class Defs(Element):
    tag = "defs"


class Symbol(Element):
    tag = "symbol"


class LinearGradient(Element):
    tag = "linearGradient"


class RadialGradient(Element):
    tag = "radialGradient"


class ClipPath(Element):
    tag = "clipPath"


class Mask(Element):
    tag = "mask"


class Text(_TextBearing):
    tag = "text"


class TSpan(_TextBearing):
    tag = "tspan"


# Leaf elements.


class Rect(Element):
    tag = "rect"
    self_closing = True


class Circle(Element):
    tag = "circle"
    self_closing = True


class Ellipse(Element):
    tag = "ellipse"
    self_closing = True


class Line(Element):
    tag = "line"
    self_closing = True


class Polyline(Element):
    tag = "polyline"
    self_closing = True


class Polygon(Element):
    tag = "polygon"
    self_closing = True


class Path(Element):
    tag = "path"
    self_closing = True


class Stop(Element):
    tag = "stop"
    self_closing = True


class Use(Element):
    tag = "use"
    self_closing = True


__all__ = [
    "Circle",
    "ClipPath",
    "Defs",
    "Element",
    "Ellipse",
    "G",
    "Line",
    "LinearGradient",
    "Mask",
    "Path",
    "Polygon",
    "Polyline",
    "RadialGradient",
    "Rect",
    "Stop",
    "Svg",
    "Symbol",
    "TSpan",
    "Text",
    "Use",
]
