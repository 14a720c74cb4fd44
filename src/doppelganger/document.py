"""Entry point: build an SVG document from a configuration routine."""
from __future__ import annotations

from typing import Callable, Optional

from .builders import SvgBuilder
from .elements import Svg


def svg(configure: Optional[Callable[[SvgBuilder], object]] = None) -> Svg:
    """Build a root ``<svg>`` element.

    ``configure`` receives the root builder and populates it; its return value
    is ignored. Every call allocates an independent tree.

        doc = svg(lambda s: s.width(100).height(100).rect(lambda r: r.fill("red")))
        markup = doc.render()
    """
    builder = SvgBuilder()
    if configure is not None:
        configure(builder)
    return builder.build()


def to_svg_string(root: Svg) -> str:
    return root.render()


__all__ = ["svg", "to_svg_string"]
