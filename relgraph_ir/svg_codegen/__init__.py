"""Scene → SVG markup generation helpers."""

from .generator import (
    FILL_COLORS,
    generate_svg,
    generate_svg_document,
)
from .utils import xml_escape

__all__ = [
    "FILL_COLORS",
    "generate_svg",
    "generate_svg_document",
    "xml_escape",
]
