"""Decorative shape operations for PowerPoint slides."""

from lxml import etree
from pptx.enum.shapes import MSO_SHAPE
from pptx.util import Inches

from src.pptx_engine.text_operations import hex_to_rgb
from src.pptx_engine.xml_query import find_first, qn


def add_shape(
    slide,
    shape_type: MSO_SHAPE,
    left: float,
    top: float,
    width: float,
    height: float,
    fill_color: str,
    opacity: float = 1.0,
) -> object:
    """Add a borderless filled auto shape.

    Args:
        slide: The slide to add the shape to.
        shape_type: python-pptx auto shape type.
        left, top, width, height: Position and size in inches.
        fill_color: Fill color as hex string.
        opacity: Fill opacity from 0 (invisible) to 1 (solid).

    Returns:
        The created shape.
    """
    shape = slide.shapes.add_shape(
        shape_type,
        Inches(left),
        Inches(top),
        Inches(width),
        Inches(height),
    )
    shape.fill.solid()
    shape.fill.fore_color.rgb = hex_to_rgb(fill_color)
    shape.line.fill.background()

    if opacity < 1.0:
        set_fill_opacity(shape, opacity)

    return shape



def set_fill_opacity(shape, opacity: float) -> None:
    """Set the alpha of a shape's solid fill; python-pptx has no API for it."""
    srgb = find_first(shape._element.spPr, "a:srgbClr")
    if srgb is None:
        return
    for existing in srgb.findall(qn("a:alpha")):
        srgb.remove(existing)
    alpha = etree.SubElement(srgb, qn("a:alpha"))
    alpha.set("val", str(round(max(0.0, min(1.0, opacity)) * 100000)))
