"""Presentation and slide-level operations using python-pptx.

Decks are built from python-pptx's default template resized to the 16:9
widescreen format; every slide starts blank and is filled with free-floating
text boxes, pictures and shapes.
"""

import logging

from pptx import Presentation
from pptx.util import Inches

from src.pptx_engine.text_operations import hex_to_rgb

logger = logging.getLogger(__name__)

SLIDE_WIDTH_INCHES = 13.333
SLIDE_HEIGHT_INCHES = 7.5

# "Blank" layout of the default python-pptx template
BLANK_LAYOUT_INDEX = 6


def create_presentation(
    width_inches: float = SLIDE_WIDTH_INCHES,
    height_inches: float = SLIDE_HEIGHT_INCHES,
) -> Presentation:
    """Create a new empty widescreen presentation."""
    prs = Presentation()
    prs.slide_width = Inches(width_inches)
    prs.slide_height = Inches(height_inches)
    return prs


def add_blank_slide(prs: Presentation) -> object:
    """Add a slide with no placeholders."""
    layouts = prs.slide_layouts
    blank_idx = BLANK_LAYOUT_INDEX
    if blank_idx >= len(layouts):
        blank_idx = len(layouts) - 1
        logger.warning(f"Blank layout not found, using layout {blank_idx}")
    return prs.slides.add_slide(layouts[blank_idx])


def set_background_color(slide, color: str) -> None:
    """Fill the slide background with a solid color."""
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = hex_to_rgb(color)


def set_background_gradient(slide, start_color: str, end_color: str, angle: float = 135) -> None:
    """Fill the slide background with a two-stop linear gradient."""
    fill = slide.background.fill
    fill.gradient()
    fill.gradient_angle = angle
    stops = fill.gradient_stops
    stops[0].color.rgb = hex_to_rgb(start_color)
    stops[-1].color.rgb = hex_to_rgb(end_color)
