"""Geometry helpers for editing element placement on the widescreen slide.

All values are inches unless a function says otherwise. Editing helpers
return a new SlideTemplate; the input template is never modified.
"""

import math

from src.schemas.slide_template import ElementLayout, ElementName, Position, Size, SlideTemplate

SLIDE_WIDTH = 13.33
SLIDE_HEIGHT = 7.5

DEFAULT_GRID_SIZE = 0.1

MIN_ELEMENT_SIZE: dict[ElementName, Size] = {
    ElementName.META_PRIMARY: Size(w=1.0, h=0.2),
    ElementName.META_SECONDARY: Size(w=1.0, h=0.2),
    ElementName.HEADING: Size(w=1.0, h=0.3),
    ElementName.BODY: Size(w=2.0, h=1.0),
    ElementName.IMAGE: Size(w=1.0, h=0.75),
    ElementName.CAPTION: Size(w=1.0, h=0.2),
}


def _round_half_up(value: float, step: float = 0.01) -> float:
    return round(math.floor(value / step + 0.5) * step, 10)


def to_pixel(inches: float, scale: float) -> float:
    """Inches to pixels at ``scale`` pixels per inch."""
    return inches * scale


def to_inch(pixels: float, scale: float) -> float:
    """Pixels to inches at ``scale`` pixels per inch, to 0.01" precision."""
    return _round_half_up(pixels / scale)


def clamp_position(x: float, y: float, w: float, h: float) -> Position:
    """Keep an element of size ``w`` x ``h`` fully on the slide."""
    max_x = max(0.0, SLIDE_WIDTH - w)
    max_y = max(0.0, SLIDE_HEIGHT - h)
    return Position(
        x=_round_half_up(min(max(0.0, x), max_x)),
        y=_round_half_up(min(max(0.0, y), max_y)),
    )


def clamp_size(w: float, h: float, min_w: float, min_h: float) -> Size:
    """Clamp a size between a minimum and the slide dimensions."""
    return Size(
        w=min(max(w, min_w), SLIDE_WIDTH),
        h=min(max(h, min_h), SLIDE_HEIGHT),
    )


def snap_to_grid(value: float, grid_size: float = DEFAULT_GRID_SIZE) -> float:
    """Snap to the nearest grid increment; a grid size of 0 disables snapping."""
    if grid_size == 0:
        return value
    return _round_half_up(value, grid_size)


def move_element(
    template: SlideTemplate,
    name: ElementName | str,
    x: float,
    y: float,
    grid_size: float = 0,
) -> SlideTemplate:
    """New template with one element moved, snapped and kept on the slide."""
    element = template.find_element(name)
    size = element.layout.size
    position = clamp_position(snap_to_grid(x, grid_size), snap_to_grid(y, grid_size), size.w, size.h)
    layout = element.layout.model_copy(update={"position": position})
    return template.with_element(name, layout=layout)


def resize_element(
    template: SlideTemplate,
    name: ElementName | str,
    w: float,
    h: float,
    grid_size: float = 0,
) -> SlideTemplate:
    """New template with one element resized within its minimum and the slide.

    The element's position is re-clamped so the resized box stays on the slide.
    """
    name = ElementName(name)
    element = template.find_element(name)
    minimum = MIN_ELEMENT_SIZE[name]
    size = clamp_size(snap_to_grid(w, grid_size), snap_to_grid(h, grid_size), minimum.w, minimum.h)
    current = element.layout.position
    position = clamp_position(current.x, current.y, size.w, size.h)
    layout = ElementLayout(position=position, size=size, z_index=element.layout.z_index)
    return template.with_element(name, layout=layout)
