"""Map suggested slide visuals onto drawable shape and background settings."""

from typing import NamedTuple, Optional

from pptx.enum.shapes import MSO_SHAPE

from src.pptx_engine.layout_utils import SLIDE_HEIGHT, SLIDE_WIDTH
from src.schemas.analysis_schema import SlideVisual

SHAPE_MAP: dict[str, Optional[MSO_SHAPE]] = {
    "rectangle": MSO_SHAPE.RECTANGLE,
    "circle": MSO_SHAPE.OVAL,
    "arrow": MSO_SHAPE.RIGHT_ARROW,
    "star": MSO_SHAPE.STAR_5_POINT,
    "diamond": MSO_SHAPE.DIAMOND,
    "triangle": MSO_SHAPE.ISOSCELES_TRIANGLE,
    "cloud": MSO_SHAPE.CLOUD,
    "heart": MSO_SHAPE.HEART,
    "none": None,
}

# Boxes on a 10" x 5.63" reference slide, scaled to the widescreen slide below
_REFERENCE_WIDTH = 10.0
_REFERENCE_POSITIONS: dict[str, tuple[float, float, float, float]] = {
    "background": (0, 0, 10, 5.63),
    "top-right": (8.0, 0.3, 1.5, 1.5),
    "bottom-left": (0.5, 3.8, 1.5, 1.5),
    "center-back": (3.5, 1.5, 3, 3),
    "left-side": (0.3, 1.5, 1.2, 2.5),
    "right-side": (8.5, 1.5, 1.2, 2.5),
}

_SCALE = SLIDE_WIDTH / _REFERENCE_WIDTH

POSITION_MAP: dict[str, tuple[float, float, float, float]] = {
    name: (
        round(x * _SCALE, 2),
        round(y * _SCALE, 2),
        round(min(w * _SCALE, SLIDE_WIDTH), 2),
        round(min(h * _SCALE, SLIDE_HEIGHT), 2),
    )
    for name, (x, y, w, h) in _REFERENCE_POSITIONS.items()
}

GRADIENT_ANGLE = 135


class ShapeConfig(NamedTuple):
    shape: MSO_SHAPE
    x: float
    y: float
    w: float
    h: float
    color: str
    opacity: float


class BackgroundConfig(NamedTuple):
    color: str
    gradient_to: Optional[str] = None
    angle: int = GRADIENT_ANGLE


def visual_to_shape_config(visual: SlideVisual) -> Optional[ShapeConfig]:
    """Decorative shape for a visual; None when no shape should be drawn."""
    shape = SHAPE_MAP.get(visual.shape_type)
    if shape is None:
        return None

    x, y, w, h = POSITION_MAP.get(visual.position, POSITION_MAP["top-right"])
    opacity = 0.15 if visual.position in ("background", "center-back") else 0.6
    return ShapeConfig(shape, x, y, w, h, visual.shape_color.lstrip("#"), opacity)


def background_config(visual: SlideVisual, background_color: str) -> BackgroundConfig:
    """Linear gradient when the visual asks for one, else the solid theme color."""
    gradient = visual.background_gradient
    if gradient is not None:
        return BackgroundConfig(gradient.start.lstrip("#"), gradient.end.lstrip("#"))
    return BackgroundConfig(background_color.lstrip("#"))
