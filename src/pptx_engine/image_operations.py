"""Image operations for PowerPoint slides."""

import logging
from pathlib import Path

from PIL import Image
from pptx.util import Inches

logger = logging.getLogger(__name__)


def add_image(
    slide,
    image_path: str | Path,
    left: float,
    top: float,
    width: float | None = None,
    height: float | None = None,
) -> object | None:
    """Add an image to a slide.

    Args:
        slide: The slide to add the image to.
        image_path: Path to the image file.
        left, top: Position in inches.
        width: Width in inches (None for original).
        height: Height in inches (None for original).

    Returns:
        The created picture shape, or None if the image couldn't be added.
    """
    image_path = Path(image_path)
    if not image_path.exists():
        logger.warning(f"Image not found: {image_path}")
        return None

    kwargs = {
        "image_file": str(image_path),
        "left": Inches(left),
        "top": Inches(top),
    }

    if width is not None:
        kwargs["width"] = Inches(width)
    if height is not None:
        kwargs["height"] = Inches(height)

    try:
        return slide.shapes.add_picture(**kwargs)
    except Exception as e:
        logger.warning(f"Could not add image {image_path}: {e}")
        return None


def fit_box(
    image_w: float,
    image_h: float,
    left: float,
    top: float,
    box_w: float,
    box_h: float,
) -> tuple[float, float, float, float]:
    """Largest box with the image's aspect ratio centered inside the given box."""
    aspect = image_w / image_h
    if aspect > (box_w / box_h):
        # Width-constrained
        width = box_w
        height = width / aspect
    else:
        # Height-constrained
        height = box_h
        width = height * aspect
    return left + (box_w - width) / 2, top + (box_h - height) / 2, width, height


def add_image_fitted(
    slide,
    image_path: str | Path,
    left: float,
    top: float,
    width: float,
    height: float,
) -> object | None:
    """Add an image scaled to fit inside a box, keeping its aspect ratio."""
    image_path = Path(image_path)
    if not image_path.exists():
        logger.warning(f"Image not found: {image_path}")
        return None

    try:
        with Image.open(image_path) as img:
            orig_w, orig_h = img.size
    except Exception as e:
        logger.warning(f"Could not read image dimensions: {e}")
        return add_image(slide, image_path, left, top, width, height)

    if not orig_w or not orig_h:
        return add_image(slide, image_path, left, top, width, height)

    return add_image(slide, image_path, *fit_box(orig_w, orig_h, left, top, width, height))
