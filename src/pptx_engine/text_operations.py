"""Text box operations for PowerPoint slides.

Text boxes are placed with zero internal margins so that the template's
inch coordinates are where the text actually starts.
"""

import logging
from typing import Any

from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.util import Inches, Pt

from src.pptx_engine.color_space import normalize_hex

logger = logging.getLogger(__name__)


def add_textbox(
    slide,
    text: str,
    left: float,
    top: float,
    width: float,
    height: float,
    font_name: str = "Noto Sans",
    font_size: float = 12,
    font_color: str = "#434343",
    bold: bool = False,
    italic: bool = False,
    alignment: str = "left",
    word_wrap: bool = True,
    vertical_anchor: str = "top",
    line_spacing: float | None = None,
) -> object:
    """Add a single-run text box to a slide.

    Args:
        slide: The slide to add the text box to.
        text: The text content.
        left, top, width, height: Position and size in inches.
        font_name: Font family name.
        font_size: Font size in points.
        font_color: Hex color string (e.g., "#434343").
        bold: Whether text should be bold.
        italic: Whether text should be italic.
        alignment: Text alignment ("left", "center", "right", "justify").
        word_wrap: Whether to enable word wrapping.
        vertical_anchor: Vertical text position ("top", "middle", "bottom").
        line_spacing: Optional line spacing in points.

    Returns:
        The created text box shape.
    """
    return add_multi_format_textbox(
        slide,
        [{
            "text": text,
            "font_name": font_name,
            "font_size": font_size,
            "font_color": font_color,
            "bold": bold,
            "italic": italic,
        }],
        left, top, width, height,
        alignment=alignment,
        word_wrap=word_wrap,
        vertical_anchor=vertical_anchor,
        line_spacing=line_spacing,
    )


def add_multi_format_textbox(
    slide,
    runs: list[dict[str, Any]],
    left: float,
    top: float,
    width: float,
    height: float,
    alignment: str = "left",
    word_wrap: bool = True,
    vertical_anchor: str = "top",
    line_spacing: float | None = None,
) -> object:
    """Add a text box whose single paragraph holds independently formatted runs.

    Used for the speaker line, where the name and the role label carry
    different styles.

    Args:
        slide: Target slide.
        runs: List of run specifications, each a dict with:
            - text (str): The text content.
            - font_name (str, optional): Font family.
            - font_size (float, optional): Size in points.
            - font_color (str, optional): Hex color.
            - bold (bool, optional): Bold flag.
            - italic (bool, optional): Italic flag.
        left, top, width, height: Position and size in inches.
        alignment: Text alignment for the paragraph.
        word_wrap: Whether to enable word wrapping.
        vertical_anchor: Vertical text position.
        line_spacing: Optional line spacing in points.

    Returns:
        The created text box shape.
    """
    txBox = slide.shapes.add_textbox(
        Inches(left), Inches(top), Inches(width), Inches(height)
    )
    tf = txBox.text_frame
    tf.word_wrap = word_wrap
    tf.auto_size = MSO_AUTO_SIZE.NONE
    tf.vertical_anchor = _get_anchor(vertical_anchor)

    # Zero out internal margins for accurate positioning
    tf.margin_left = Inches(0)
    tf.margin_top = Inches(0)
    tf.margin_right = Inches(0)
    tf.margin_bottom = Inches(0)

    p = tf.paragraphs[0]
    p.alignment = _get_alignment(alignment)
    if line_spacing is not None:
        p.line_spacing = Pt(line_spacing)

    for run_spec in runs:
        run = p.add_run()
        run.text = run_spec.get("text", "")
        _apply_run_format(run, run_spec)

    return txBox


def _apply_run_format(run, run_spec: dict[str, Any]) -> None:
    """Apply the formatting keys present in ``run_spec`` to one run."""
    if "font_name" in run_spec:
        run.font.name = run_spec["font_name"]
    if "font_size" in run_spec:
        run.font.size = Pt(run_spec["font_size"])
    if "font_color" in run_spec:
        run.font.color.rgb = hex_to_rgb(run_spec["font_color"])
    if "bold" in run_spec:
        run.font.bold = run_spec["bold"]
    if "italic" in run_spec:
        run.font.italic = run_spec["italic"]


def _get_alignment(alignment: str) -> int:
    """Convert alignment string to PP_ALIGN constant."""
    align_map = {
        "left": PP_ALIGN.LEFT,
        "center": PP_ALIGN.CENTER,
        "right": PP_ALIGN.RIGHT,
        "justify": PP_ALIGN.JUSTIFY,
    }
    return align_map.get(alignment.lower(), PP_ALIGN.LEFT)


def _get_anchor(vertical_anchor: str) -> int:
    anchor_map = {
        "top": MSO_ANCHOR.TOP,
        "middle": MSO_ANCHOR.MIDDLE,
        "bottom": MSO_ANCHOR.BOTTOM,
    }
    return anchor_map.get(vertical_anchor.lower(), MSO_ANCHOR.TOP)


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert a hex color string (``#RGB`` or ``#RRGGBB``, '#' optional) to RGBColor."""
    normalized = normalize_hex(hex_color)
    if normalized is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return RGBColor.from_string(normalized[1:])
