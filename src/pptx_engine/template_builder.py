"""Merge master/layout styles and map placeholder roles onto template slots.

Everything here is pure: inputs are extracted styles plus the theme, output
is a complete SlideTemplate. Missing data always falls through to defaults.
"""

import logging
import re
import time
from typing import Optional

from src.pptx_engine.color_space import lighten_color, normalize_hex
from src.pptx_engine.template_registry import build_elements
from src.schemas.extraction import ExtractedStyles, PlaceholderStyle, ThemeData
from src.schemas.slide_template import (
    DEFAULT_COLOR,
    DEFAULT_FONT,
    Background,
    ElementFontStyle,
    ElementName,
    SlideTemplate,
)

logger = logging.getLogger(__name__)

EXTRACTED_DESCRIPTION = "Custom template extracted from .pptx"

_EXTENSION_RE = re.compile(r"\.(pptx|potx|pptm)$", re.IGNORECASE)

# (font size, color, weight) used when no placeholder feeds a slot
SLOT_DEFAULTS: dict[ElementName, tuple[float, str, int]] = {
    ElementName.HEADING: (14, DEFAULT_COLOR, 700),
    ElementName.BODY: (12, DEFAULT_COLOR, 500),
    ElementName.META_PRIMARY: (10, "#999999", 400),
    ElementName.CAPTION: (9, "#C0C0C0", 400),
}

_STYLE_FIELDS = ("font_family", "font_size", "font_color", "bold")


# -----------------------------------------------------------------------
# Merge
# -----------------------------------------------------------------------

def overlay_defined(base: PlaceholderStyle, top: PlaceholderStyle) -> PlaceholderStyle:
    """Copy of ``base`` with every field ``top`` actually defines overwritten."""
    update = {field: getattr(top, field) for field in _STYLE_FIELDS if getattr(top, field) is not None}
    return base.model_copy(update=update)


def merge_styles(master: ExtractedStyles, layouts: ExtractedStyles) -> ExtractedStyles:
    """Combine master and layout styles, one placeholder per role.

    The master's background wins. Layout placeholders refine the master's
    entry for the same role field by field; roles new to the layouts are
    added as they are.
    """
    by_type: dict[str, PlaceholderStyle] = {}
    for ph in master.placeholders:
        by_type[ph.type] = ph

    for ph in layouts.placeholders:
        existing = by_type.get(ph.type)
        by_type[ph.type] = overlay_defined(existing, ph) if existing is not None else ph

    return ExtractedStyles(
        background=master.background or layouts.background,
        placeholders=list(by_type.values()),
    )


# -----------------------------------------------------------------------
# Slot mapping
# -----------------------------------------------------------------------

def rank_by_font_size(placeholders: list[PlaceholderStyle]) -> list[PlaceholderStyle]:
    """Placeholders with an explicit size, largest first (stable on ties)."""
    sized = [ph for ph in placeholders if ph.font_size is not None]
    return sorted(sized, key=lambda ph: ph.font_size, reverse=True)


def to_element_style(
    ph: Optional[PlaceholderStyle],
    defaults: tuple[float, str, int],
    theme: ThemeData,
) -> ElementFontStyle:
    """Fill a placeholder's missing fields from slot defaults and the theme."""
    size, color, weight = defaults
    family = theme.minor_font or DEFAULT_FONT
    if ph is None:
        return ElementFontStyle(font_family=family, font_size=size, font_color=color, font_weight=weight)

    return ElementFontStyle(
        font_family=ph.font_family or family,
        font_size=ph.font_size or size,
        font_color=normalize_hex(ph.font_color) or color,
        font_weight=700 if ph.bold else weight,
    )


def derive_secondary_font_style(primary: ElementFontStyle) -> ElementFontStyle:
    """Role-label style derived from the speaker name style: 30% lighter, bold drops to medium."""
    return ElementFontStyle(
        font_family=primary.font_family,
        font_size=primary.font_size,
        font_color=lighten_color(primary.font_color, 0.3),
        font_weight=500 if primary.font_weight >= 700 else primary.font_weight,
    )


def _pick(ranked: list[PlaceholderStyle], index: int) -> Optional[PlaceholderStyle]:
    return ranked[index] if -len(ranked) <= index < len(ranked) else None


def template_name(file_name: str) -> str:
    """Display name: the file name without its presentation extension."""
    return _EXTENSION_RE.sub("", file_name)


def build_template(file_name: str, styles: ExtractedStyles, theme: ThemeData) -> SlideTemplate:
    """Assemble a complete six-slot template from merged styles."""
    by_type: dict[str, PlaceholderStyle] = {ph.type: ph for ph in styles.placeholders}
    ranked = rank_by_font_size(styles.placeholders)

    title_ph = by_type.get("title") or by_type.get("ctrTitle") or _pick(ranked, 0)
    body_ph = by_type.get("body") or _pick(ranked, 1)
    meta_ph = by_type.get("subTitle") or _pick(ranked, 2)
    caption_ph = (
        by_type.get("ftr") or by_type.get("sldNum") or by_type.get("dt") or _pick(ranked, -1)
    )

    heading = to_element_style(title_ph, SLOT_DEFAULTS[ElementName.HEADING], theme)
    body = to_element_style(body_ph, SLOT_DEFAULTS[ElementName.BODY], theme)
    meta = to_element_style(meta_ph, SLOT_DEFAULTS[ElementName.META_PRIMARY], theme)
    caption = to_element_style(caption_ph, SLOT_DEFAULTS[ElementName.CAPTION], theme)

    speaker = ElementFontStyle(
        font_family=meta.font_family,
        font_size=max(meta.font_size + 1, 11),
        font_color=heading.font_color,
        font_weight=700,
    )

    template = SlideTemplate(
        id=f"custom-{int(time.time() * 1000)}",
        name=template_name(file_name),
        description=EXTRACTED_DESCRIPTION,
        background=Background(color=normalize_hex(styles.background) or "#FFFFFF"),
        elements=build_elements({
            ElementName.META_PRIMARY: (meta,),
            ElementName.META_SECONDARY: (speaker, derive_secondary_font_style(speaker)),
            ElementName.HEADING: (heading,),
            ElementName.BODY: (body,),
            ElementName.CAPTION: (caption,),
        }),
    )
    logger.debug(
        f"Built template '{template.name}': {len(styles.placeholders)} placeholders, "
        f"{len(ranked)} with explicit sizes"
    )
    return template
