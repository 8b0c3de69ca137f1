"""Resolve a theme part into a color-scheme lookup table and font pair.

Slide documents refer to colors by scheme slot (``accent1``, ``tx1``...) and
to fonts by symbolic references (``+mj-lt``). This module reads the theme
once per extraction and answers those references.
"""

import logging
from typing import Optional

from lxml import etree

from src.pptx_engine.xml_query import find_child, find_first, qn
from src.schemas.extraction import ThemeData
from src.schemas.slide_template import DEFAULT_FONT

logger = logging.getLogger(__name__)

SCHEME_SLOTS = (
    "dk1", "lt1", "dk2", "lt2",
    "accent1", "accent2", "accent3", "accent4", "accent5", "accent6",
    "hlink", "folHlink",
)

# Text/background aliases used by slide documents
SCHEME_ALIASES = {
    "tx1": "dk1",
    "tx2": "dk2",
    "bg1": "lt1",
    "bg2": "lt2",
}

__all__ = [
    "DEFAULT_FONT",
    "SCHEME_ALIASES",
    "SCHEME_SLOTS",
    "empty_theme",
    "parse_theme",
    "resolve_font",
    "resolve_scheme_color",
]


def empty_theme() -> ThemeData:
    """Theme with no scheme colors and default fonts."""
    return ThemeData()


def _slot_color(slot_el: etree._Element) -> Optional[str]:
    srgb = find_child(slot_el, "a:srgbClr")
    if srgb is not None and srgb.get("val"):
        return f"#{srgb.get('val')}"
    sys_clr = find_child(slot_el, "a:sysClr")
    if sys_clr is not None and sys_clr.get("lastClr"):
        return f"#{sys_clr.get('lastClr')}"
    return None


def _concrete_typeface(el: Optional[etree._Element]) -> Optional[str]:
    # Typefaces starting with '+' are references, not font names
    if el is None:
        return None
    typeface = el.get("typeface")
    if not typeface or typeface.startswith("+"):
        return None
    return typeface


def _font_family(font_el: Optional[etree._Element]) -> str:
    if font_el is None:
        return DEFAULT_FONT
    return (
        _concrete_typeface(find_child(font_el, "a:latin"))
        or _concrete_typeface(find_child(font_el, "a:ea"))
        or DEFAULT_FONT
    )


def parse_theme(theme_root: Optional[etree._Element]) -> ThemeData:
    """Build ThemeData from a parsed theme document (None gives the empty theme)."""
    if theme_root is None:
        return empty_theme()

    color_scheme: dict[str, str] = {}
    clr_scheme = find_first(theme_root, "a:clrScheme")
    if clr_scheme is not None:
        for slot in SCHEME_SLOTS:
            slot_el = clr_scheme.find(qn(f"a:{slot}"))
            if slot_el is None:
                continue
            color = _slot_color(slot_el)
            if color:
                color_scheme[slot] = color

    return ThemeData(
        color_scheme=color_scheme,
        major_font=_font_family(find_first(theme_root, "a:majorFont")),
        minor_font=_font_family(find_first(theme_root, "a:minorFont")),
    )


def resolve_scheme_color(name: str, theme: ThemeData) -> Optional[str]:
    """Look up a scheme slot by name, following tx/bg aliases."""
    if name in theme.color_scheme:
        return theme.color_scheme[name]
    alias = SCHEME_ALIASES.get(name)
    if alias is not None:
        return theme.color_scheme.get(alias)
    return None


def resolve_font(typeface: str, theme: ThemeData) -> str:
    """Resolve ``+mj-*`` / ``+mn-*`` references; other names pass through."""
    if typeface.startswith("+mj-"):
        return theme.major_font
    if typeface.startswith("+mn-"):
        return theme.minor_font
    return typeface
