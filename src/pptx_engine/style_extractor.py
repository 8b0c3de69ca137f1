"""Pull background and placeholder text styles out of one slide document.

Works on a slide master or a slide layout. Every lookup is optional: a
missing attribute leaves the corresponding field as None so that the merge
step can fill it from another level or from the defaults.
"""

import logging
from typing import Optional

from lxml import etree

from src.pptx_engine.color_space import apply_color_modifiers, modifier_fraction
from src.pptx_engine.theme_resolver import resolve_font, resolve_scheme_color
from src.pptx_engine.xml_query import find_all, find_child, find_first, local_name, qn
from src.schemas.extraction import ExtractedStyles, PlaceholderStyle, ThemeData

logger = logging.getLogger(__name__)

_COLOR_TAGS = {qn("a:srgbClr"), qn("a:schemeClr"), qn("a:sysClr")}

# Master txStyles section -> placeholder types it styles
_TX_STYLE_ROLES = {
    "titleStyle": ("title", "ctrTitle"),
    "bodyStyle": ("body", "subTitle", "obj"),
    "otherStyle": (),
}


# -----------------------------------------------------------------------
# Colors
# -----------------------------------------------------------------------

def _base_color(color_el: etree._Element, theme: ThemeData) -> Optional[str]:
    tag = local_name(color_el)
    if tag == "srgbClr":
        val = color_el.get("val")
        return f"#{val}" if val else None
    if tag == "schemeClr":
        val = color_el.get("val")
        return resolve_scheme_color(val, theme) if val else None
    if tag == "sysClr":
        last = color_el.get("lastClr")
        return f"#{last}" if last else None
    return None


def _modifiers(color_el: etree._Element) -> list[tuple[str, float]]:
    result = []
    for child in color_el:
        if not isinstance(child.tag, str):
            continue
        fraction = modifier_fraction(child.get("val"))
        if fraction is None:
            logger.debug(f"Skipping color modifier without numeric value: {child.tag}")
            continue
        result.append((local_name(child), fraction))
    return result


def resolve_color(container: Optional[etree._Element], theme: ThemeData) -> Optional[str]:
    """Resolve the first color choice inside ``container`` to a hex value.

    Literal RGB is used as-is, scheme references go through the theme
    (with tx/bg aliases), system colors use their last known value. Any
    modifiers attached to the color element are applied in order.
    """
    if container is None:
        return None
    color_el = next((el for el in container.iter() if el.tag in _COLOR_TAGS), None)
    if color_el is None:
        return None
    base = _base_color(color_el, theme)
    if base is None:
        return None
    try:
        return apply_color_modifiers(base, _modifiers(color_el))
    except ValueError as e:
        logger.debug(f"Unresolvable color {base}: {e}")
        return None


def extract_background(doc: etree._Element, theme: ThemeData) -> Optional[str]:
    """Background color of a master/layout: explicit fill, then style reference."""
    bg_pr = find_first(doc, "p:bgPr")
    if bg_pr is not None:
        solid = find_first(bg_pr, "a:solidFill")
        if solid is not None:
            color = resolve_color(solid, theme)
            if color:
                return color

    bg_ref = find_first(doc, "p:bgRef")
    if bg_ref is not None:
        return resolve_color(bg_ref, theme)

    return None


# -----------------------------------------------------------------------
# Text styles
# -----------------------------------------------------------------------

def _find_def_rpr(container: Optional[etree._Element]) -> Optional[etree._Element]:
    # Level-1 paragraph defaults first, then any paragraph properties
    if container is None:
        return None
    lvl1 = find_first(container, "a:lvl1pPr")
    def_rpr = find_first(lvl1, "a:defRPr")
    if def_rpr is not None:
        return def_rpr
    ppr = find_first(container, "a:pPr")
    return find_first(ppr, "a:defRPr")


def _run_properties(sp: etree._Element) -> Optional[etree._Element]:
    # Childless elements are falsy in lxml, so compare against None explicitly
    candidates = (
        lambda: _find_def_rpr(find_first(sp, "a:lstStyle")),
        lambda: _find_def_rpr(find_first(sp, "p:txBody")),
        lambda: find_first(sp, "a:endParaRPr"),
        lambda: find_first(sp, "a:rPr"),
    )
    for lookup in candidates:
        rpr = lookup()
        if rpr is not None:
            return rpr
    return None


def _font_family(rpr: etree._Element, theme: ThemeData) -> Optional[str]:
    for tag in ("a:latin", "a:ea"):
        el = find_child(rpr, tag)
        typeface = el.get("typeface") if el is not None else None
        if typeface:
            return resolve_font(typeface, theme)
    return None


def _size_points(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        return int(raw) / 100
    except ValueError:
        logger.debug(f"Ignoring malformed font size: {raw!r}")
        return None


def style_from_rpr(rpr: Optional[etree._Element], theme: ThemeData, ph_type: str) -> PlaceholderStyle:
    """Read the optional style fields of one run-property element."""
    if rpr is None:
        return PlaceholderStyle(type=ph_type)

    bold = True if rpr.get("b") in ("1", "true") else None
    return PlaceholderStyle(
        type=ph_type,
        font_family=_font_family(rpr, theme),
        font_size=_size_points(rpr.get("sz")),
        font_color=resolve_color(find_child(rpr, "a:solidFill"), theme),
        bold=bold,
    )


def extract_text_style(sp: etree._Element, theme: ThemeData, ph_type: str = "body") -> PlaceholderStyle:
    """Text style of one placeholder shape."""
    return style_from_rpr(_run_properties(sp), theme, ph_type)


def extract_placeholders(doc: etree._Element, theme: ThemeData) -> list[PlaceholderStyle]:
    """Styles for every shape carrying a placeholder marker, in document order."""
    result = []
    for sp in find_all(doc, "p:sp"):
        ph = find_first(sp, "p:ph")
        if ph is None:
            continue
        ph_type = ph.get("type") or "body"
        result.append(extract_text_style(sp, theme, ph_type))
    return result


def extract_styles(doc: etree._Element, theme: ThemeData) -> ExtractedStyles:
    """Background plus placeholder styles of one slide document."""
    return ExtractedStyles(
        background=extract_background(doc, theme),
        placeholders=extract_placeholders(doc, theme),
    )


def extract_master_text_styles(doc: etree._Element, theme: ThemeData) -> dict[str, PlaceholderStyle]:
    """Level-1 defaults from the master's ``p:txStyles``, keyed by section name.

    Keys are ``titleStyle``, ``bodyStyle`` and ``otherStyle``; sections that
    are absent are left out.
    """
    tx_styles = find_first(doc, "p:txStyles")
    if tx_styles is None:
        return {}

    result = {}
    for section in _TX_STYLE_ROLES:
        section_el = find_child(tx_styles, f"p:{section}")
        if section_el is None:
            continue
        lvl1 = find_child(section_el, "a:lvl1pPr")
        rpr = find_child(lvl1, "a:defRPr")
        if rpr is not None:
            result[section] = style_from_rpr(rpr, theme, section)
    return result


def text_style_section(ph_type: str) -> str:
    """Which ``p:txStyles`` section governs a placeholder type."""
    for section, roles in _TX_STYLE_ROLES.items():
        if ph_type in roles:
            return section
    return "otherStyle"
