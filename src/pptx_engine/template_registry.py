"""Built-in slide templates, the shared lecture layout, and template lookup."""

import logging
import secrets
import string
import time
from pathlib import Path

from src.schemas.slide_template import (
    DEFAULT_COLOR,
    DEFAULT_FONT,
    Background,
    ElementFontStyle,
    ElementLayout,
    ElementName,
    Position,
    Size,
    SlideTemplate,
    TemplateElement,
)

logger = logging.getLogger(__name__)


def _layout(x: float, y: float, w: float, h: float, z: int) -> ElementLayout:
    return ElementLayout(position=Position(x=x, y=y), size=Size(w=w, h=h), z_index=z)


# Geometry on a 13.33" x 7.5" widescreen slide, identical for every template
LECTURE_LAYOUT: dict[ElementName, ElementLayout] = {
    ElementName.META_PRIMARY: _layout(0.8, 0.3, 11.7, 0.35, 2),
    ElementName.META_SECONDARY: _layout(0.8, 0.7, 11.7, 0.35, 3),
    ElementName.HEADING: _layout(0.8, 1.3, 11.7, 0.5, 6),
    ElementName.BODY: _layout(0.8, 2.1, 7.0, 4.5, 5),
    ElementName.IMAGE: _layout(8.2, 2.1, 4.33, 3.25, 4),
    ElementName.CAPTION: _layout(0.8, 6.8, 11.7, 0.4, 1),
}


def _style(size: float, color: str, weight: int) -> ElementFontStyle:
    return ElementFontStyle(font_family=DEFAULT_FONT, font_size=size, font_color=color, font_weight=weight)


def build_elements(
    styles: dict[ElementName, tuple[ElementFontStyle, ...]],
) -> tuple[TemplateElement, ...]:
    """Pair each slot's styles with its lecture-layout geometry, in slot order."""
    return tuple(
        TemplateElement(name=name, layout=LECTURE_LAYOUT[name], styles=styles.get(name, ()))
        for name in ElementName
    )


def _preset(
    template_id: str,
    name: str,
    description: str,
    background: str,
    colors: tuple[str, str, str, str, str, str],
) -> SlideTemplate:
    meta, speaker, role, heading, body, caption = colors
    return SlideTemplate(
        id=template_id,
        name=name,
        description=description,
        thumbnail=f"/thumbnails/{template_id}.svg",
        background=Background(color=background),
        elements=build_elements({
            ElementName.META_PRIMARY: (_style(10, meta, 400),),
            ElementName.META_SECONDARY: (_style(11, speaker, 700), _style(11, role, 500)),
            ElementName.HEADING: (_style(14, heading, 700),),
            ElementName.BODY: (_style(12, body, 500),),
            ElementName.CAPTION: (_style(9, caption, 400),),
        }),
    )


BLANK_TEMPLATE = _preset(
    "blank", "Blank", "Clean default template on a white background", "#FFFFFF",
    ("#999999", "#434343", "#999999", "#434343", "#434343", "#C0C0C0"),
)

MODERN_DARK_TEMPLATE = _preset(
    "modern-dark", "Modern Dark", "Modern template on a dark background", "#1A1A2E",
    ("#666688", "#E0E0E0", "#8888AA", "#E0E0E0", "#CCCCCC", "#555577"),
)

SOFT_BLUE_TEMPLATE = _preset(
    "soft-blue", "Soft Blue", "Professional template in soft blue tones", "#F0F4FA",
    ("#9AABC8", "#26489D", "#7A8BAE", "#26489D", "#2D3748", "#A0B0C8"),
)

TEMPLATE_PRESETS: tuple[SlideTemplate, ...] = (
    BLANK_TEMPLATE,
    MODERN_DARK_TEMPLATE,
    SOFT_BLUE_TEMPLATE,
)


def get_template_by_id(template_id: str) -> SlideTemplate | None:
    """Find a built-in template by id."""
    for template in TEMPLATE_PRESETS:
        if template.id == template_id:
            return template
    return None


def create_blank_custom_template() -> SlideTemplate:
    """A new user template with default styles and a unique id."""
    from src.pptx_engine.template_builder import derive_secondary_font_style

    speaker = ElementFontStyle(font_size=11, font_color=DEFAULT_COLOR, font_weight=700)
    suffix = "".join(secrets.choice(string.ascii_lowercase + string.digits) for _ in range(4))

    return SlideTemplate(
        id=f"custom-{int(time.time() * 1000)}-{suffix}",
        name="Custom Template",
        description="User-created custom template",
        elements=build_elements({
            ElementName.META_PRIMARY: (_style(10, "#999999", 400),),
            ElementName.META_SECONDARY: (speaker, derive_secondary_font_style(speaker)),
            ElementName.HEADING: (_style(14, DEFAULT_COLOR, 700),),
            ElementName.BODY: (_style(12, DEFAULT_COLOR, 500),),
            ElementName.CAPTION: (_style(9, "#C0C0C0", 400),),
        }),
    )


def resolve_unique_name(name: str, existing_names: list[str]) -> str:
    """Append ``_1``, ``_2``... until the name is not taken."""
    if name not in existing_names:
        return name
    i = 1
    while f"{name}_{i}" in existing_names:
        i += 1
    return f"{name}_{i}"


def load_template(source: str | Path) -> SlideTemplate:
    """Resolve a preset id or load a template YAML file."""
    if isinstance(source, str):
        preset = get_template_by_id(source)
        if preset is not None:
            return preset
    template = SlideTemplate.from_yaml(source)
    logger.info(f"Loaded template '{template.name}' from {source}")
    return template
