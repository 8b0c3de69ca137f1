"""Apply a per-speaker SlideTheme on top of a SlideTemplate."""

from typing import Optional

from src.pptx_engine.template_builder import derive_secondary_font_style
from src.schemas.analysis_schema import AnalysisResult, SlideTheme
from src.schemas.script_schema import SlideData
from src.schemas.slide_template import Background, ElementName, SlideTemplate

# Slots drawn in the theme's primary color; the remaining text slots use the accent
_PRIMARY_SLOTS = {ElementName.HEADING, ElementName.BODY, ElementName.META_SECONDARY}


def theme_for_slide(analysis: AnalysisResult, slide: SlideData) -> Optional[SlideTheme]:
    """Theme keyed by the slide's speaker name, else by its role."""
    return analysis.themes.get(slide.speaker.name) or analysis.themes.get(slide.speaker.role)


def apply_theme(template: SlideTemplate, theme: SlideTheme) -> SlideTemplate:
    """New template recolored with the theme's background, colors and font.

    Sizes, weights and geometry are kept. The speaker role style is derived
    again from the recolored speaker name style.
    """
    elements = []
    for element in template.elements:
        if not element.styles:
            elements.append(element)
            continue

        color = theme.primary_color if element.name in _PRIMARY_SLOTS else theme.accent_color
        primary = element.styles[0].model_copy(
            update={"font_color": color, "font_family": theme.font_family}
        )
        if element.name == ElementName.META_SECONDARY:
            styles = (primary, derive_secondary_font_style(primary))
        else:
            styles = (primary,) + tuple(
                s.model_copy(update={"font_family": theme.font_family}) for s in element.styles[1:]
            )
        elements.append(element.model_copy(update={"styles": styles}))

    return SlideTemplate.model_validate({
        **template.model_dump(),
        "background": Background(color=theme.background_color).model_dump(),
        "elements": [e.model_dump() for e in elements],
    })
