"""Render a parsed script into a .pptx deck using a SlideTemplate.

The deck has one cover slide followed by one content slide per dialogue
line. Every content slide draws the template's six elements in ascending
z-order:

- meta-primary: the line's metadata as ``key · value`` pairs
- meta-secondary: speaker name and role as two differently styled runs
- heading: the line's summary
- body: the dialogue itself
- image: the line's picture, fitted into the image box
- caption: the line's detail text

Elements with nothing to show are skipped. When an AnalysisResult is given,
each slide is recolored with its speaker's theme and may get a decorative
shape and a gradient background.
"""

import io
import logging
from pathlib import Path
from typing import Optional

from pptx import Presentation

from src.analysis.theme_engine import apply_theme, theme_for_slide
from src.analysis.visual_mapper import background_config, visual_to_shape_config
from src.pptx_engine.image_operations import add_image_fitted
from src.pptx_engine.shape_operations import add_shape
from src.pptx_engine.slide_operations import (
    add_blank_slide,
    create_presentation,
    set_background_color,
    set_background_gradient,
)
from src.pptx_engine.text_operations import add_multi_format_textbox, add_textbox
from src.schemas.analysis_schema import AnalysisResult
from src.schemas.script_schema import ParseResult, SlideData
from src.schemas.slide_template import ElementFontStyle, ElementName, SlideTemplate, TemplateElement

logger = logging.getLogger(__name__)

# Cover slide text boxes (x, y, w, h) in inches
_COVER_TOPIC = (0.8, 1.8, 11.7, 1.2)
_COVER_CATEGORIES = (0.8, 3.2, 11.7, 0.5)
_COVER_SPEAKERS = (0.8, 4.2, 11.7, 0.6)
_COVER_COUNT = (0.8, 5.2, 11.7, 0.4)

COVER_TOPIC_SCALE = 2.5
BODY_LINE_SPACING = 28


def _run(text: str, style: ElementFontStyle, **extra) -> dict:
    return {
        "text": text,
        "font_name": style.font_family,
        "font_size": style.font_size,
        "font_color": style.font_color,
        "bold": style.is_bold,
        **extra,
    }


class DeckBuilder:
    """Build a presentation from a parsed script and a slide template.

    Args:
        asset_dir: Directory that relative image paths are resolved against.
    """

    def __init__(self, asset_dir: str | Path | None = None):
        self.asset_dir = Path(asset_dir) if asset_dir else None

    def build(
        self,
        parse_result: ParseResult,
        template: SlideTemplate,
        output_path: str | Path,
        analysis: Optional[AnalysisResult] = None,
    ) -> Path:
        """Build the deck and save it to ``output_path``."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        prs = self.build_presentation(parse_result, template, analysis)
        prs.save(str(output_path))
        logger.info(f"Saved: {output_path} ({len(prs.slides)} slides)")
        return output_path

    def to_bytes(
        self,
        parse_result: ParseResult,
        template: SlideTemplate,
        analysis: Optional[AnalysisResult] = None,
    ) -> bytes:
        """Build the deck and return the .pptx file content."""
        buffer = io.BytesIO()
        self.build_presentation(parse_result, template, analysis).save(buffer)
        return buffer.getvalue()

    def build_presentation(
        self,
        parse_result: ParseResult,
        template: SlideTemplate,
        analysis: Optional[AnalysisResult] = None,
    ) -> Presentation:
        """Create the in-memory presentation: cover slide plus one slide per line."""
        prs = create_presentation()
        prs.core_properties.author = "Script-to-Slides"
        prs.core_properties.subject = parse_result.front_matter.topic or "Auto-generated presentation"

        self._add_cover_slide(prs, parse_result, template)
        for data in parse_result.slides:
            self._add_content_slide(prs, data, template, analysis)

        logger.info(
            f"Built deck with template '{template.name}': "
            f"1 cover + {len(parse_result.slides)} content slides"
        )
        return prs

    # ------------------------------------------------------------------
    # Cover slide
    # ------------------------------------------------------------------

    def _add_cover_slide(self, prs: Presentation, parse_result: ParseResult, template: SlideTemplate) -> None:
        slide = add_blank_slide(prs)
        set_background_color(slide, template.background.color)
        front = parse_result.front_matter

        heading = template.find_element(ElementName.HEADING).primary_style
        add_textbox(
            slide, front.topic or "Presentation", *_COVER_TOPIC,
            font_name=heading.font_family,
            font_size=heading.font_size * COVER_TOPIC_SCALE,
            font_color=heading.font_color,
            bold=True,
            alignment="center",
        )

        if front.categories:
            meta = template.find_element(ElementName.META_PRIMARY).primary_style
            add_textbox(
                slide, " · ".join(front.categories), *_COVER_CATEGORIES,
                font_name=meta.font_family,
                font_size=meta.font_size,
                font_color=meta.font_color,
                alignment="center",
            )

        speakers = ", ".join(f"{s.name} [{s.role}]" for s in parse_result.metadata.speakers)
        body = template.find_element(ElementName.BODY).primary_style
        add_textbox(
            slide, speakers, *_COVER_SPEAKERS,
            font_name=body.font_family,
            font_size=body.font_size,
            font_color=body.font_color,
            alignment="center",
        )

        caption = template.find_element(ElementName.CAPTION).primary_style
        add_textbox(
            slide, f"{len(parse_result.slides)} slides", *_COVER_COUNT,
            font_name=caption.font_family,
            font_size=caption.font_size,
            font_color=caption.font_color,
            italic=True,
            alignment="center",
        )

    # ------------------------------------------------------------------
    # Content slides
    # ------------------------------------------------------------------

    def _add_content_slide(
        self,
        prs: Presentation,
        data: SlideData,
        template: SlideTemplate,
        analysis: Optional[AnalysisResult],
    ) -> None:
        slide = add_blank_slide(prs)
        entry = analysis.for_line(data.line_number) if analysis else None
        theme = theme_for_slide(analysis, data) if analysis else None
        if theme is not None:
            template = apply_theme(template, theme)

        background = template.background.color
        if entry is not None:
            config = background_config(entry.visual, background)
            if config.gradient_to:
                set_background_gradient(slide, config.color, config.gradient_to, config.angle)
            else:
                set_background_color(slide, config.color)
            shape = visual_to_shape_config(entry.visual)
            if shape is not None:
                add_shape(slide, shape.shape, shape.x, shape.y, shape.w, shape.h, shape.color, shape.opacity)
        else:
            set_background_color(slide, background)

        for element in sorted(template.elements, key=lambda e: e.layout.z_index):
            self._render_element(slide, element, data)

        # Visual hint and supplementary text go to the speaker notes
        notes = [data.visual_hint] if data.visual_hint else []
        if entry is not None and entry.supplementary is not None:
            notes.append(entry.supplementary.text)
        if notes:
            self._add_speaker_notes(slide, "\n".join(notes))

    def _render_element(self, slide, element: TemplateElement, data: SlideData) -> None:
        box = element.layout
        x, y, w, h = box.position.x, box.position.y, box.size.w, box.size.h
        style = element.primary_style

        if element.name == ElementName.META_PRIMARY:
            if data.metadata:
                text = ", ".join(f"{k} · {v}" for k, v in data.metadata.items())
                add_multi_format_textbox(slide, [_run(text, style)], x, y, w, h)

        elif element.name == ElementName.META_SECONDARY:
            secondary = element.secondary_style or style
            runs = [_run(data.speaker.name, style), _run(f" {data.speaker.role}", secondary)]
            add_multi_format_textbox(slide, runs, x, y, w, h)

        elif element.name == ElementName.HEADING:
            if data.summary:
                add_multi_format_textbox(slide, [_run(data.summary, style)], x, y, w, h)

        elif element.name == ElementName.BODY:
            add_multi_format_textbox(
                slide, [_run(data.context, style)], x, y, w, h,
                vertical_anchor="top",
                line_spacing=BODY_LINE_SPACING,
            )

        elif element.name == ElementName.IMAGE:
            if data.image:
                add_image_fitted(slide, self._resolve_asset(data.image), x, y, w, h)

        elif element.name == ElementName.CAPTION:
            if data.detail:
                add_multi_format_textbox(slide, [_run(data.detail, style)], x, y, w, h)

    def _resolve_asset(self, image: str) -> Path:
        path = Path(image)
        if not path.is_absolute() and self.asset_dir is not None:
            path = self.asset_dir / path
        return path

    @staticmethod
    def _add_speaker_notes(slide, notes: str) -> None:
        """Add speaker notes to a slide."""
        try:
            slide.notes_slide.notes_text_frame.text = notes
        except Exception as e:
            logger.debug(f"Could not add speaker notes: {e}")
