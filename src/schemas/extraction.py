"""Pydantic models for the intermediate results of template extraction.

These values live only for the duration of one extraction call: the theme
lookup table, per-document placeholder styles, and the final result bundle
handed back to the caller.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .slide_template import DEFAULT_FONT, SlideTemplate


class ThemeData(BaseModel):
    """Resolved theme: scheme-slot colors plus heading/body font families."""

    model_config = ConfigDict(frozen=True)

    color_scheme: dict[str, str] = Field(
        default_factory=dict,
        description="Scheme slot name (dk1, lt1, accent1, ...) -> hex color; only resolvable slots",
    )
    major_font: str = DEFAULT_FONT
    minor_font: str = DEFAULT_FONT


class PlaceholderStyle(BaseModel):
    """Text style of one placeholder shape within one slide document.

    Every style field is optional; ``None`` means "not specified at this level"
    and is never allowed to overwrite a value from a lower level.
    """

    type: str = "body"
    font_family: Optional[str] = None
    font_size: Optional[float] = Field(default=None, description="Points")
    font_color: Optional[str] = None
    bold: Optional[bool] = None

    @field_validator("font_size", mode="before")
    @classmethod
    def _coerce_size(cls, value):
        # Malformed or non-positive sizes are treated as absent
        if value is None or isinstance(value, bool):
            return None
        try:
            size = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(size) or math.isinf(size) or size <= 0:
            return None
        return size


class ExtractedStyles(BaseModel):
    """Background and placeholder styles recovered from one or more documents."""

    background: Optional[str] = None
    placeholders: list[PlaceholderStyle] = Field(default_factory=list)


class TemplateParseResult(BaseModel):
    """Outcome of extracting a template from a presentation file."""

    template: SlideTemplate
    warnings: list[str] = Field(default_factory=list)
    is_partial: bool = False
