"""Pydantic models for slide templates.

A SlideTemplate describes how every content slide of a generated deck is
styled: one background color plus six fixed elements (meta-primary,
meta-secondary, heading, body, image, caption), each with a position, size,
stacking order and zero, one or two font styles.

Templates are immutable. Editing a template (changing a color, moving an
element) produces a new SlideTemplate value via ``with_element`` or
``model_copy``; the shared presets are never patched in place.
"""

import math
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.pptx_engine.color_space import normalize_hex

DEFAULT_FONT = "Noto Sans"
DEFAULT_COLOR = "#434343"


class ElementName(str, Enum):
    """The six semantic slots every template populates."""

    META_PRIMARY = "meta-primary"
    META_SECONDARY = "meta-secondary"
    HEADING = "heading"
    BODY = "body"
    IMAGE = "image"
    CAPTION = "caption"


# Number of font styles each slot carries: the speaker slot renders two runs
# (name, role), the image slot none.
STYLE_COUNTS: dict[ElementName, int] = {
    ElementName.META_PRIMARY: 1,
    ElementName.META_SECONDARY: 2,
    ElementName.HEADING: 1,
    ElementName.BODY: 1,
    ElementName.IMAGE: 0,
    ElementName.CAPTION: 1,
}


# ---------------------------------------------------------------------------
# Font style
# ---------------------------------------------------------------------------

class ElementFontStyle(BaseModel):
    """Fully resolved text style of one run.

    Every field has a default so a style can always be rendered.
    """

    model_config = ConfigDict(frozen=True)

    font_family: str = DEFAULT_FONT
    font_size: float = Field(default=12, gt=0, description="Font size in points")
    font_color: str = Field(default=DEFAULT_COLOR, description="Hex color, #RRGGBB")
    font_weight: int = Field(default=400, description="Numeric weight: 400, 500 or 700")

    @field_validator("font_color", mode="before")
    @classmethod
    def _normalize_color(cls, value):
        normalized = normalize_hex(value) if isinstance(value, str) else None
        if normalized is None:
            raise ValueError(f"Invalid hex color: {value!r}")
        return normalized

    @field_validator("font_size")
    @classmethod
    def _finite_size(cls, value: float) -> float:
        if math.isnan(value) or math.isinf(value):
            raise ValueError("font_size must be a finite number")
        return value

    @property
    def is_bold(self) -> bool:
        return self.font_weight >= 700


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = Field(description="Left edge in inches")
    y: float = Field(description="Top edge in inches")


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    w: float = Field(description="Width in inches")
    h: float = Field(description="Height in inches")


class ElementLayout(BaseModel):
    """Placement of one element on the slide."""

    model_config = ConfigDict(frozen=True)

    position: Position
    size: Size
    z_index: int = Field(default=0, description="Stacking order; higher paints later")


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------

class TemplateElement(BaseModel):
    """One semantic slot: its layout and its styles (index 0 = primary)."""

    model_config = ConfigDict(frozen=True)

    name: ElementName
    layout: ElementLayout
    styles: tuple[ElementFontStyle, ...] = ()

    @property
    def primary_style(self) -> Optional[ElementFontStyle]:
        return self.styles[0] if self.styles else None

    @property
    def secondary_style(self) -> Optional[ElementFontStyle]:
        return self.styles[1] if len(self.styles) > 1 else None


class Background(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str = "#FFFFFF"

    @field_validator("color", mode="before")
    @classmethod
    def _normalize_color(cls, value):
        normalized = normalize_hex(value) if isinstance(value, str) else None
        if normalized is None:
            raise ValueError(f"Invalid hex color: {value!r}")
        return normalized


class SlideTemplate(BaseModel):
    """Complete, immutable slide template consumed by the deck builder."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    thumbnail: str = ""
    background: Background = Field(default_factory=Background)
    elements: tuple[TemplateElement, ...]

    @model_validator(mode="after")
    def _check_slots(self) -> "SlideTemplate":
        names = [e.name for e in self.elements]
        for slot in ElementName:
            count = names.count(slot)
            if count != 1:
                raise ValueError(
                    f"Template must contain exactly one '{slot.value}' element, found {count}"
                )
        for element in self.elements:
            expected = STYLE_COUNTS[element.name]
            if len(element.styles) != expected:
                raise ValueError(
                    f"Element '{element.name.value}' must have {expected} style(s), "
                    f"got {len(element.styles)}"
                )
        return self

    def find_element(self, name: ElementName | str) -> Optional[TemplateElement]:
        """Find the element for a slot name."""
        name = ElementName(name)
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def with_element(
        self,
        name: ElementName | str,
        layout: ElementLayout | None = None,
        styles: tuple[ElementFontStyle, ...] | list[ElementFontStyle] | None = None,
    ) -> "SlideTemplate":
        """Return a new template with one element's layout and/or styles replaced."""
        name = ElementName(name)
        elements = []
        for element in self.elements:
            if element.name == name:
                update = {}
                if layout is not None:
                    update["layout"] = layout
                if styles is not None:
                    update["styles"] = tuple(styles)
                element = element.model_copy(update=update)
            elements.append(element)
        # Re-validate so the slot invariants still hold after the edit
        return SlideTemplate.model_validate(
            {**self.model_dump(), "elements": [e.model_dump() for e in elements]}
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SlideTemplate":
        """Load a template from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    def to_yaml(self, path: str | Path) -> None:
        """Save the template to a YAML file."""
        path = Path(path)
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
