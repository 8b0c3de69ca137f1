"""Pydantic models for per-speaker themes and per-slide visual suggestions.

An AnalysisResult maps speaker names (and roles) to a SlideTheme and lists
one SlideAnalysis per dialogue line. It is produced either by the rule-based
fallback in ``src.analysis.fallback`` or loaded from a JSON file written by
an external analysis step.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Mood = Literal["professional", "casual", "dramatic", "warm", "serious", "playful"]


class SlideTheme(BaseModel):
    background_color: str
    primary_color: str = Field(description="Text / heading color")
    accent_color: str = Field(description="Decorative elements")
    font_family: str = "Arial"
    mood: Mood = "professional"


class GradientSpec(BaseModel):
    start: str = Field(alias="from")
    end: str = Field(alias="to")

    model_config = ConfigDict(populate_by_name=True)


class SlideVisual(BaseModel):
    shape_type: str = "none"
    shape_color: str = "#636E72"
    position: str = "top-right"
    emoji: Optional[str] = None
    background_gradient: Optional[GradientSpec] = None


class SlideSupplementary(BaseModel):
    text: str
    keywords: list[str] = Field(default_factory=list)


class SlideAnalysis(BaseModel):
    line_number: int
    visual: SlideVisual
    supplementary: Optional[SlideSupplementary] = None


class AnalysisResult(BaseModel):
    themes: dict[str, SlideTheme] = Field(default_factory=dict)
    slides: list[SlideAnalysis] = Field(default_factory=list)

    def for_line(self, line_number: int) -> Optional[SlideAnalysis]:
        """Find the analysis entry for a script line."""
        for entry in self.slides:
            if entry.line_number == line_number:
                return entry
        return None

    def save(self, path: str | Path) -> None:
        """Serialize the analysis to a JSON file."""
        Path(path).write_text(self.model_dump_json(indent=2, by_alias=True), encoding="utf-8")

    @classmethod
    def load(cls, path: str | Path) -> "AnalysisResult":
        """Load an analysis from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Analysis file not found: {path}")
        return cls.model_validate_json(path.read_text(encoding="utf-8"))
