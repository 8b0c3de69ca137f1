"""Pydantic models for parsed dialogue scripts."""

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field


class ScriptType(IntEnum):
    """Script genre declared in the front matter (``-type: <n>``)."""

    GENERAL = 0
    DRAMA = 1
    LECTURE = 2
    NEWS = 3
    INTERVIEW = 4


class Speaker(BaseModel):
    name: str
    role: str


class ScriptFrontMatter(BaseModel):
    type: ScriptType = ScriptType.GENERAL
    topic: str = ""
    categories: list[str] = Field(default_factory=list)


class SlideData(BaseModel):
    """One dialogue line, rendered as one content slide."""

    speaker: Speaker
    context: str = Field(description="The spoken dialogue")
    metadata: dict[str, str] = Field(default_factory=dict)
    visual_hint: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None
    detail: Optional[str] = None
    line_number: int


class ParseError(BaseModel):
    line: int
    content: str
    message: str


class ParseMetadata(BaseModel):
    speakers: list[Speaker] = Field(default_factory=list)
    total_lines: int = 0
    valid_lines: int = 0


class ParseResult(BaseModel):
    front_matter: ScriptFrontMatter = Field(default_factory=ScriptFrontMatter)
    slides: list[SlideData] = Field(default_factory=list)
    is_valid: bool = False
    errors: list[ParseError] = Field(default_factory=list)
    metadata: ParseMetadata = Field(default_factory=ParseMetadata)
