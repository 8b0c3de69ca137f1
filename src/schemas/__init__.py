from .slide_template import (
    DEFAULT_COLOR, DEFAULT_FONT,
    ElementName, ElementFontStyle, Position, Size, ElementLayout,
    TemplateElement, Background, SlideTemplate,
)
from .extraction import ThemeData, PlaceholderStyle, ExtractedStyles, TemplateParseResult
from .script_schema import (
    ScriptType, Speaker, ScriptFrontMatter, SlideData,
    ParseError, ParseMetadata, ParseResult,
)
from .analysis_schema import (
    SlideTheme, GradientSpec, SlideVisual, SlideSupplementary,
    SlideAnalysis, AnalysisResult,
)

__all__ = [
    "DEFAULT_COLOR",
    "DEFAULT_FONT",
    "ElementName",
    "ElementFontStyle",
    "Position",
    "Size",
    "ElementLayout",
    "TemplateElement",
    "Background",
    "SlideTemplate",
    "ThemeData",
    "PlaceholderStyle",
    "ExtractedStyles",
    "TemplateParseResult",
    "ScriptType",
    "Speaker",
    "ScriptFrontMatter",
    "SlideData",
    "ParseError",
    "ParseMetadata",
    "ParseResult",
    "SlideTheme",
    "GradientSpec",
    "SlideVisual",
    "SlideSupplementary",
    "SlideAnalysis",
    "AnalysisResult",
]
