"""Rule-based per-speaker theming used when no analysis file is supplied.

Speakers get colors from a fixed palette in order of first appearance; roles
not already used as a key get their own entry. No decorative shapes are
suggested.
"""

import logging

from src.schemas.analysis_schema import AnalysisResult, SlideAnalysis, SlideTheme, SlideVisual
from src.schemas.script_schema import ParseResult

logger = logging.getLogger(__name__)

# (background, primary, accent)
PALETTES: tuple[tuple[str, str, str], ...] = (
    ("#EBF5FB", "#1A5276", "#2E86C1"),
    ("#EAFAF1", "#1E8449", "#27AE60"),
    ("#F5EEF8", "#6C3483", "#A569BD"),
    ("#FEF9E7", "#7D6608", "#F1C40F"),
    ("#FDEDEC", "#922B21", "#E74C3C"),
    ("#F4F6F7", "#2C3E50", "#7F8C8D"),
)

DEFAULT_SHAPE_COLOR = "#636E72"


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _palette_theme(index: int) -> SlideTheme:
    background, primary, accent = PALETTES[index % len(PALETTES)]
    return SlideTheme(background_color=background, primary_color=primary, accent_color=accent)


def fallback_analysis(parse_result: ParseResult) -> AnalysisResult:
    """Build an AnalysisResult from the parsed script alone."""
    slides = parse_result.slides
    themes: dict[str, SlideTheme] = {}

    for i, name in enumerate(_unique([s.speaker.name for s in slides])):
        themes[name] = _palette_theme(i)

    for i, role in enumerate(_unique([s.speaker.role for s in slides])):
        if role not in themes:
            themes[role] = _palette_theme(i)

    entries = []
    for slide in slides:
        theme = themes.get(slide.speaker.name) or themes.get(slide.speaker.role)
        entries.append(SlideAnalysis(
            line_number=slide.line_number,
            visual=SlideVisual(
                shape_type="none",
                shape_color=theme.accent_color if theme else DEFAULT_SHAPE_COLOR,
                position="background",
            ),
        ))

    logger.info(f"Fallback analysis: {len(themes)} themes for {len(entries)} slides")
    return AnalysisResult(themes=themes, slides=entries)
