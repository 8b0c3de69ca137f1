"""Extract a SlideTemplate from a .pptx presentation file.

Reads the theme, the first slide master and the slide layouts out of the
archive and turns their text styling into a six-slot template. Only an
unreadable archive is fatal; every other stage degrades to defaults and
records a warning so the caller still receives a usable template.

Each stage returns ``(result, warning)`` where ``warning`` is None when the
stage succeeded cleanly; ``extract_template`` folds the warnings together.
"""

import io
import logging
import zipfile
from pathlib import Path
from typing import Optional

from src.pptx_engine.style_extractor import (
    extract_master_text_styles,
    extract_styles,
    text_style_section,
)
from src.pptx_engine.template_builder import build_template, merge_styles, overlay_defined
from src.pptx_engine.theme_resolver import empty_theme, parse_theme
from src.pptx_engine.xml_query import read_xml
from src.schemas.extraction import ExtractedStyles, TemplateParseResult, ThemeData

logger = logging.getLogger(__name__)

THEME_ENTRY = "ppt/theme/theme1.xml"
MASTER_ENTRY = "ppt/slideMasters/slideMaster1.xml"
LAYOUT_ENTRY = "ppt/slideLayouts/slideLayout{index}.xml"
MAX_LAYOUTS = 11

SUPPORTED_SUFFIXES = {".pptx", ".potx", ".pptm"}


class InvalidContainerError(ValueError):
    """The input bytes are not a readable presentation archive."""


# -----------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------

def extract_template_from_file(path: str | Path) -> TemplateParseResult:
    """Extract a template from a presentation file on disk."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Expected a .pptx file, got: {path.suffix}")
    return extract_template(path.read_bytes(), path.name)


def extract_template(data: bytes, file_name: str) -> TemplateParseResult:
    """Extract a template from the raw bytes of a presentation file.

    Raises:
        InvalidContainerError: if ``data`` is not a zip archive.
    """
    zf = open_container(data)
    with zf:
        warnings: list[str] = []

        theme, warning = theme_stage(zf)
        _collect(warnings, warning)

        master, warning = master_stage(zf, theme)
        _collect(warnings, warning)

        layouts, warning = layouts_stage(zf, theme)
        _collect(warnings, warning)

    merged = merge_styles(master, layouts)
    template = build_template(file_name, merged, theme)

    if warnings:
        logger.info(f"Extracted '{template.name}' with {len(warnings)} warning(s)")
    else:
        logger.info(f"Extracted '{template.name}'")

    return TemplateParseResult(template=template, warnings=warnings, is_partial=bool(warnings))


def _collect(warnings: list[str], warning: Optional[str]) -> None:
    if warning:
        logger.warning(warning)
        warnings.append(warning)


# -----------------------------------------------------------------------
# Stages
# -----------------------------------------------------------------------

def open_container(data: bytes) -> zipfile.ZipFile:
    """Open the archive; the only failure that aborts extraction."""
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, OSError, ValueError) as e:
        raise InvalidContainerError(f"Not a valid presentation archive: {e}") from e


def theme_stage(zf: zipfile.ZipFile) -> tuple[ThemeData, Optional[str]]:
    """Theme colors and fonts; defaults when missing or unreadable."""
    try:
        theme = parse_theme(read_xml(zf, THEME_ENTRY))
    except Exception as e:
        logger.debug(f"Theme parse error: {e}")
        return empty_theme(), "Failed to parse theme, using defaults"

    if not theme.color_scheme:
        return theme, "Theme color scheme not found, using defaults"
    return theme, None


def master_stage(zf: zipfile.ZipFile, theme: ThemeData) -> tuple[ExtractedStyles, Optional[str]]:
    """Background and placeholder styles of the first slide master.

    Placeholder fields the master shapes leave unset are filled from the
    master's text styles (title, body and other).
    """
    try:
        doc = read_xml(zf, MASTER_ENTRY)
        if doc is None:
            logger.debug(f"No slide master at {MASTER_ENTRY}")
            return ExtractedStyles(), None

        styles = extract_styles(doc, theme)
        text_styles = extract_master_text_styles(doc, theme)
        placeholders = []
        for ph in styles.placeholders:
            inherited = text_styles.get(text_style_section(ph.type))
            if inherited is not None:
                ph = overlay_defined(inherited.model_copy(update={"type": ph.type}), ph)
            placeholders.append(ph)
    except Exception as e:
        logger.debug(f"Slide master parse error: {e}")
        return ExtractedStyles(), "Failed to parse slide master"

    return ExtractedStyles(background=styles.background, placeholders=placeholders), None


def layouts_stage(zf: zipfile.ZipFile, theme: ThemeData) -> tuple[ExtractedStyles, Optional[str]]:
    """Placeholder styles of every present slide layout, in index order.

    Absent layout entries are expected and skipped, and so is a layout that
    cannot be parsed; the other layouts still contribute. The first layout
    that declares a background supplies it.
    """
    try:
        present = set(zf.namelist())
    except Exception as e:
        logger.debug(f"Slide layout enumeration error: {e}")
        return ExtractedStyles(), "Failed to parse slide layouts"

    background: Optional[str] = None
    placeholders = []
    for index in range(1, MAX_LAYOUTS + 1):
        entry = LAYOUT_ENTRY.format(index=index)
        if entry not in present:
            continue
        try:
            styles = extract_styles(read_xml(zf, entry), theme)
        except Exception as e:
            logger.debug(f"Skipping unreadable layout {entry}: {e}")
            continue
        if background is None:
            background = styles.background
        placeholders.extend(styles.placeholders)

    return ExtractedStyles(background=background, placeholders=placeholders), None
