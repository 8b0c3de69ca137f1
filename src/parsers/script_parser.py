"""Parser for dialogue scripts.

A script is an optional front-matter block, a ``---`` separator, and a body
of dialogue lines::

    -type: 4
    -topic: The future of AI
    -categories: AI, Trends, Panel

    ---

    --chapter: Opening
    host[moderator]: (wave to camera) Welcome, everyone.
    kim[panelist]: Glad to be here.

Body lines starting with ``--`` are metadata for the next dialogue line.
``--summary``, ``--detail`` and ``--image`` feed the slide's heading,
caption and picture; any other key is shown in the slide's metadata row.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from src.schemas.script_schema import (
    ParseError,
    ParseMetadata,
    ParseResult,
    ScriptFrontMatter,
    ScriptType,
    SlideData,
    Speaker,
)

logger = logging.getLogger(__name__)

DIALOGUE_RE = re.compile(r"^(\S+)\[([^\]]+)\]:\s*(?:\(([^)]*)\)\s*)?(.+)$")
FRONT_MATTER_RE = re.compile(r"^-([A-Za-z_]+):\s*(.*)$")
METADATA_RE = re.compile(r"^--([^:\s][^:]*):\s*(.*)$")

SEPARATOR = "---"
SUPPORTED_EXTENSIONS = {".txt", ".md", ".text", ".script"}

# Share of counted body lines that must parse for the script to be valid
VALIDATION_THRESHOLD = 0.6

# Metadata keys that fill dedicated slide fields instead of the metadata row
_SLIDE_FIELDS = {"summary", "detail", "image"}

_MISMATCH_MESSAGE = 'Format mismatch: expected "name[role]: (visual hint) dialogue"'


def is_supported_extension(file_name: str | Path) -> bool:
    """Whether the file name has a script extension."""
    return Path(file_name).suffix.lower() in SUPPORTED_EXTENSIONS


# -----------------------------------------------------------------------
# Front matter
# -----------------------------------------------------------------------

def _split_front_matter(lines: list[str]) -> tuple[list[str], int]:
    """Return the front-matter lines and the index where the body starts.

    The block before the first ``---`` counts as front matter only if it
    holds nothing but ``-key:`` lines, comments and blanks.
    """
    for i, raw in enumerate(lines):
        if raw.strip() != SEPARATOR:
            continue
        head = [line.strip() for line in lines[:i]]
        if all(not line or line.startswith("#") or FRONT_MATTER_RE.match(line) for line in head):
            return head, i + 1
        break
    return [], 0


def _script_type(raw: str) -> ScriptType:
    try:
        return ScriptType(int(raw))
    except ValueError:
        logger.warning(f"Unknown script type {raw!r}, using General")
        return ScriptType.GENERAL


def parse_front_matter(lines: list[str]) -> ScriptFrontMatter:
    """Read ``-type``, ``-topic`` and ``-categories`` entries."""
    values: dict = {}
    for line in lines:
        match = FRONT_MATTER_RE.match(line)
        if not match:
            continue
        key, value = match.group(1).lower(), match.group(2).strip()
        if key == "type":
            values["type"] = _script_type(value)
        elif key == "topic":
            values["topic"] = value
        elif key == "categories":
            values["categories"] = [c.strip() for c in value.split(",") if c.strip()]
        else:
            logger.debug(f"Ignoring front matter key: {key}")
    return ScriptFrontMatter(**values)


# -----------------------------------------------------------------------
# Body
# -----------------------------------------------------------------------

def parse_line(raw: str, line_number: int, metadata: Optional[dict[str, str]] = None) -> Optional[SlideData]:
    """Parse one dialogue line; None if it does not match the format."""
    match = DIALOGUE_RE.match(raw.strip())
    if not match:
        return None

    name, role, hint, dialogue = match.groups()
    fields = {}
    extra = {}
    for key, value in (metadata or {}).items():
        if key in _SLIDE_FIELDS:
            fields[key] = value
        else:
            extra[key] = value

    return SlideData(
        speaker=Speaker(name=name.strip(), role=role.strip()),
        context=dialogue.strip(),
        metadata=extra,
        visual_hint=(hint or "").strip() or None,
        line_number=line_number,
        **fields,
    )


def parse_script(content: str) -> ParseResult:
    """Parse script text into front matter, slides and per-line errors."""
    lines = content.replace("\r\n", "\n").split("\n")
    head, body_start = _split_front_matter(lines)
    front_matter = parse_front_matter(head)

    slides: list[SlideData] = []
    errors: list[ParseError] = []
    pending: dict[str, str] = {}
    counted = 0

    for index in range(body_start, len(lines)):
        raw = lines[index].strip()
        line_number = index + 1
        if not raw or raw.startswith("#") or raw == SEPARATOR:
            continue

        meta = METADATA_RE.match(raw)
        if meta:
            pending[meta.group(1).strip()] = meta.group(2).strip()
            continue

        counted += 1
        slide = parse_line(raw, line_number, pending)
        if slide is None:
            errors.append(ParseError(line=line_number, content=raw, message=_MISMATCH_MESSAGE))
            continue
        slides.append(slide)
        pending = {}

    if pending:
        logger.debug(f"Dropping trailing metadata with no dialogue line: {sorted(pending)}")

    speakers: list[Speaker] = []
    for slide in slides:
        if slide.speaker not in speakers:
            speakers.append(slide.speaker)

    ratio = len(slides) / counted if counted else 0.0
    return ParseResult(
        front_matter=front_matter,
        slides=slides,
        is_valid=bool(slides) and ratio >= VALIDATION_THRESHOLD,
        errors=errors,
        metadata=ParseMetadata(speakers=speakers, total_lines=counted, valid_lines=len(slides)),
    )


def parse_script_file(path: str | Path) -> ParseResult:
    """Read and parse a script file."""
    from .text_parser import read_script_text

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not is_supported_extension(path):
        supported = ", ".join(sorted(SUPPORTED_EXTENSIONS))
        raise ValueError(f"Unsupported file format '{path.suffix}'. Supported: {supported}")

    result = parse_script(read_script_text(path))
    logger.info(
        f"Parsed {path.name}: {len(result.slides)} slides, "
        f"{len(result.errors)} errors, valid={result.is_valid}"
    )
    return result
