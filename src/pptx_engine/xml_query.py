"""Namespace-aware lookups over the XML parts of a presentation archive."""

import logging
import zipfile
from typing import Optional

from lxml import etree

logger = logging.getLogger(__name__)

NS = {
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
}

# Single XML parts larger than this are refused rather than parsed
MAX_ENTRY_BYTES = 20 * 1024 * 1024


def qn(tag: str) -> str:
    """Turn a prefixed tag such as ``a:solidFill`` into Clark notation."""
    prefix, _, local = tag.partition(":")
    return f"{{{NS[prefix]}}}{local}"


def local_name(el: etree._Element) -> str:
    """Tag name without its namespace."""
    return etree.QName(el).localname


def find_first(el: Optional[etree._Element], tag: str) -> Optional[etree._Element]:
    """First descendant (any depth) with the given prefixed tag, or None."""
    if el is None:
        return None
    return next(el.iter(qn(tag)), None)


def find_all(el: Optional[etree._Element], tag: str) -> list[etree._Element]:
    """All descendants with the given prefixed tag, in document order."""
    if el is None:
        return []
    return list(el.iter(qn(tag)))


def find_child(el: Optional[etree._Element], tag: str) -> Optional[etree._Element]:
    """Direct child with the given prefixed tag, or None."""
    if el is None:
        return None
    return el.find(qn(tag))


def _parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
        remove_blank_text=True,
    )


def parse_xml(data: bytes) -> etree._Element:
    """Parse an XML document without entity expansion or network access."""
    return etree.fromstring(data, parser=_parser())


def read_xml(zf: zipfile.ZipFile, entry: str) -> Optional[etree._Element]:
    """Parse one archive entry; None when the entry does not exist.

    Raises ValueError for an entry above ``MAX_ENTRY_BYTES`` and lets XML
    syntax errors propagate to the calling stage.
    """
    try:
        info = zf.getinfo(entry)
    except KeyError:
        return None
    if info.file_size > MAX_ENTRY_BYTES:
        raise ValueError(f"Archive entry too large: {entry} ({info.file_size} bytes)")
    return parse_xml(zf.read(entry))
