from .script_parser import (
    SUPPORTED_EXTENSIONS,
    is_supported_extension,
    parse_line,
    parse_script,
    parse_script_file,
)
from .text_parser import read_script_text

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "is_supported_extension",
    "parse_line",
    "parse_script",
    "parse_script_file",
    "read_script_text",
]
