"""Reader for plain-text script files."""

from pathlib import Path


def read_script_text(path: Path) -> str:
    """Read a script file and return its content with normalized line endings.

    A leading byte-order mark is dropped and trailing whitespace is trimmed
    from every line; blank lines are kept so line numbers stay stable.
    """
    text = path.read_text(encoding="utf-8-sig")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.rstrip() for line in text.split("\n"))
