"""Line classification helpers for generated Markdown documents.

Each function takes a single line and either returns the piece of it the
verifier cares about (a table name or a field name) or None.
"""

from md_verify.patterns import CELL_SEPARATOR, HEADER_MARKER, HEADER_STRIP_CHAR


def get_table_header(line: str) -> str | None:
    """Return the table name if *line* is a ``###`` heading, else None.

    Every ``#`` is stripped from the line and the remainder trimmed, so
    ``"### User"`` and ``"#### User"`` both name the table ``"User"``.  A bare
    ``"###"`` yields the empty string, which is still a heading.
    """
    if not line.startswith(HEADER_MARKER):
        return None
    return line.replace(HEADER_STRIP_CHAR, "").strip()


def get_field_name(line: str) -> str | None:
    """Return the raw text between the first two pipes of a table row, else None.

    Trailing empty cells are discarded before counting, so a line that only
    ends with a pipe (``"abc|"``) carries no field.  No whitespace is trimmed.
    """
    parts = line.split(CELL_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) > 1:
        return parts[1]
    return None
