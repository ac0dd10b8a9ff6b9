"""Literal markers and message templates for generated Markdown documents.

The generator renders every definition as a ``###`` heading followed by a
pipe-delimited table whose first column holds the property name.  Used by
headers.py, verify.py and output.py.
"""

# ─── Document Markers ────────────────────────────────────────────────────────

# Prefix that opens a new table section, e.g. "### User"
HEADER_MARKER = "###"

# Removed from a heading line to obtain the table name
HEADER_STRIP_CHAR = "#"

# Markdown table cell delimiter
CELL_SEPARATOR = "|"


# ─── Failure Messages ────────────────────────────────────────────────────────

MISSING_FIELDS_MESSAGE = "Markdown file '{doc}' did not contain expected fields (by table): {missing}"

GENERATED_COUNT_MESSAGE = "Output folder '{folder}' has {actual} entries, expected {expected}: {names}"

GENERATED_MISSING_MESSAGE = "Output folder '{folder}' is missing expected entries: {missing}"

MISSING_TEXT_MESSAGE = "Markdown file '{doc}' does not contain {text!r}"


# ─── Generator Output Layout ─────────────────────────────────────────────────

# Documents produced for every conversion
GENERATED_FILES = ("definitions.md", "overview.md", "paths.md", "security.md")

# Sub-folder holding one document per definition when definitions are separated
DEFINITIONS_DIR = "definitions"
