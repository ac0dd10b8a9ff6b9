"""Verify that generated Markdown tables list every expected field.

A generated document renders each definition as a ``###`` heading followed
by a pipe-delimited table whose first column is the property name.  Given a
mapping of table name to expected field names, the document is scanned once
from top to bottom and any field that never appears under its heading is
reported.

Usage:
    python -m md_verify.verify build/docs/markdown/generated/definitions/User.md expected.json
"""

import argparse
import logging
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path

from md_verify import config
from md_verify.headers import get_field_name, get_table_header
from md_verify.patterns import MISSING_FIELDS_MESSAGE
from md_verify.schema import load_expectations

logger = logging.getLogger(__name__)


# ─── Errors ──────────────────────────────────────────────────────────────────


class VerificationError(AssertionError):
    """Base class for every failed check on generated documentation."""


class MissingFieldsError(VerificationError):
    """Raised when one or more tables are missing expected fields.

    ``missing`` maps each unsatisfied table name to the fields that were never
    found under it.
    """

    def __init__(self, doc: str | Path, missing: dict[str, set[str]]):
        self.doc = doc
        self.missing = missing
        super().__init__(MISSING_FIELDS_MESSAGE.format(doc=doc, missing=_format_missing(missing)))


def _format_missing(missing: Mapping[str, set[str]]) -> str:
    """Render the missing-field mapping with each field set sorted."""
    return str({table: sorted(fields) for table, fields in missing.items()})


# ─── Scan ────────────────────────────────────────────────────────────────────


def _mark_found(fields_left: set[str], field_name: str) -> bool:
    """Remove *field_name* from *fields_left*, falling back to its trimmed form."""
    if field_name in fields_left:
        fields_left.remove(field_name)
        return True
    stripped = field_name.strip()
    if stripped in fields_left:
        fields_left.remove(stripped)
        return True
    return False


def find_missing_fields(lines: Iterable[str], fields_by_table: Mapping[str, Iterable[str]]) -> dict[str, set[str]]:
    """Return the fields of *fields_by_table* that never appear under their table heading.

    Walks *lines* once.  A ``###`` heading switches the current table; any
    other line only sets it while no table has been seen yet.  While the
    current table is one we still care about, the second pipe-separated cell
    of each row is checked off.  A table is dropped from the result as soon
    as its last field is found, and the scan stops once nothing is left.

    *fields_by_table* is copied up front and never mutated.
    """
    fields_left_by_table = {table: set(fields) for table, fields in fields_by_table.items()}
    in_table: str | None = None

    for line in lines:
        # Every table satisfied, nothing else can change the outcome
        if not fields_left_by_table:
            logger.debug("All expected fields found, stopping early")
            break

        # Transition to a new table when a heading is encountered
        current_header = get_table_header(line)
        if in_table is None or current_header is not None:
            in_table = current_header

        if in_table is None or in_table not in fields_left_by_table:
            continue

        field_name = get_field_name(line)
        if field_name is None:
            continue
        fields_left = fields_left_by_table[in_table]
        if _mark_found(fields_left, field_name) and not fields_left:
            logger.debug("Table %s: all expected fields found", in_table)
            del fields_left_by_table[in_table]

    return fields_left_by_table


def _read_lines(doc: str | Path) -> list[str]:
    """Read the whole document, splitting on line ends only."""
    with open(doc, "r", encoding=config.ENCODING) as fopen:
        return [line.rstrip("\n") for line in fopen]


def verify_markdown_contains_fields_in_tables(doc: str | Path, fields_by_table: Mapping[str, Iterable[str]]) -> None:
    """Check that every table in *fields_by_table* lists all of its expected fields.

    *doc* is the path of the generated Markdown document.  Raises
    ``MissingFieldsError`` naming every table that still has unmatched fields
    after the scan.  Errors reading the document propagate unchanged.
    """
    lines = _read_lines(doc)
    logger.info("Verifying %d table(s) in %s (%d lines)", len(fields_by_table), doc, len(lines))

    missing = find_missing_fields(lines, fields_by_table)
    if missing:
        logger.warning("%s is missing fields in %d table(s)", doc, len(missing))
        raise MissingFieldsError(doc, missing)

    logger.info("All expected fields found in %s", doc)


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point; exits with status 1 when fields are missing."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    parser = argparse.ArgumentParser(description="Verify generated Markdown tables contain expected fields.")
    parser.add_argument("doc", type=Path, help="Generated Markdown document to inspect")
    parser.add_argument("expectations", type=Path, help='JSON file shaped {"tables": {"User": ["id", ...]}}')
    args = parser.parse_args(argv)

    expectations = load_expectations(args.expectations)
    try:
        verify_markdown_contains_fields_in_tables(args.doc, expectations.tables)
    except MissingFieldsError as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
