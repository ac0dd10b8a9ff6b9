"""Pydantic model for table-field expectation files.

An expectation file lists, per generated table, the field names that must
appear in its first column:

    {"tables": {"User": ["id", "username", "email"]}}
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, model_validator

logger = logging.getLogger(__name__)


class TableExpectations(BaseModel):
    """Expected field names keyed by table heading.

    The mapping itself may be empty (nothing to verify), but every listed
    table needs a non-empty name and at least one field.
    """

    tables: dict[str, set[str]] = {}

    @model_validator(mode="after")
    def validate_tables(self) -> "TableExpectations":
        """Reject blank table names and tables with no expected fields."""
        for name, fields in self.tables.items():
            if not name.strip():
                raise ValueError("Table names must not be blank")
            if not fields:
                raise ValueError(f"Table {name!r} has no expected fields")
        return self


def load_expectations(path: Path) -> TableExpectations:
    """Read and validate a JSON expectation file."""
    with open(path, "r", encoding="utf-8") as fopen:
        data = json.load(fopen)
    expectations = TableExpectations.model_validate(data)
    logger.info("Loaded expectations for %d table(s) from %s", len(expectations.tables), path)
    return expectations
