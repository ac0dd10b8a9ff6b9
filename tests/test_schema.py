"""Unit tests for the TableExpectations model and its JSON loader."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

import pytest
from pydantic import ValidationError

from md_verify.schema import TableExpectations, load_expectations


class TestTableExpectations:

    def test_lists_become_sets(self):
        model = TableExpectations(tables={"User": ["id", "username", "id"]})
        assert model.tables == {"User": {"id", "username"}}

    def test_empty_mapping_allowed(self):
        assert TableExpectations().tables == {}

    def test_empty_field_set_rejected(self):
        with pytest.raises(ValidationError, match="has no expected fields"):
            TableExpectations(tables={"User": []})

    def test_blank_table_name_rejected(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            TableExpectations(tables={"  ": ["id"]})


class TestLoadExpectations:

    def test_fixture_file(self, fixtures_dir):
        model = load_expectations(fixtures_dir / "user_expectations.json")
        assert set(model.tables) == {"User"}
        assert len(model.tables["User"]) == 8
        assert "userStatus" in model.tables["User"]

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"tables": {"User": "id"}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_expectations(path)

    def test_drives_verifier(self, fixtures_dir):
        from md_verify.verify import verify_markdown_contains_fields_in_tables  # pylint: disable=import-outside-toplevel

        model = load_expectations(fixtures_dir / "user_expectations.json")
        verify_markdown_contains_fields_in_tables(fixtures_dir / "definitions" / "User.md", model.tables)
