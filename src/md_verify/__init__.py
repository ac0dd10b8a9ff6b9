"""Structural checks for Markdown documentation generated from Swagger/OpenAPI definitions.

Submodules:
  config    -- project root, .env loading, encoding and log-level settings
  patterns  -- literal markers, message templates, standard output file names
  headers   -- heading and table-row field extraction for a single line
  verify    -- table-field verification over a whole document
  output    -- generated-folder cleanup, file listing and text-contains checks
  schema    -- TableExpectations Pydantic model and JSON loader
"""
