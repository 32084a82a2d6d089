"""Pydantic Schemas - the Airtable table-definition payload."""
