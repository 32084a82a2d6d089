"""Table Schemas - Pydantic models for the Airtable table-creation payload.

Invariants:
    - All models are frozen; sequences are tuples - a built schema never changes
    - options is a per-variant payload selected by the field's type tag
    - No cross-check that options match type (Airtable is the judge)
    - to_payload() emits Airtable's camelCase keys and omits absent options
"""

from pydantic import BaseModel, ConfigDict, Field

from table_agent.core.domain_types import ChoiceColor, DateFormatName, FieldType


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Choice(_Frozen):
    """One allowed value of a single-select field."""
    name: str
    color: ChoiceColor


class SingleSelectOptions(_Frozen):
    choices: tuple[Choice, ...]


class DateFormat(_Frozen):
    name: DateFormatName


class DateOptions(_Frozen):
    date_format: DateFormat = Field(alias="dateFormat")


class NumberOptions(_Frozen):
    precision: int = Field(ge=0, le=8)


FieldOptions = SingleSelectOptions | DateOptions | NumberOptions


class FieldDefinition(_Frozen):
    name: str
    type: FieldType
    options: FieldOptions | None = None


class TableSchema(_Frozen):
    """Named, typed field definitions for one table."""
    name: str
    description: str
    fields: tuple[FieldDefinition, ...]

    def to_payload(self) -> dict:
        """Serialize to the JSON body Airtable expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
