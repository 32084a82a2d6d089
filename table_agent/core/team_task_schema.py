"""Team Task Schema - the static table definition sent to Airtable.

Invariants:
    - build_team_task_schema() is pure and deterministic: no inputs, no IO
    - Field order and choice order are significant (Airtable keeps them)
"""

from table_agent.core.domain_types import ChoiceColor, DateFormatName, FieldType
from table_agent.schemas.table import (
    Choice,
    DateFormat,
    DateOptions,
    FieldDefinition,
    NumberOptions,
    SingleSelectOptions,
    TableSchema,
)

TEAM_TASK_TABLE_NAME = "Team Task List"
TEAM_TASK_TABLE_DESCRIPTION = (
    "Daily/weekly team task management with assignments and completion tracking"
)

TEAM_MEMBER_CHOICES = (
    ("Blake", ChoiceColor.BLUE_LIGHT_2),
    ("Sarah", ChoiceColor.CYAN_LIGHT_2),
    ("Mike", ChoiceColor.TEAL_LIGHT_2),
    ("Jessica", ChoiceColor.GREEN_LIGHT_2),
    ("David", ChoiceColor.YELLOW_LIGHT_2),
    ("Emma", ChoiceColor.ORANGE_LIGHT_2),
    ("Alex", ChoiceColor.RED_LIGHT_2),
    ("Lisa", ChoiceColor.PINK_LIGHT_2),
    ("Unassigned", ChoiceColor.GRAY_LIGHT_2),
)

STATUS_CHOICES = (
    ("Not Started", ChoiceColor.GRAY_LIGHT_2),
    ("In Progress", ChoiceColor.YELLOW_LIGHT_2),
    ("Completed", ChoiceColor.GREEN_LIGHT_2),
    ("On Hold", ChoiceColor.ORANGE_LIGHT_2),
    ("Cancelled", ChoiceColor.RED_LIGHT_2),
)

PRIORITY_CHOICES = (
    ("High", ChoiceColor.RED_LIGHT_2),
    ("Medium", ChoiceColor.YELLOW_LIGHT_2),
    ("Low", ChoiceColor.GREEN_LIGHT_2),
)


def build_team_task_schema() -> TableSchema:
    """Build the Team Task List table definition."""
    return TableSchema(
        name=TEAM_TASK_TABLE_NAME,
        description=TEAM_TASK_TABLE_DESCRIPTION,
        fields=(
            _text("Task Name"),
            _single_select("Team Member", TEAM_MEMBER_CHOICES),
            _single_select("Status", STATUS_CHOICES),
            _single_select("Priority", PRIORITY_CHOICES),
            _us_date("Due Date"),
            _us_date("Week Starting"),
            _long_text("Description"),
            FieldDefinition(
                name="Time Estimate (hours)",
                type=FieldType.NUMBER,
                options=NumberOptions(precision=1),
            ),
            _us_date("Completed Date"),
            _long_text("Notes"),
            FieldDefinition(name="Created Date", type=FieldType.CREATED_TIME),
            FieldDefinition(name="Last Modified", type=FieldType.LAST_MODIFIED_TIME),
        ),
    )


def _text(name: str) -> FieldDefinition:
    return FieldDefinition(name=name, type=FieldType.SINGLE_LINE_TEXT)


def _long_text(name: str) -> FieldDefinition:
    return FieldDefinition(name=name, type=FieldType.MULTILINE_TEXT)


def _single_select(
    name: str, choices: tuple[tuple[str, ChoiceColor], ...],
) -> FieldDefinition:
    return FieldDefinition(
        name=name,
        type=FieldType.SINGLE_SELECT,
        options=SingleSelectOptions(
            choices=tuple(Choice(name=n, color=c) for n, c in choices),
        ),
    )


def _us_date(name: str) -> FieldDefinition:
    return FieldDefinition(
        name=name,
        type=FieldType.DATE,
        options=DateOptions(date_format=DateFormat(name=DateFormatName.US)),
    )
