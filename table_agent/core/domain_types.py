"""Domain Types - Airtable field tags and option values as str Enums.

Invariants:
    - Enum values are the exact strings the Airtable metadata API expects
    - All valid tags encoded as Enums - no raw string matching
"""

from enum import Enum


class FieldType(str, Enum):
    """Airtable field type tags used by the team task table."""
    SINGLE_LINE_TEXT = "singleLineText"
    MULTILINE_TEXT = "multilineText"
    SINGLE_SELECT = "singleSelect"
    DATE = "date"
    NUMBER = "number"
    CREATED_TIME = "createdTime"
    LAST_MODIFIED_TIME = "lastModifiedTime"


class ChoiceColor(str, Enum):
    """Display colors for single-select choices."""
    BLUE_LIGHT_2 = "blueLight2"
    CYAN_LIGHT_2 = "cyanLight2"
    TEAL_LIGHT_2 = "tealLight2"
    GREEN_LIGHT_2 = "greenLight2"
    YELLOW_LIGHT_2 = "yellowLight2"
    ORANGE_LIGHT_2 = "orangeLight2"
    RED_LIGHT_2 = "redLight2"
    PINK_LIGHT_2 = "pinkLight2"
    GRAY_LIGHT_2 = "grayLight2"


class DateFormatName(str, Enum):
    """Date display formats (us is M/D/YYYY)."""
    US = "us"
