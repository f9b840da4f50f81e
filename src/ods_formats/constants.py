from enum import IntEnum

import enum_tools.documentation

__all__ = [
    "FormatPartType",
    "StyleOrigin",
    "StyleUse",
    "ValueType",
]

# Attribute names used by format parts
ATTR_DECIMAL_PLACES = "number:decimal-places"
ATTR_MIN_DECIMAL_PLACES = "loext:min-decimal-places"
ATTR_MIN_INTEGER_DIGITS = "number:min-integer-digits"
ATTR_GROUPING = "number:grouping"
ATTR_STYLE = "number:style"
ATTR_TEXTUAL = "number:textual"
ATTR_LANGUAGE = "number:language"
ATTR_COUNTRY = "number:country"

# Attribute values
STYLE_LONG = "long"
ATTR_TRUE = "true"

# Formatting values and defaults
DEFAULT_DECIMAL_PLACES = "0"
BOOLEAN_TRUE = "true"
BOOLEAN_FALSE = "false"
TEXT_LOCALE = "en"
EURO_SYMBOL = "€"
PERCENT_SUFFIX = "\u00a0%"
POSITIVE_CONDITION = "value()>=0"

# Time constants
SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 60 * 60
SECONDS_IN_DAY = 24 * 60 * 60

# Textual date tokens, rendered by pendulum
MONTH_NAME_FULL = "MMMM"
MONTH_NAME_ABBREV = "MMM"
WEEKDAY_NAME_FULL = "dddd"
WEEKDAY_NAME_ABBREV = "ddd"
AM_PM_MARKER = "A"


@enum_tools.documentation.document_enum
class FormatPartType(IntEnum):
    """
    The structural kind of one part of a value format.

    Each render method of :py:class:`~ods_formats.ValueFormat` only reacts to
    the kinds that make sense for its value; all other parts are ignored.
    """

    BOOLEAN = 1
    """Boolean value as ``true`` or ``false``."""
    NUMBER = 2
    """Fixed point number."""
    FRACTION = 3
    """Fraction. Not rendered."""
    SCIENTIFIC = 4
    """Number in exponential notation."""
    CURRENCY_SYMBOL = 5
    """Currency symbol taken from the part content."""
    DAY = 6
    """Day of the month."""
    MONTH = 7
    """Month, as number or name."""
    YEAR = 8
    """Year."""
    ERA = 9
    """Era. Not rendered."""
    DAY_OF_WEEK = 10
    """Name of the day of the week."""
    WEEK_OF_YEAR = 11
    """Week of the year, weeks starting on Monday."""
    QUARTER = 12
    """Quarter of the year. Not rendered."""
    HOURS = 13
    """Hours of a date/time or whole hours of a duration."""
    MINUTES = 14
    """Minutes."""
    SECONDS = 15
    """Seconds."""
    AM_PM = 16
    """AM/PM marker. Switches all hours to a 12-hour clock."""
    EMBEDDED_TEXT = 17
    """Text embedded in a number. Not rendered."""
    TEXT = 18
    """Literal text taken from the part content."""
    TEXT_CONTENT = 19
    """Placeholder for the text value itself."""


@enum_tools.documentation.document_enum
class ValueType(IntEnum):
    """The type of value a format is intended for."""

    EMPTY = 0
    """No value."""
    BOOLEAN = 1
    """Boolean value."""
    NUMBER = 2
    """Floating point number."""
    PERCENTAGE = 3
    """Number displayed as a percentage."""
    CURRENCY = 4
    """Number displayed as a currency amount."""
    TEXT = 5
    """Plain text."""
    TEXT_XML = 6
    """Rich text."""
    DATE_TIME = 7
    """Calendar date and time."""
    TIME_DURATION = 8
    """Elapsed time."""


class StyleOrigin(IntEnum):
    CONTENT = 0
    STYLES = 1


class StyleUse(IntEnum):
    DEFAULT = 0
    NAMED = 1
    AUTOMATIC = 2
