"""Factories for the value formats commonly written to spreadsheets."""

from typing import List, Optional

from ods_formats.constants import (
    ATTR_COUNTRY,
    ATTR_DECIMAL_PLACES,
    ATTR_GROUPING,
    ATTR_LANGUAGE,
    ATTR_MIN_DECIMAL_PLACES,
    ATTR_MIN_INTEGER_DIGITS,
    ATTR_STYLE,
    ATTR_TRUE,
    EURO_SYMBOL,
    PERCENT_SUFFIX,
    POSITIVE_CONDITION,
    STYLE_LONG,
    FormatPartType,
    ValueType,
)
from ods_formats.format import FormatPart, ValueFormat
from ods_formats.style import RGB, CellRef, StyleMap

__all__ = [
    "create_boolean_format",
    "create_currency_prefix",
    "create_currency_suffix",
    "create_date_dmy_format",
    "create_datetime_format",
    "create_euro_format",
    "create_euro_red_format",
    "create_number_format",
    "create_number_format_fixed",
    "create_percentage_format",
    "create_time_format",
]

LONG = [(ATTR_STYLE, STYLE_LONG)]


def _number_part(decimal: int, min_decimal: int, grouping: bool) -> FormatPart:
    part = FormatPart(FormatPartType.NUMBER)
    part.set_attr(ATTR_MIN_INTEGER_DIGITS, "1")
    part.set_attr(ATTR_DECIMAL_PLACES, str(decimal))
    part.set_attr(ATTR_MIN_DECIMAL_PLACES, str(min_decimal))
    if grouping:
        part.set_attr(ATTR_GROUPING, ATTR_TRUE)
    return part


def _currency_symbol_part(
    symbol: str, language: Optional[str], country: Optional[str]
) -> FormatPart:
    part = FormatPart.with_content(FormatPartType.CURRENCY_SYMBOL, symbol)
    if language is not None:
        part.set_attr(ATTR_LANGUAGE, language)
    if country is not None:
        part.set_attr(ATTR_COUNTRY, country)
    return part


def _text(content: str) -> FormatPart:
    return FormatPart.with_content(FormatPartType.TEXT, content)


def create_boolean_format(name: str) -> ValueFormat:
    value_format = ValueFormat.with_name(name, ValueType.BOOLEAN)
    value_format.push_part(FormatPart(FormatPartType.BOOLEAN))
    return value_format


def create_number_format(name: str, decimal: int, grouping: bool) -> ValueFormat:
    """Number format with up to ``decimal`` decimal places."""
    value_format = ValueFormat.with_name(name, ValueType.NUMBER)
    value_format.push_part(_number_part(decimal, 0, grouping))
    return value_format


def create_number_format_fixed(name: str, decimal: int, grouping: bool) -> ValueFormat:
    """Number format with exactly ``decimal`` decimal places."""
    value_format = ValueFormat.with_name(name, ValueType.NUMBER)
    value_format.push_part(_number_part(decimal, decimal, grouping))
    return value_format


def create_percentage_format(name: str, decimal: int) -> ValueFormat:
    value_format = ValueFormat.with_name(name, ValueType.PERCENTAGE)
    value_format.push_parts([_number_part(decimal, decimal, False), _text(PERCENT_SUFFIX)])
    return value_format


def create_currency_prefix(
    name: str, symbol: str, language: Optional[str] = None, country: Optional[str] = None
) -> ValueFormat:
    """Currency format with the symbol before the amount, e.g. ``€ 1234.50``."""
    value_format = ValueFormat.with_name(name, ValueType.CURRENCY)
    value_format.push_parts(
        [
            _currency_symbol_part(symbol, language, country),
            _text(" "),
            _number_part(2, 2, True),
        ]
    )
    return value_format


def create_currency_suffix(
    name: str, symbol: str, language: Optional[str] = None, country: Optional[str] = None
) -> ValueFormat:
    """Currency format with the symbol after the amount, e.g. ``1234.50 €``."""
    value_format = ValueFormat.with_name(name, ValueType.CURRENCY)
    value_format.push_parts(
        [
            _number_part(2, 2, True),
            _text(" "),
            _currency_symbol_part(symbol, language, country),
        ]
    )
    return value_format


def create_euro_format(name: str) -> ValueFormat:
    return create_currency_prefix(name, EURO_SYMBOL)


def create_euro_red_format(name: str, positive_style: str) -> ValueFormat:
    """
    Euro format for negative amounts, displayed in red.

    The format renders a leading minus sign and refers to ``positive_style``
    for values that are not negative.
    """
    value_format = ValueFormat.with_name(name, ValueType.CURRENCY)
    value_format.text_attr.set_color(RGB(255, 0, 0))
    value_format.push_parts(
        [
            _text("-"),
            _currency_symbol_part(EURO_SYMBOL, None, None),
            _text(" "),
            _number_part(2, 2, True),
        ]
    )
    value_format.push_stylemap(StyleMap(POSITIVE_CONDITION, positive_style, CellRef.simple(0, 0)))
    return value_format


def create_date_dmy_format(name: str) -> ValueFormat:
    """Date format D.M.Y, e.g. ``01.04.2023``."""
    value_format = ValueFormat.with_name(name, ValueType.DATE_TIME)
    value_format.push_parts(
        [
            FormatPart.with_attrs(FormatPartType.DAY, LONG),
            _text("."),
            FormatPart.with_attrs(FormatPartType.MONTH, LONG),
            _text("."),
            FormatPart.with_attrs(FormatPartType.YEAR, LONG),
        ]
    )
    return value_format


def create_datetime_format(name: str) -> ValueFormat:
    """Date/time format Y-M-D H:M:S, e.g. ``2023-04-01 13:5:9``."""
    value_format = ValueFormat.with_name(name, ValueType.DATE_TIME)
    value_format.push_parts(
        [
            FormatPart.with_attrs(FormatPartType.YEAR, LONG),
            _text("-"),
            FormatPart.with_attrs(FormatPartType.MONTH, LONG),
            _text("-"),
            FormatPart.with_attrs(FormatPartType.DAY, LONG),
            _text(" "),
            FormatPart(FormatPartType.HOURS),
            _text(":"),
            FormatPart(FormatPartType.MINUTES),
            _text(":"),
            FormatPart(FormatPartType.SECONDS),
        ]
    )
    return value_format


def create_time_format(name: str) -> ValueFormat:
    """Duration format H M S, e.g. ``26 3 0``."""
    value_format = ValueFormat.with_name(name, ValueType.TIME_DURATION)
    parts: List[FormatPart] = [
        FormatPart(FormatPartType.HOURS),
        _text(" "),
        FormatPart(FormatPartType.MINUTES),
        _text(" "),
        FormatPart(FormatPartType.SECONDS),
    ]
    value_format.push_parts(parts)
    return value_format
