import pytest_check as check

from ods_formats import (
    RGB,
    CellRef,
    FormatPartType,
    StyleMap,
    ValueType,
    create_boolean_format,
    create_currency_prefix,
    create_currency_suffix,
    create_euro_format,
    create_euro_red_format,
    create_number_format,
    create_number_format_fixed,
    create_percentage_format,
)


def test_currency_formats():
    value_format = create_euro_format("euro")
    assert value_format.name == "euro"
    assert value_format.value_type == ValueType.CURRENCY
    assert value_format.format_float(1234.5) == "€ 1234.50"
    assert value_format.format_float(-0.125) == "€ -0.12"

    value_format = create_currency_prefix("usd", "$")
    assert value_format.format_float(99.999) == "$ 100.00"

    value_format = create_currency_suffix("sek", "kr")
    assert value_format.format_float(1234.5) == "1234.50 kr"
    assert [p.part_type for p in value_format.parts] == [
        FormatPartType.NUMBER,
        FormatPartType.TEXT,
        FormatPartType.CURRENCY_SYMBOL,
    ]


def test_currency_locale():
    value_format = create_currency_prefix("eur-at", "€", language="de", country="AT")
    symbol = value_format.parts[0]
    assert symbol.content == "€"
    assert symbol.attr("number:language") == "de"
    assert symbol.attr("number:country") == "AT"
    assert value_format.format_float(1.0) == "€ 1.00"

    symbol = create_currency_suffix("eur", "€").parts[2]
    assert symbol.attr("number:language") is None
    assert symbol.attrmap.is_empty()


def test_euro_red_format():
    value_format = create_euro_red_format("euro-red", "euro")
    assert value_format.format_float(1234.5) == "-€ 1234.50"
    assert value_format.text_attr.color == RGB(255, 0, 0)
    assert value_format.stylemaps == (StyleMap("value()>=0", "euro", CellRef(0, 0)),)
    assert str(value_format.stylemaps[0].base_cell) == ".A1"


def test_number_formats():
    value_format = create_number_format("num", 2, True)
    number = value_format.parts[0]
    check.equal(number.attr("number:decimal-places"), "2")
    check.equal(number.attr("loext:min-decimal-places"), "0")
    check.equal(number.attr("number:min-integer-digits"), "1")
    check.equal(number.attr("number:grouping"), "true")
    check.equal(value_format.format_float(1234.5678), "1234.57")

    value_format = create_number_format_fixed("fixed", 3, False)
    number = value_format.parts[0]
    check.equal(number.attr("loext:min-decimal-places"), "3")
    check.is_none(number.attr("number:grouping"))
    check.equal(value_format.format_float(1.5), "1.500")


def test_percentage_format():
    value_format = create_percentage_format("pct", 1)
    assert value_format.value_type == ValueType.PERCENTAGE
    assert value_format.format_float(12.34) == "12.3\u00a0%"


def test_boolean_format():
    value_format = create_boolean_format("bool")
    assert value_format.value_type == ValueType.BOOLEAN
    assert value_format.format_boolean(False) == "false"
