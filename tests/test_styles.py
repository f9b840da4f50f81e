import pytest

from ods_formats import (
    RGB,
    CellRef,
    FormatPart,
    FormatPartType,
    StyleMap,
    StyleOrigin,
    StyleUse,
    TextAttr,
    ValueFormat,
    ValueType,
    rgb_color,
)


def test_rgb_color():
    assert rgb_color(None) is None
    assert rgb_color((1, 2, 3)) == RGB(1, 2, 3)
    assert rgb_color(RGB(4, 5, 6)) == RGB(4, 5, 6)

    with pytest.raises(TypeError) as e:
        _ = rgb_color((1, 2))
    assert "RGB color must be an RGB or a tuple of 3 integers" in str(e.value)
    with pytest.raises(TypeError):
        _ = rgb_color("red")


def test_text_attr():
    text_attr = TextAttr()
    assert text_attr.color is None
    text_attr.set_color((255, 0, 0))
    assert text_attr.color == RGB(255, 0, 0)
    assert TextAttr(color=(0, 0, 255), font_size=10.0).color.b == 255

    with pytest.raises(TypeError) as e:
        _ = TextAttr(font_size=10)
    assert "size must be a float number of points" in str(e.value)
    with pytest.raises(TypeError) as e:
        _ = TextAttr(bold="yes")
    assert "bold argument must be boolean" in str(e.value)


def test_cell_ref():
    assert str(CellRef.simple(0, 0)) == ".A1"
    assert str(CellRef(9, 27)) == ".AB10"
    assert str(CellRef(0, 51)) == ".AZ1"
    assert str(CellRef(0, 52)) == ".BA1"
    assert str(CellRef(0, 701)) == ".ZZ1"
    assert str(CellRef(0, 702)) == ".AAA1"
    assert str(CellRef(0, 25, table="Sheet1", row_abs=True, col_abs=True)) == "Sheet1.$Z$1"
    with pytest.raises(IndexError):
        _ = CellRef(-1, 0)
    with pytest.raises(IndexError):
        _ = CellRef(0, -1)


def test_value_format_metadata():
    value_format = ValueFormat()
    assert value_format.name == ""
    assert value_format.value_type == ValueType.TEXT
    assert value_format.origin == StyleOrigin.CONTENT
    assert value_format.styleuse == StyleUse.DEFAULT

    value_format = ValueFormat.with_origin(StyleOrigin.STYLES, StyleUse.NAMED)
    assert value_format.origin == StyleOrigin.STYLES
    assert value_format.styleuse == StyleUse.NAMED

    value_format.name = "renamed"
    value_format.value_type = ValueType.DATE_TIME
    value_format.origin = StyleOrigin.CONTENT
    value_format.styleuse = StyleUse.AUTOMATIC
    assert value_format.name == "renamed"
    assert value_format.value_type == ValueType.DATE_TIME
    assert value_format.styleuse == StyleUse.AUTOMATIC
    assert repr(value_format) == "ValueFormat(name='renamed', value_type=DATE_TIME, parts=0)"


def test_value_format_parts():
    value_format = ValueFormat.with_name("parts", ValueType.NUMBER)
    assert value_format.parts == ()
    value_format.push_part(FormatPart(FormatPartType.NUMBER))
    value_format.push_parts([FormatPart(FormatPartType.TEXT, "!")])
    value_format.parts_mut().insert(0, FormatPart(FormatPartType.TEXT, "="))
    assert [p.content for p in value_format.parts] == ["=", None, "!"]
    assert value_format.format_float(4.0) == "=4!"

    assert value_format.stylemaps == ()
    value_format.push_stylemap(StyleMap("value()<0", "negative"))
    value_format.stylemaps_mut().append(StyleMap("value()>0", "positive", CellRef(1, 1)))
    assert [s.applied_style for s in value_format.stylemaps] == ["negative", "positive"]
    assert value_format.stylemaps[0].base_cell == CellRef(0, 0)
