import pytest
from pendulum import datetime

from ods_formats import ValueFormat, ValueType


@pytest.fixture(name="ref_datetime")
def ref_datetime_fixture():
    return datetime(2023, 4, 1, 13, 25, 42)


@pytest.fixture(name="make_format")
def make_format_fixture():
    def make_format(*parts, value_type=ValueType.TEXT):
        value_format = ValueFormat.with_name("test", value_type)
        value_format.push_parts(parts)
        return value_format

    return make_format
