import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from numbers import Real
from typing import Iterable, List, Optional, Tuple
from warnings import warn

from pendulum import DateTime
from pendulum import instance as pendulum_instance

from ods_formats import __name__ as ods_formats_name
from ods_formats.attrmap import AttrMap, AttrMapHolder
from ods_formats.constants import (
    AM_PM_MARKER,
    ATTR_DECIMAL_PLACES,
    ATTR_STYLE,
    ATTR_TEXTUAL,
    ATTR_TRUE,
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    DEFAULT_DECIMAL_PLACES,
    MONTH_NAME_ABBREV,
    MONTH_NAME_FULL,
    SECONDS_IN_DAY,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
    STYLE_LONG,
    TEXT_LOCALE,
    WEEKDAY_NAME_ABBREV,
    WEEKDAY_NAME_FULL,
    FormatPartType,
    StyleOrigin,
    StyleUse,
    ValueType,
)
from ods_formats.exceptions import NaNError, UnsupportedWarning, ValueFormatError
from ods_formats.style import StyleMap, TextAttr

logger = logging.getLogger(ods_formats_name)
debug = logger.debug

__all__ = ["FormatPart", "ValueFormat"]

DECIMAL_PLACES_RE = re.compile(r"\+?[0-9]+")


@dataclass
class FormatPart(AttrMapHolder):
    """One structural part of a value format.

    Parameters
    ----------
    part_type: FormatPartType
        What kind of part this is
    content: str, optional, default: None
        Literal text; only used by ``TEXT`` and ``CURRENCY_SYMBOL`` parts
    attrmap: AttrMap, optional
        Attributes of the part such as ``number:decimal-places``
    """

    part_type: FormatPartType
    content: Optional[str] = None
    attrmap: AttrMap = field(default_factory=AttrMap)

    @classmethod
    def with_content(cls, part_type: FormatPartType, content: str) -> "FormatPart":
        return cls(part_type, content=content)

    @classmethod
    def with_attrs(
        cls, part_type: FormatPartType, attrs: Iterable[Tuple[str, str]]
    ) -> "FormatPart":
        return cls(part_type, attrmap=AttrMap(attrs))

    def set_part_type(self, part_type: FormatPartType) -> None:
        self.part_type = part_type

    def set_content(self, content: str) -> None:
        self.content = content

    def _is_long(self) -> bool:
        return self.attr_def(ATTR_STYLE, "") == STYLE_LONG

    def _push_content(self, buf: List[str]) -> None:
        if self.content is not None:
            buf.append(self.content)

    def _format_boolean(self, buf: List[str], value: bool) -> None:
        if self.part_type == FormatPartType.BOOLEAN:
            buf.append(BOOLEAN_TRUE if value else BOOLEAN_FALSE)
        elif self.part_type == FormatPartType.TEXT:
            self._push_content(buf)

    def _format_float(self, buf: List[str], value: float) -> None:
        if self.part_type == FormatPartType.NUMBER:
            buf.append(_format_fixed(value, self._decimal_places()))
        elif self.part_type == FormatPartType.SCIENTIFIC:
            buf.append(_format_scientific(value))
        elif self.part_type in (FormatPartType.CURRENCY_SYMBOL, FormatPartType.TEXT):
            self._push_content(buf)

    def _format_str(self, buf: List[str], value: str) -> None:
        if self.part_type == FormatPartType.TEXT_CONTENT:
            buf.append(value)
        elif self.part_type == FormatPartType.TEXT:
            self._push_content(buf)

    def _format_datetime(  # noqa: PLR0912
        self, buf: List[str], value: DateTime, is_12_hour: bool
    ) -> None:
        part_type = self.part_type
        if part_type == FormatPartType.DAY:
            buf.append(_pad(value.day, self._is_long()))
        elif part_type == FormatPartType.MONTH:
            if self.attr_def(ATTR_TEXTUAL, "") == ATTR_TRUE:
                # Long textual months are abbreviated and short ones are not
                token = MONTH_NAME_ABBREV if self._is_long() else MONTH_NAME_FULL
                buf.append(value.format(token, locale=TEXT_LOCALE))
            else:
                buf.append(_pad(value.month, self._is_long()))
        elif part_type == FormatPartType.YEAR:
            if self._is_long():
                buf.append(str(value.year).zfill(4))
            else:
                buf.append(str(value.year % 100).zfill(2))
        elif part_type == FormatPartType.DAY_OF_WEEK:
            token = WEEKDAY_NAME_FULL if self._is_long() else WEEKDAY_NAME_ABBREV
            buf.append(value.format(token, locale=TEXT_LOCALE))
        elif part_type == FormatPartType.WEEK_OF_YEAR:
            buf.append(_pad(_week_of_year(value), self._is_long()))
        elif part_type == FormatPartType.HOURS:
            hour = value.hour
            if is_12_hour:
                hour = hour % 12 or 12
            buf.append(_pad(hour, self._is_long()))
        elif part_type == FormatPartType.MINUTES:
            buf.append(_pad(value.minute, self._is_long()))
        elif part_type == FormatPartType.SECONDS:
            buf.append(_pad(value.second, self._is_long()))
        elif part_type == FormatPartType.AM_PM:
            buf.append(value.format(AM_PM_MARKER, locale=TEXT_LOCALE))
        elif part_type == FormatPartType.TEXT:
            self._push_content(buf)

    def _format_time_duration(self, buf: List[str], value: timedelta) -> None:
        if self.part_type in (
            FormatPartType.HOURS,
            FormatPartType.MINUTES,
            FormatPartType.SECONDS,
        ):
            hours, minutes, seconds = _split_duration(value)
            if self.part_type == FormatPartType.HOURS:
                buf.append(str(hours))
            elif self.part_type == FormatPartType.MINUTES:
                buf.append(str(minutes))
            else:
                buf.append(str(seconds))
        elif self.part_type == FormatPartType.TEXT:
            self._push_content(buf)

    def _decimal_places(self) -> int:
        decimal_places = self.attr_def(ATTR_DECIMAL_PLACES, DEFAULT_DECIMAL_PLACES)
        if DECIMAL_PLACES_RE.fullmatch(decimal_places) is None:
            raise NaNError(ATTR_DECIMAL_PLACES, decimal_places)
        return int(decimal_places)


class ValueFormat(AttrMapHolder):
    """
    A named value format: an ordered sequence of :py:class:`FormatPart`
    that is rendered once per value.

    Each ``format_*`` method walks all parts in order and joins what each
    part produces for that kind of value. Parts that have no meaning for the
    value produce nothing, so rendering a value with a format built for a
    different value type returns whatever subset of parts match, which is
    often an empty string. Rendering never changes the format.

    Parameters
    ----------
    name: str, optional, default: ""
        Name of the format
    value_type: ValueType, optional, default: ValueType.TEXT
        The type of value the format is intended for. This is not checked
        when rendering.
    origin: StyleOrigin, optional, default: StyleOrigin.CONTENT
        Where the format is stored in a document
    styleuse: StyleUse, optional, default: StyleUse.DEFAULT
        How the format is used in a document
    """

    def __init__(
        self,
        name: str = "",
        value_type: ValueType = ValueType.TEXT,
        origin: StyleOrigin = StyleOrigin.CONTENT,
        styleuse: StyleUse = StyleUse.DEFAULT,
    ) -> None:
        self._name = name
        self._value_type = value_type
        self._origin = origin
        self._styleuse = styleuse
        self.attrmap = AttrMap()
        self._text_attr = TextAttr()
        self._parts: Optional[List[FormatPart]] = None
        self._stylemaps: Optional[List[StyleMap]] = None

    @classmethod
    def with_origin(cls, origin: StyleOrigin, styleuse: StyleUse) -> "ValueFormat":
        return cls(origin=origin, styleuse=styleuse)

    @classmethod
    def with_name(cls, name: str, value_type: ValueType) -> "ValueFormat":
        return cls(name=name, value_type=value_type)

    def __repr__(self) -> str:
        value_type = self._value_type.name
        return f"ValueFormat(name={self._name!r}, value_type={value_type}, parts={len(self.parts)})"

    @property
    def name(self) -> str:
        """str: The name of the format."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def value_type(self) -> ValueType:
        """ValueType: The type of value the format is intended for."""
        return self._value_type

    @value_type.setter
    def value_type(self, value: ValueType) -> None:
        self._value_type = value

    @property
    def origin(self) -> StyleOrigin:
        return self._origin

    @origin.setter
    def origin(self, value: StyleOrigin) -> None:
        self._origin = value

    @property
    def styleuse(self) -> StyleUse:
        return self._styleuse

    @styleuse.setter
    def styleuse(self, value: StyleUse) -> None:
        self._styleuse = value

    @property
    def text_attr(self) -> TextAttr:
        """TextAttr: Display styling of the formatted text."""
        return self._text_attr

    @property
    def parts(self) -> Tuple[FormatPart, ...]:
        """Tuple[FormatPart]: The parts of the format in rendering order."""
        return tuple(self._parts) if self._parts is not None else ()

    def parts_mut(self) -> List[FormatPart]:
        """Return the list of parts for editing, creating it if needed."""
        if self._parts is None:
            self._parts = []
        return self._parts

    def push_part(self, part: FormatPart) -> None:
        self.parts_mut().append(part)

    def push_parts(self, parts: Iterable[FormatPart]) -> None:
        self.parts_mut().extend(parts)

    @property
    def stylemaps(self) -> Tuple[StyleMap, ...]:
        """Tuple[StyleMap]: Conditional style redirections, in order."""
        return tuple(self._stylemaps) if self._stylemaps is not None else ()

    def stylemaps_mut(self) -> List[StyleMap]:
        if self._stylemaps is None:
            self._stylemaps = []
        return self._stylemaps

    def push_stylemap(self, stylemap: StyleMap) -> None:
        self.stylemaps_mut().append(stylemap)

    def format_boolean(self, value: bool) -> str:
        """Render a boolean value."""
        debug("format_boolean: '%s': parts=%d", self._name, len(self.parts))
        buf = []
        for part in self.parts:
            part._format_boolean(buf, value)
        return "".join(buf)

    def format_float(self, value: float) -> str:
        """Render a number.

        Raises
        ------
        NaNError:
            If a number part has a ``number:decimal-places`` attribute that
            is not a non-negative integer.
        """
        debug("format_float: '%s': parts=%d", self._name, len(self.parts))
        buf = []
        for part in self.parts:
            part._format_float(buf, value)
        return "".join(buf)

    def format_str(self, value: str) -> str:
        """Render a text value. Every ``TEXT_CONTENT`` part inserts the whole text."""
        debug("format_str: '%s': parts=%d", self._name, len(self.parts))
        buf = []
        for part in self.parts:
            part._format_str(buf, value)
        return "".join(buf)

    def format_datetime(self, value: datetime) -> str:
        """
        Render a calendar date and time.

        If any part of the format is an ``AM_PM`` part, all ``HOURS`` parts
        use a 12-hour clock; otherwise they use a 24-hour clock. Time zones
        are ignored: the fields of the value are rendered as they are.
        """
        parts = self.parts
        is_12_hour = any(part.part_type == FormatPartType.AM_PM for part in parts)
        debug(
            "format_datetime: '%s': parts=%d, clock=%s",
            self._name,
            len(parts),
            "12h" if is_12_hour else "24h",
        )
        if not parts:
            return ""

        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)  # noqa: DTZ001
        value = pendulum_instance(value)

        buf = []
        for part in parts:
            part._format_datetime(buf, value, is_12_hour)
        return "".join(buf)

    def format_time_duration(self, value: timedelta) -> str:
        """Render an elapsed time. Hours are not limited to 24."""
        debug("format_time_duration: '%s': parts=%d", self._name, len(self.parts))
        buf = []
        for part in self.parts:
            part._format_time_duration(buf, value)
        return "".join(buf)

    def format_value(self, value) -> str:
        """
        Render a value using the ``format_*`` method for its Python type.

        Values of an unsupported type render as an empty string with an
        :py:class:`~ods_formats.UnsupportedWarning`.
        """
        if isinstance(value, bool):
            return self.format_boolean(value)
        elif isinstance(value, Real):
            return self.format_float(float(value))
        elif isinstance(value, str):
            return self.format_str(value)
        elif isinstance(value, date):
            return self.format_datetime(value)
        elif isinstance(value, timedelta):
            return self.format_time_duration(value)
        type_name = type(value).__name__
        warn(f"Unsupported value type '{type_name}'", UnsupportedWarning, stacklevel=2)
        return ""


def _pad(value: int, is_long: bool) -> str:
    return str(value).zfill(2) if is_long else str(value)


def _week_of_year(value: datetime) -> int:
    """Week number with weeks starting on Monday, as strftime's %W."""
    return (value.timetuple().tm_yday + 6 - value.weekday()) // 7


def _format_fixed(value: float, decimal_places: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    try:
        return f"{value:.{decimal_places}f}"
    except (ValueError, OverflowError) as e:
        msg = f"Unsupported '{ATTR_DECIMAL_PLACES}' value {decimal_places}"
        raise ValueFormatError(msg) from e


def _format_scientific(value: float) -> str:
    """Shortest round-trip exponential notation such as 1.2345e3 for 1234.5."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0e0" if math.copysign(1.0, value) < 0 else "0e0"

    (sign, digits, exponent) = Decimal(repr(float(value))).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    exponent += len(digits) - 1

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(x) for x in digits[1:])
    return ("-" if sign else "") + f"{mantissa}e{exponent}"


def _split_duration(value: timedelta) -> Tuple[int, int, int]:
    """Whole hours, minutes in the hour and seconds in the minute.

    All three are truncated towards zero and carry the sign of the duration.
    """
    total_seconds = value.days * SECONDS_IN_DAY + value.seconds
    if total_seconds < 0 and value.microseconds:
        total_seconds += 1
    sign = -1 if total_seconds < 0 else 1
    total_seconds = abs(total_seconds)
    hours = total_seconds // SECONDS_IN_HOUR
    minutes = (total_seconds // SECONDS_IN_MINUTE) % 60
    seconds = total_seconds % SECONDS_IN_MINUTE
    return (sign * hours, sign * minutes, sign * seconds)
