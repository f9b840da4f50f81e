from collections import namedtuple
from dataclasses import dataclass, field
from typing import Optional

__all__ = [
    "CellRef",
    "RGB",
    "StyleMap",
    "TextAttr",
    "rgb_color",
]

RGB = namedtuple("RGB", ["r", "g", "b"])


def rgb_color(color) -> RGB:
    """Raise a TypeError if a color is not a valid RGB value."""
    if color is None:
        return None
    if isinstance(color, RGB):
        return color
    if isinstance(color, tuple):
        if not (len(color) == 3 and all(isinstance(x, int) for x in color)):
            msg = "RGB color must be an RGB or a tuple of 3 integers"
            raise TypeError(msg)
        return RGB(*color)
    msg = "RGB color must be an RGB or a tuple of 3 integers"
    raise TypeError(msg)


@dataclass
class TextAttr:
    """Text styling applied to a formatted value.

    None of these properties change the text produced by a value format;
    they only describe how it is displayed.

    Parameters
    ----------
    color: RGB, optional, default: None
        Font color, or ``None`` to inherit the cell color
    font_name: str, optional, default: None
        Font name, or ``None`` to inherit the cell font
    font_size: float, optional, default: None
        Font size in points
    bold: bool, optional, default: False
        ``True`` if the text is bold
    italic: bool, optional, default: False
        ``True`` if the text is italic
    underline: bool, optional, default: False
        ``True`` if the text is underlined

    Raises
    ------
    TypeError:
        If arguments do not match the specified type
    """

    color: RGB = None
    font_name: str = None
    font_size: float = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def __post_init__(self):
        self.color = rgb_color(self.color)

        if self.font_size is not None and not isinstance(self.font_size, float):
            msg = "size must be a float number of points"
            raise TypeError(msg)

        for attr in ["bold", "italic", "underline"]:
            if not isinstance(getattr(self, attr), bool):
                msg = f"{attr} argument must be boolean"
                raise TypeError(msg)

    def set_color(self, color) -> None:
        self.color = rgb_color(color)


def col_to_name(col: int, col_abs: bool = False) -> str:
    """
    Column name in bijective base 26, ``A`` for column 0 and ``AA`` for 26.

    Parameters
    ----------
    col: int
        Zero indexed column number
    col_abs: bool, optional, default: False
        ``True`` to prefix the name with ``$`` for an absolute reference

    Raises
    ------
    IndexError:
        If the column number is negative
    """
    if col < 0:
        msg = f"column reference {col} below zero"
        raise IndexError(msg)

    letters = []
    col += 1
    while col > 0:
        col, letter = divmod(col - 1, 26)
        letters.append(chr(ord("A") + letter))

    return ("$" if col_abs else "") + "".join(reversed(letters))


@dataclass(frozen=True)
class CellRef:
    """A reference to a single cell, optionally qualified by a table name."""

    row: int
    col: int
    table: Optional[str] = None
    row_abs: bool = False
    col_abs: bool = False

    def __post_init__(self):
        if self.row < 0:
            msg = f"row reference {self.row} below zero"
            raise IndexError(msg)
        if self.col < 0:
            msg = f"column reference {self.col} below zero"
            raise IndexError(msg)

    @classmethod
    def simple(cls, row: int, col: int) -> "CellRef":
        return cls(row, col)

    def __str__(self) -> str:
        row_abs = "$" if self.row_abs else ""
        cell = col_to_name(self.col, self.col_abs) + row_abs + str(self.row + 1)
        if self.table is None:
            return "." + cell
        return f"{self.table}.{cell}"


@dataclass
class StyleMap:
    """Conditional redirection to another style.

    The condition is stored as written, for example ``value()>=0``. It is
    evaluated by whoever applies the styles, not by the value format.
    """

    condition: str
    applied_style: str
    base_cell: CellRef = field(default_factory=lambda: CellRef.simple(0, 0))
