"""
Formatting options: alignment, sign policy, base, defaults and per-call overrides.

Enum members are str subclasses whose values are the format spec characters,
so `Align("<") is Align.LEFT` and `str(Base.UPPER_HEX) == "X"`.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


# @formatter:off

class FmtConf:
    """
    Default configuration constants for NumFmt formatting.

    Attributes:
        FILL: Pad character used when no fill is configured.
        SPACING: Digits per group when a separator is set.
        DECIMAL_SEPARATOR: Character between integer and fractional digits.
        MAX_FIELD: Largest width, precision or spacing accepted by the
            format spec parser (range of a 64-bit unsigned size).
        FRACTION_DIGITS: Significant fractional digits rendered without a precision,
            which ends expansions that never terminate, e.g. Fraction(1, 3).
            A set precision always reads the exact digits.
    """
    FILL = " "
    SPACING = 3
    DECIMAL_SEPARATOR = "."
    MAX_FIELD = 2**64 - 1
    FRACTION_DIGITS = 28

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Align(StrEnum):
    """
    Positioning of the rendered number within the allotted width.

    Attributes:
        LEFT: Left-aligned in `width` columns.
        CENTER: Centered in `width` columns; an odd spare column goes in front.
        RIGHT: Right-aligned in `width` columns (default).
        DECIMAL: `width` is the minimal width before the decimal separator.
                 For integers, equivalent to RIGHT.
    """
    LEFT = "<"
    CENTER = "^"
    RIGHT = ">"
    DECIMAL = "v"


@unique
class Sign(StrEnum):
    """
    Whether to render a sign character.

    Attributes:
        ONLY_MINUS: Leading '-' for negative numbers, nothing for others (default).
        PLUS_AND_MINUS: Leading '+' for non-negative numbers as well.
    """
    ONLY_MINUS = "-"
    PLUS_AND_MINUS = "+"


@unique
class Base(StrEnum):
    """
    The base with which to represent a number.

    Attributes:
        BINARY: Binary digits, prefix '0b'.
        OCTAL: Octal digits, prefix '0o'.
        DECIMAL: Decimal digits with optional fraction, prefix '0d' (default).
        LOWER_HEX: Hexadecimal digits with lowercase letters, prefix '0x'.
        UPPER_HEX: Hexadecimal digits with uppercase letters, prefix '0x'.
    """
    BINARY = "b"
    OCTAL = "o"
    DECIMAL = "d"
    LOWER_HEX = "x"
    UPPER_HEX = "X"

    @property
    def prefix(self) -> str:
        """Base specification emitted when the hash flag is set."""
        return _BASE_PREFIXES[self]

    @property
    def digits(self) -> str:
        """Legal digit alphabet, as produced by a digit source (lowercase)."""
        return _BASE_DIGITS[self]


_BASE_PREFIXES = {
    Base.BINARY: "0b",
    Base.OCTAL: "0o",
    Base.DECIMAL: "0d",
    Base.LOWER_HEX: "0x",
    Base.UPPER_HEX: "0x",
}

_BASE_DIGITS = {
    Base.BINARY: "01",
    Base.OCTAL: "01234567",
    Base.DECIMAL: "0123456789",
    Base.LOWER_HEX: "0123456789abcdef",
    Base.UPPER_HEX: "0123456789abcdef",
}


@dataclass(frozen=True)
class Dynamic:
    """
    Per-call overrides for width, precision and spacing.

    A field left as None defers to the NumFmt configuration; a set field always
    wins over it, whether or not the configuration sets that field.

    Attributes:
        width: Minimum rendered width override.
        precision: Fractional digits override.
        spacing: Digits per group override; only relevant when a separator is set.

    Examples:
        >>> fmt = NumFmt.parse("#04x_2")
        >>> fmt.render(0)
        '0x00'
        >>> fmt.render_with(0, Dynamic.of_width(7))
        '0x00_00'
    """
    width: int | None = None
    precision: int | None = None
    spacing: int | None = None

    def __post_init__(self):
        for name in ("width", "precision", "spacing"):
            _validate_size(name, getattr(self, name), optional=True)

    @classmethod
    def of_width(cls, width: int) -> Self:
        """Override only the width."""
        return cls(width=width)

    @classmethod
    def of_precision(cls, precision: int) -> Self:
        """Override only the precision."""
        return cls(precision=precision)

    @classmethod
    def of_spacing(cls, spacing: int) -> Self:
        """Override only the spacing."""
        return cls(spacing=spacing)


# Methods --------------------------------------------------------------------------------------------------------------

def _validate_size(name: str, value, *, optional: bool = False):
    """Validate a non-negative int field (width, precision, spacing)."""
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        expected = "int | None" if optional else "int"
        raise TypeError(f"{name} must be {expected}, but got {fmt_type(value)}")
    if value < 0:
        raise ValueError(f"{name} must be int >= 0, but got {fmt_value(value)}")
