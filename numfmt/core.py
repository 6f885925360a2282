"""
NumFmt: an immutable, runtime-configurable number formatter.

A NumFmt holds every formatting knob and nothing else; one instance renders any
number of values. Build it directly, through NumFmtBuilder, or by parsing a
format spec string:

    >>> NumFmt.parse(",").render(123456789)
    '123,456,789'
    >>> NumFmt(separator=".", decimal_separator=",", precision=2).render(12345)
    '12.345,00'
    >>> NumFmt.builder().zero(True).width(5).build().render(-1)
    '-0001'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, fields
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .options import Align, Base, Dynamic, FmtConf, Sign, _validate_size
from .sentinels import UNSET, UnsetType, ifnotunset
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumFmt:
    """
    Formatter configuration for numbers.

    Construction only checks field types; whether the zero flag is compatible
    with the alignment is checked on every render, since it is an error of the
    combination rather than of either field.

    Attributes:
        fill: Single pad character used when the number is narrower than `width`.
        align: Position within `width`, see Align. Accepts '<', '^', '>', 'v'.
        sign: Sign policy, see Sign. Accepts '-', '+'.
        hash: Emit a base prefix ('0b', '0o', '0d', '0x') before the digits.
        zero: Zero padding mode: pad with '0' between sign/prefix and digits,
            counting sign and prefix toward the width and grouping the padding
            zeros like real digits. Only valid with RIGHT or DECIMAL alignment.
        width: Minimum rendered width. Never truncates the number.
        precision: Exact number of fractional digits (truncating or padding
            with '0'); None passes the value's natural fractional digits through.
        base: Output base, see Base. Accepts 'b', 'o', 'd', 'x', 'X'.
        separator: Group separator character; None disables grouping.
        spacing: Digits per group when a separator is set; 0 disables grouping.
        decimal_separator: Character between integer and fractional digits.

    Examples:
        >>> NumFmt(width=5, align="^", fill="-").render(1)
        '--1--'
        >>> NumFmt(base="X", hash=True).render(255)
        '0xFF'
    """
    fill: str = FmtConf.FILL
    align: Align = Align.RIGHT
    sign: Sign = Sign.ONLY_MINUS
    hash: bool = False
    zero: bool = False
    width: int = 0
    precision: int | None = None
    base: Base = Base.DECIMAL
    separator: str | None = None
    spacing: int = FmtConf.SPACING
    decimal_separator: str = FmtConf.DECIMAL_SEPARATOR

    def __post_init__(self):
        """Validate field types and coerce spec characters to enums."""
        _validate_char("fill", self.fill)
        _validate_char("decimal_separator", self.decimal_separator)
        if self.separator is not None:
            _validate_char("separator", self.separator)

        object.__setattr__(self, "align", _coerce_enum(Align, "align", self.align))
        object.__setattr__(self, "sign", _coerce_enum(Sign, "sign", self.sign))
        object.__setattr__(self, "base", _coerce_enum(Base, "base", self.base))

        for name in ("hash", "zero"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be bool, but got {fmt_type(getattr(self, name))}")

        _validate_size("width", self.width)
        _validate_size("precision", self.precision, optional=True)
        _validate_size("spacing", self.spacing)

    @classmethod
    def builder(cls) -> "NumFmtBuilder":
        """Create a NumFmtBuilder starting from the defaults."""
        return NumFmtBuilder()

    @classmethod
    def parse(cls, spec: str) -> Self:
        """
        Parse a NumFmt from a format spec string.

        See numfmt.parse.parse_spec for the grammar.

        Raises:
            NoMatch: The spec does not match the grammar.
            InvalidIntegerField: A numeric field is out of range.
        """
        from .parse import parse_spec
        return parse_spec(spec)

    def merge(self,
              fill: str | UnsetType = UNSET,
              align: Align | str | UnsetType = UNSET,
              sign: Sign | str | UnsetType = UNSET,
              hash: bool | UnsetType = UNSET,
              zero: bool | UnsetType = UNSET,
              width: int | UnsetType = UNSET,
              precision: int | None | UnsetType = UNSET,
              base: Base | str | UnsetType = UNSET,
              separator: str | None | UnsetType = UNSET,
              spacing: int | UnsetType = UNSET,
              decimal_separator: str | UnsetType = UNSET,
              ) -> "NumFmt":
        """
        Create a new NumFmt instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance;
        None is a real value for `precision` and `separator`.

        Returns:
            New NumFmt instance with merged configuration.
        """
        overrides = dict(fill=fill, align=align, sign=sign, hash=hash, zero=zero, width=width,
                         precision=precision, base=base, separator=separator, spacing=spacing,
                         decimal_separator=decimal_separator)
        kwargs = {name: ifnotunset(value, default=getattr(self, name))
                  for name, value in overrides.items()}
        return NumFmt(**kwargs)

    def to_builder(self) -> "NumFmtBuilder":
        """Create a NumFmtBuilder preloaded with this configuration."""
        return NumFmtBuilder(self)

    def render(self, value: Any) -> str:
        """
        Render value according to this configuration.

        Raises:
            IncompatibleAlignment: zero flag combined with LEFT or CENTER alignment.
            UnsupportedBase: the value's type has no digits in the configured base.
            NonFiniteNumber: nan or infinite value.
            TypeError: value is not a supported numeric type.
        """
        return self.render_with(value, None)

    def render_with(self, value: Any, dynamic: Dynamic | None) -> str:
        """
        Render value according to this configuration and per-call overrides.

        Dynamic values always override this instance's width, precision and spacing:

            >>> fmt = NumFmt.parse("#04x_2")
            >>> fmt.render_with(0, Dynamic(width=7))
            '0x00_00'
        """
        from .render import render
        return render(self, value, dynamic)


class NumFmtBuilder:
    """
    Fluent builder for NumFmt.

    Every setter returns the builder; build() produces the immutable NumFmt.
    Validation happens in build(), through NumFmt itself.

    Examples:
        >>> fmt = NumFmt.builder().separator(".").decimal_separator(",").precision(2).build()
        >>> fmt.render(12345)
        '12.345,00'
    """

    def __init__(self, fmt: NumFmt | None = None):
        source = fmt if fmt is not None else NumFmt()
        self._fields = {f.name: getattr(source, f.name) for f in fields(NumFmt)}

    def __repr__(self) -> str:
        items = ", ".join(f"{name}={value!r}" for name, value in self._fields.items())
        return f"NumFmtBuilder({items})"

    def build(self) -> NumFmt:
        """Build a NumFmt instance from the current settings."""
        return NumFmt(**self._fields)

    def fill(self, fill: str) -> Self:
        """Pad character used when width exceeds the rendered number."""
        self._fields["fill"] = fill
        return self

    def align(self, align: Align | str) -> Self:
        """Alignment within the allotted width, see Align."""
        self._fields["align"] = align
        return self

    def sign(self, sign: Sign | str) -> Self:
        """Sign policy, see Sign."""
        self._fields["sign"] = sign
        return self

    def hash(self, enabled: bool) -> Self:
        """Emit a base prefix before the number."""
        self._fields["hash"] = enabled
        return self

    def zero(self, enabled: bool) -> Self:
        """
        Engage or clear zero padding mode.

        Engaging sets the fill to '0'; clearing it also resets the fill to the default,
        so a custom fill set earlier is lost either way.
        """
        self._fields["zero"] = enabled
        self._fields["fill"] = "0" if enabled else FmtConf.FILL
        return self

    def width(self, width: int) -> Self:
        """Minimum rendered width."""
        self._fields["width"] = width
        return self

    def precision(self, precision: int | None) -> Self:
        """Exact fractional digits, or None for the value's natural digits."""
        self._fields["precision"] = precision
        return self

    def base(self, base: Base | str) -> Self:
        """Output base, see Base."""
        self._fields["base"] = base
        return self

    def separator(self, separator: str | None) -> Self:
        """Group separator, or None to disable grouping."""
        self._fields["separator"] = separator
        return self

    def spacing(self, spacing: int) -> Self:
        """Digits per group."""
        self._fields["spacing"] = spacing
        return self

    def decimal_separator(self, decimal_separator: str) -> Self:
        """
        Character between integer and fractional digits.

        Combined with separator this supports e.g. German number formats,
        which group with '.' and use ',' as the decimal separator.
        """
        self._fields["decimal_separator"] = decimal_separator
        return self


# Methods --------------------------------------------------------------------------------------------------------------

def _coerce_enum(enum_cls, name: str, value):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise TypeError(f"{name} must be {enum_cls.__name__} or str, but got {fmt_type(value)}")
    try:
        return enum_cls(value)
    except ValueError:
        expected = ", ".join(repr(m.value) for m in enum_cls)
        raise ValueError(f"{name} expected one of {expected} but found {fmt_value(value)}") from None


def _validate_char(name: str, value):
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a single character str, but got {fmt_type(value)}")
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, but got {fmt_value(value)}")
