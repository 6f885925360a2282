"""
Rendering engine: turn a NumFmt, a value and optional Dynamic overrides into text.

The number is built as a body of digits, group separators and an optional
fraction, then wrapped with sign, base prefix and padding. Padding follows one
of three regimes, chosen by the configuration:

- zero mode (`zero=True`): '0' padding is part of the number. Sign and prefix
  count toward the width, the padding sits between prefix and digits and the
  padding zeros are grouped like real digits ("-03" renders -1 as "-01").
- explicit '0' fill: padding also sits between prefix and digits, but the
  sign does not count toward the width ("0>-3" renders -1 as "-001").
  The base prefix still does ("0>#6x" renders 255 as "0x00ff").
- any other fill is cosmetic: the width applies to the whole token and padding
  sits outside the sign (">5" renders -1 as "   -1").

DECIMAL alignment pads only in front, so that the decimal separator lands at
column `width`; values without a fraction align as with RIGHT.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from functools import lru_cache
from itertools import chain, islice, repeat
from typing import Any, Iterable, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .core import NumFmt
from .digits import DigitSource, digit_source
from .errors import IllegalDigit, IncompatibleAlignment, UnsupportedBase
from .options import Align, Base, Dynamic, FmtConf, Sign
from .utils import class_name

logger = logging.getLogger(__name__)

_ZERO_ALIGNMENTS = (Align.RIGHT, Align.DECIMAL)


# Methods --------------------------------------------------------------------------------------------------------------

def render(fmt: NumFmt, value: Any, dynamic: Dynamic | None = None) -> str:
    """
    Render a number according to a NumFmt configuration.

    Args:
        fmt: The formatting configuration.
        value: int, float, Decimal, Fraction, NumPy scalar or any DigitSource.
        dynamic: Per-call width/precision/spacing overrides. Set fields always
            win over the configuration.

    Returns:
        The formatted string. Width is a minimum; the number is never truncated.

    Raises:
        IncompatibleAlignment: zero flag combined with LEFT or CENTER alignment.
        UnsupportedBase: the value's type has no digits in the configured base.
        NonFiniteNumber: nan or infinite value.
        IllegalDigit: a custom DigitSource produced an out-of-alphabet digit.
        TypeError: value is not a supported numeric type.

    Examples:
        >>> render(NumFmt.parse("v05.3"), 1.2)
        '00001.200'
        >>> render(NumFmt.parse("#04x_2"), 0, Dynamic(width=7))
        '0x00_00'
        >>> render(NumFmt(separator="."), 12345)
        '12.345'
    """
    if fmt.zero and fmt.align not in _ZERO_ALIGNMENTS:
        logger.debug("zero padding rejected for alignment %r", fmt.align)
        raise IncompatibleAlignment(fmt.align)

    dynamic = dynamic if dynamic is not None else Dynamic()
    width = dynamic.width if dynamic.width is not None else fmt.width
    precision = dynamic.precision if dynamic.precision is not None else fmt.precision
    spacing = dynamic.spacing if dynamic.spacing is not None else fmt.spacing
    separator = fmt.separator if spacing else None

    source = digit_source(value)
    base = fmt.base
    int_digits, frac_digits = _base_digits(source, base, value)

    negative = base is Base.DECIMAL and source.is_negative()
    sign = _sign_char(fmt.sign, negative)
    prefix = base.prefix if fmt.hash else ""

    digits = list(_checked(int_digits, base)) or ["0"]
    if base is Base.UPPER_HEX:
        digits = [d.upper() for d in digits]

    fraction = _fraction(frac_digits, precision)
    tail = fmt.decimal_separator + fraction if fraction else ""

    if fmt.zero:
        budget = width - len(sign) - len(prefix)
        if fmt.align is Align.RIGHT:
            budget -= len(tail)
        digits = _zero_extended(digits, budget, separator, spacing)

    int_part = "".join(_grouped(digits, separator, spacing))

    numeric_pad = fmt.zero or fmt.fill == "0"
    # An explicit '0' fill leaves only the sign out of the width
    lead = prefix if numeric_pad and not fmt.zero else sign + prefix
    if fmt.align is Align.DECIMAL:
        front, rear = max(0, width - len(lead) - len(int_part)), 0
    else:
        front, rear = _padding(fmt.align, width - len(lead) - len(int_part) - len(tail))

    pad = "0" if fmt.zero else fmt.fill
    if numeric_pad:
        return sign + prefix + pad * front + int_part + tail + pad * rear
    return pad * front + sign + prefix + int_part + tail + pad * rear


@lru_cache(maxsize=256)
def _cached_spec(spec: str) -> NumFmt:
    return NumFmt.parse(spec)


def fmt(value: Any, spec: str = "", *,
        width: int | None = None,
        precision: int | None = None,
        spacing: int | None = None) -> str:
    """
    Render value with a format spec string, like the builtin format().

    Parsed specs are cached, so repeated calls with the same spec only pay
    for rendering.

    Examples:
        >>> fmt(123456789, ",")
        '123,456,789'
        >>> fmt(-1, "0>-3")
        '-001'
        >>> fmt(3.14159, ".2", width=6)
        '  3.14'
    """
    return render(_cached_spec(spec), value, Dynamic(width=width, precision=precision, spacing=spacing))


def _base_digits(source: DigitSource, base: Base, value: Any) -> tuple[Iterator[str], Iterator[str] | None]:
    """Integer and fractional digit streams of the source in base."""
    if base is Base.DECIMAL:
        return source.decimal()

    if base is Base.BINARY:
        digits = source.binary()
    elif base is Base.OCTAL:
        digits = source.octal()
    else:
        digits = source.hex()

    if digits is None:
        logger.debug("%s has no %s digits", class_name(value), base.name)
        raise UnsupportedBase(base, class_name(value, fully_qualified=True))
    return iter(digits), None


def _checked(digits: Iterable[str], base: Base) -> Iterator[str]:
    """Pass digits through, rejecting characters outside the base's alphabet."""
    legal = base.digits
    for digit in digits:
        if not (isinstance(digit, str) and len(digit) == 1 and digit in legal):
            raise IllegalDigit(digit, base)
        yield digit


def _sign_char(sign: Sign, negative: bool) -> str:
    if sign is Sign.PLUS_AND_MINUS:
        return "-" if negative else "+"
    return "-" if negative else ""


def _fraction(digits: Iterator[str] | None, precision: int | None) -> str:
    """
    Fractional digits, truncated or '0'-padded to precision when it is set.

    Without a precision the source's digits pass through, stopping after
    FmtConf.FRACTION_DIGITS significant digits so repeating expansions end.
    An empty result means no decimal separator is rendered at all.
    """
    if precision is None:
        return "" if digits is None else "".join(_significant(_checked(digits, Base.DECIMAL)))
    stream = _checked(digits, Base.DECIMAL) if digits is not None else iter(())
    return "".join(islice(chain(stream, repeat("0")), precision))


def _significant(digits: Iterable[str], limit: int = FmtConf.FRACTION_DIGITS) -> Iterator[str]:
    """Pass fractional digits through up to limit digits past the leading zeros."""
    seen = 0
    for digit in digits:
        yield digit
        if seen or digit != "0":
            seen += 1
            if seen >= limit:
                return


def _grouped_len(count: int, separator: str | None, spacing: int) -> int:
    if separator is None or count == 0:
        return count
    return count + (count - 1) // spacing


def _zero_extended(digits: list[str], budget: int, separator: str | None, spacing: int) -> list[str]:
    """
    Extend least-significant-first digits with '0' until their grouped form fills budget.

    A grouped part never starts with a separator: when the last column of the
    budget would hold one, an extra zero is added and the budget is exceeded by one.
    """
    count = len(digits)
    while _grouped_len(count, separator, spacing) < budget:
        count += 1
    return digits + ["0"] * (count - len(digits))


def _grouped(digits: list[str], separator: str | None, spacing: int) -> Iterator[str]:
    """
    Yield digits most significant first, with separator every spacing digits.

    Groups are counted from the ones digit, so only the leading group may be short.
    """
    count = len(digits)
    for index in range(count - 1, -1, -1):
        yield digits[index]
        if separator is not None and index and index % spacing == 0:
            yield separator


def _padding(align: Align, deficit: int) -> tuple[int, int]:
    """Front and rear pad counts for a width deficit."""
    deficit = max(0, deficit)
    if align is Align.LEFT:
        return 0, deficit
    if align is Align.CENTER:
        return deficit - deficit // 2, deficit // 2
    return deficit, 0
