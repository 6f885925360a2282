"""
Digit sources: the capability a value needs in order to be rendered by NumFmt.

A digit source yields, per base, a lazy stream of lowercase digit characters
ordered away from the decimal point: least significant first for the integer
part, nearest-to-the-point first for the fractional part. Returning None from
binary()/octal()/hex() means the type never supports that base; it must not
depend on the value. Only the fractional decimal component may come and go
with the value (1.5 has one, 1.0 does not).

Sources work on magnitudes; the sign is reported separately by is_negative().
All formatting (sign, prefix, grouping, padding, case) is left to the renderer.

Built-in values are adapted with digit_source(). Custom types implement the
DigitSource protocol directly, typically by delegating to the helpers here:

    >>> class Cents:
    ...     def __init__(self, cents): self.cents = cents
    ...     def binary(self): return None
    ...     def octal(self): return None
    ...     def hex(self): return None
    ...     def decimal(self): return DecimalDigits(Decimal(self.cents).scaleb(-2)).decimal()
    ...     def is_negative(self): return self.cents < 0
    >>> NumFmt().render(Cents(-1999))
    '-19.99'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Iterator, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NonFiniteNumber
from .utils import fmt_type

DecimalParts = tuple[Iterator[str], Iterator[str] | None]


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class DigitSource(Protocol):
    """Protocol for values renderable by NumFmt."""

    def binary(self) -> Iterator[str] | None: ...

    def octal(self) -> Iterator[str] | None: ...

    def hex(self) -> Iterator[str] | None: ...

    def decimal(self) -> DecimalParts: ...

    def is_negative(self) -> bool: ...


class IntegerDigits:
    """
    Digit source for integers.

    Non-decimal bases render the magnitude of the value. When `bits` is given,
    negative values render instead as their two's complement bit pattern of that
    width, which is how fixed-width integers (e.g. NumPy int8..int64) expose
    their underlying bits:

        >>> "".join(reversed(list(IntegerDigits(-1, bits=8).hex())))
        'ff'
        >>> "".join(reversed(list(IntegerDigits(-1).hex())))
        '1'
    """

    __slots__ = ("value", "bits")

    def __init__(self, value: int, bits: int | None = None):
        self.value = operator.index(value)
        self.bits = bits

    def __repr__(self) -> str:
        return f"IntegerDigits({self.value!r}, bits={self.bits!r})"

    def binary(self) -> Iterator[str]:
        return radix_digits(self._bit_pattern(), 1)

    def octal(self) -> Iterator[str]:
        return radix_digits(self._bit_pattern(), 3)

    def hex(self) -> Iterator[str]:
        return radix_digits(self._bit_pattern(), 4)

    def decimal(self) -> DecimalParts:
        return decimal_int_digits(abs(self.value)), None

    def is_negative(self) -> bool:
        return self.value < 0

    def _bit_pattern(self) -> int:
        if self.value < 0 and self.bits:
            return self.value & ((1 << self.bits) - 1)
        return abs(self.value)


class DecimalDigits:
    """
    Digit source for decimal.Decimal, decimal base only.

    Trailing fractional zeros are significant for Decimal and are kept:
    Decimal("1.50") yields fractional digits "50".
    """

    __slots__ = ("value",)

    def __init__(self, value: Decimal):
        self.value = value

    def __repr__(self) -> str:
        return f"DecimalDigits({self.value!r})"

    def binary(self) -> None:
        return None

    def octal(self) -> None:
        return None

    def hex(self) -> None:
        return None

    def decimal(self) -> DecimalParts:
        if not self.value.is_finite():
            raise NonFiniteNumber(self.value)
        return split_decimal_text(format(abs(self.value), "f"))

    def is_negative(self) -> bool:
        return self.value < 0


class FloatDigits(DecimalDigits):
    """
    Digit source for binary floating point values, decimal base only.

    Digits come from the shortest text that round-trips the value, so 0.1
    renders as '0.1' rather than its exact binary expansion. NumPy floats
    use their own shortest text, so float32(1.1) also renders as '1.1'.
    """

    __slots__ = ("source",)

    def __init__(self, value: Any):
        self.source = value
        super().__init__(_float_to_decimal(value))

    def __repr__(self) -> str:
        return f"FloatDigits({self.source!r})"

    def decimal(self) -> DecimalParts:
        if not self.value.is_finite():
            raise NonFiniteNumber(self.source)
        return super().decimal()


class FractionDigits:
    """
    Digit source for fractions.Fraction, decimal base only.

    Fractional digits are produced lazily by long division. Expansions that
    never terminate, like Fraction(1, 3), run on until the renderer stops
    reading: at the precision when one is set, else after
    FmtConf.FRACTION_DIGITS significant digits. `max_digits` caps the stream
    at the source instead.
    """

    __slots__ = ("value", "max_digits")

    def __init__(self, value: Fraction, max_digits: int | None = None):
        self.value = value
        self.max_digits = max_digits

    def __repr__(self) -> str:
        return f"FractionDigits({self.value!r}, max_digits={self.max_digits!r})"

    def binary(self) -> None:
        return None

    def octal(self) -> None:
        return None

    def hex(self) -> None:
        return None

    def decimal(self) -> DecimalParts:
        magnitude = abs(self.value)
        whole, remainder = divmod(magnitude.numerator, magnitude.denominator)
        fraction = None
        if remainder:
            fraction = long_division_digits(remainder, magnitude.denominator, self.max_digits)
        return decimal_int_digits(whole), fraction

    def is_negative(self) -> bool:
        return self.value < 0


# Methods --------------------------------------------------------------------------------------------------------------

def digit_source(value: Any, *, allow_bool: bool = False) -> DigitSource:
    """
    Adapt a numeric value to a DigitSource.

    Detection Priority:
        1. Objects already implementing DigitSource → as is
        2. bool → rejected unless allow_bool (True→1, False→0)
        3. int → IntegerDigits (arbitrary precision, magnitude in non-decimal bases)
        4. float → FloatDigits
        5. Decimal → DecimalDigits, Fraction → FractionDigits
        6. __index__() → IntegerDigits (NumPy integers; fixed-width signed
           types keep their bit width for non-decimal bases)
        7. .item() → adapt the returned Python scalar (array/tensor scalars)
        8. __float__() → FloatDigits (NumPy floats, other float-likes)

    Raises:
        TypeError: unsupported type, or bool when allow_bool is False.

    Examples:
        >>> digit_source(42)
        IntegerDigits(42, bits=None)
        >>> digit_source(Fraction(1, 4))
        FractionDigits(Fraction(1, 4), max_digits=None)
    """
    if isinstance(value, DigitSource):
        return value

    if isinstance(value, bool):
        if allow_bool:
            return IntegerDigits(int(value))
        raise TypeError(f"boolean values not supported, got {value}. "
                        f"Set allow_bool=True to render booleans as int (True→1, False→0)")

    if isinstance(value, int):
        return IntegerDigits(value)

    if isinstance(value, float):
        return FloatDigits(value)

    if isinstance(value, Decimal):
        return DecimalDigits(value)

    if isinstance(value, Fraction):
        return FractionDigits(value)

    if hasattr(value, "__index__"):
        try:
            return IntegerDigits(operator.index(value), bits=_signed_bits(value))
        except TypeError:
            # __index__ exists but refuses, e.g. a float tensor
            pass

    if hasattr(value, "item") and callable(value.item):
        try:
            item = value.item()
        except (TypeError, ValueError):
            item = None
        if isinstance(item, (int, float)):
            if isinstance(item, float) and hasattr(value, "dtype"):
                # Keep the scalar's own shortest text, e.g. float32
                return FloatDigits(value)
            return digit_source(item, allow_bool=allow_bool)

    if hasattr(value, "__float__"):
        try:
            return FloatDigits(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(f"unsupported numeric type: {fmt_type(value)}. "
                    f"Expected int, float, Decimal, Fraction, a type implementing __index__, "
                    f"__float__ or .item(), or an object implementing the DigitSource protocol")


def radix_digits(n: int, bits_per_digit: int) -> Iterator[str]:
    """
    Lazily yield the digits of non-negative n in base 2**bits_per_digit.

    Least significant digit first; nothing at all for zero.

    Examples:
        >>> list(radix_digits(0b1101, 1))
        ['1', '0', '1', '1']
        >>> list(radix_digits(0xbeef, 4))
        ['f', 'e', 'e', 'b']
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    mask = (1 << bits_per_digit) - 1
    while n:
        yield "0123456789abcdef"[n & mask]
        n >>= bits_per_digit


def decimal_int_digits(n: int) -> Iterator[str]:
    """
    Lazily yield the decimal digits of non-negative n, least significant first.

    Works by repeated division, so huge ints are not limited by the
    interpreter's int-to-str digit limit.

    Examples:
        >>> list(decimal_int_digits(120))
        ['0', '2', '1']
        >>> list(decimal_int_digits(0))
        []
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    while n:
        n, digit = divmod(n, 10)
        yield "0123456789"[digit]


def long_division_digits(remainder: int, denominator: int, max_digits: int | None = None) -> Iterator[str]:
    """
    Lazily yield fractional digits of remainder/denominator (0 <= remainder < denominator).

    Stops when the expansion terminates or after max_digits digits; without
    max_digits a repeating expansion never stops.

    Examples:
        >>> "".join(long_division_digits(1, 8, 10))
        '125'
        >>> "".join(long_division_digits(1, 3, 5))
        '33333'
    """
    count = 0
    while remainder and (max_digits is None or count < max_digits):
        digit, remainder = divmod(remainder * 10, denominator)
        count += 1
        yield "0123456789"[digit]


def split_decimal_text(text: str) -> DecimalParts:
    """
    Split positional decimal text like '12.50' into digit iterators.

    The integer iterator runs from the ones digit outward and is empty for a
    zero integer part. The fractional iterator runs from the decimal point
    outward and is None when the text has no fractional digits or only a
    single '0', so '1.0' and '1' render the same.

    Examples:
        >>> left, right = split_decimal_text("12.5")
        >>> list(left), list(right)
        (['2', '1'], ['5'])
        >>> split_decimal_text("3.0")[1] is None
        True
    """
    whole, _, fraction = text.partition(".")
    whole = whole.lstrip("0")
    left = iter(whole[::-1])
    if not fraction or fraction == "0":
        return left, None
    return left, iter(fraction)


def _float_to_decimal(value: Any) -> Decimal:
    """Decimal of a float-like's shortest text, falling back to repr(float(value))."""
    # str() rather than repr(): NumPy 2 reprs look like 'np.float64(1.1)'
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(repr(float(value)))


def _signed_bits(value: Any) -> int | None:
    """Bit width of a fixed-width signed integer scalar (NumPy style dtype), else None."""
    dtype = getattr(value, "dtype", None)
    if dtype is None or getattr(dtype, "kind", None) != "i":
        return None
    itemsize = getattr(dtype, "itemsize", None)
    return itemsize * 8 if isinstance(itemsize, int) else None
