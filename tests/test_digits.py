#
# NUMFMT - Digit Source Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal
from fractions import Fraction
from itertools import islice

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.digits import (
    DecimalDigits,
    DigitSource,
    FloatDigits,
    FractionDigits,
    IntegerDigits,
    decimal_int_digits,
    digit_source,
    long_division_digits,
    radix_digits,
    split_decimal_text,
)
from numfmt.errors import NonFiniteNumber


# Local Classes & Methods ----------------------------------------------------------------------------------------------

def read(digits) -> str:
    """Least-significant-first integer digits as they read."""
    return "".join(reversed(list(digits)))


class IndexOnly:
    def __init__(self, value):
        self.value = value

    def __index__(self):
        return self.value


class FloatOnly:
    def __float__(self):
        return 2.5


class ItemScalar:
    def __init__(self, value):
        self.value = value

    def item(self):
        return self.value


class BrokenFloat:
    def __float__(self):
        raise ValueError("no float for you")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDigitSourceDetection:
    @pytest.mark.parametrize(
        "value, expected_type",
        [
            pytest.param(42, IntegerDigits, id="int"),
            pytest.param(-3, IntegerDigits, id="negative-int"),
            pytest.param(1.5, FloatDigits, id="float"),
            pytest.param(Decimal("1.5"), DecimalDigits, id="decimal"),
            pytest.param(Fraction(1, 2), FractionDigits, id="fraction"),
            pytest.param(IndexOnly(7), IntegerDigits, id="index"),
            pytest.param(FloatOnly(), FloatDigits, id="float-protocol"),
            pytest.param(ItemScalar(3), IntegerDigits, id="item-int"),
            pytest.param(ItemScalar(0.5), FloatDigits, id="item-float"),
        ],
    )
    def test_detection(self, value, expected_type):
        assert type(digit_source(value)) is expected_type

    def test_existing_source_passes_through(self, stub_digits):
        source = stub_digits("1")
        assert isinstance(source, DigitSource)
        assert digit_source(source) is source

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(True, id="true"),
            pytest.param(False, id="false"),
            pytest.param(ItemScalar(True), id="item-bool"),
        ],
    )
    def test_bool_rejected(self, value):
        with pytest.raises(TypeError, match="boolean values not supported"):
            digit_source(value)

    def test_bool_allowed(self):
        source = digit_source(True, allow_bool=True)
        assert read(source.decimal()[0]) == "1"

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("12", id="str"),
            pytest.param(None, id="none"),
            pytest.param(object(), id="object"),
            pytest.param(ItemScalar("x"), id="item-str"),
        ],
    )
    def test_unsupported(self, value):
        with pytest.raises(TypeError, match="unsupported numeric type"):
            digit_source(value)

    def test_float_conversion_failure(self):
        with pytest.raises(TypeError, match="cannot convert"):
            digit_source(BrokenFloat())

    def test_repr(self):
        assert repr(digit_source(42)) == "IntegerDigits(42, bits=None)"
        assert repr(digit_source(Fraction(1, 4))) == "FractionDigits(Fraction(1, 4), max_digits=None)"


class TestIntegerDigits:
    @pytest.mark.parametrize(
        "value, binary, octal, hex_, decimal",
        [
            pytest.param(0, "", "", "", "", id="zero"),
            pytest.param(10, "1010", "12", "a", "10", id="ten"),
            pytest.param(255, "11111111", "377", "ff", "255", id="byte"),
            pytest.param(-255, "11111111", "377", "ff", "255", id="negative-magnitude"),
        ],
    )
    def test_digits(self, value, binary, octal, hex_, decimal):
        source = IntegerDigits(value)
        assert read(source.binary()) == binary
        assert read(source.octal()) == octal
        assert read(source.hex()) == hex_
        whole, fraction = source.decimal()
        assert read(whole) == decimal
        assert fraction is None

    @pytest.mark.parametrize(
        "value, bits, hex_",
        [
            pytest.param(-1, 8, "ff", id="int8-minus-one"),
            pytest.param(-128, 8, "80", id="int8-min"),
            pytest.param(-2, 16, "fffe", id="int16"),
            pytest.param(5, 8, "5", id="positive-unchanged"),
        ],
    )
    def test_twos_complement(self, value, bits, hex_):
        assert read(IntegerDigits(value, bits=bits).hex()) == hex_

    def test_decimal_ignores_bits(self):
        source = IntegerDigits(-1, bits=8)
        assert read(source.decimal()[0]) == "1"
        assert source.is_negative()

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            IntegerDigits(1.5)


class TestFloatAndDecimalDigits:
    @pytest.mark.parametrize(
        "value, whole, fraction",
        [
            pytest.param(1.5, "1", "5", id="simple"),
            pytest.param(0.1, "", "1", id="shortest-repr"),
            pytest.param(1.0, "1", None, id="integral"),
            pytest.param(-2.25, "2", "25", id="negative"),
            pytest.param(1e22, "1" + "0" * 22, None, id="exponent"),
        ],
    )
    def test_float(self, value, whole, fraction):
        left, right = FloatDigits(value).decimal()
        assert read(left) == whole
        assert (None if right is None else "".join(right)) == fraction

    def test_decimal_keeps_trailing_zeros(self):
        left, right = DecimalDigits(Decimal("12.50")).decimal()
        assert read(left) == "12"
        assert "".join(right) == "50"

    @pytest.mark.parametrize(
        "source",
        [
            pytest.param(FloatDigits(float("nan")), id="float-nan"),
            pytest.param(FloatDigits(float("inf")), id="float-inf"),
            pytest.param(DecimalDigits(Decimal("Infinity")), id="decimal-inf"),
        ],
    )
    def test_non_finite(self, source):
        with pytest.raises(NonFiniteNumber):
            source.decimal()

    def test_non_finite_reports_source_value(self):
        with pytest.raises(NonFiniteNumber) as exc_info:
            FloatDigits(float("inf")).decimal()
        assert exc_info.value.value == float("inf")

    def test_only_decimal_base(self):
        source = FloatDigits(1.5)
        assert source.binary() is None
        assert source.octal() is None
        assert source.hex() is None

    def test_is_negative(self):
        assert FloatDigits(-0.5).is_negative()
        assert not FloatDigits(-0.0).is_negative()
        assert DecimalDigits(Decimal("-1")).is_negative()


class TestFractionDigits:
    @pytest.mark.parametrize(
        "value, whole, fraction",
        [
            pytest.param(Fraction(7, 4), "1", "75", id="terminating"),
            pytest.param(Fraction(-1, 8), "", "125", id="negative"),
            pytest.param(Fraction(4, 2), "2", None, id="integral"),
        ],
    )
    def test_digits(self, value, whole, fraction):
        left, right = FractionDigits(value).decimal()
        assert read(left) == whole
        assert (None if right is None else "".join(right)) == fraction

    def test_repeating_capped(self):
        _, right = FractionDigits(Fraction(2, 3), max_digits=5).decimal()
        assert "".join(right) == "66666"

    def test_repeating_unbounded_by_default(self):
        _, right = FractionDigits(Fraction(2, 3)).decimal()
        assert "".join(islice(right, 40)) == "6" * 40

    def test_only_decimal_base(self):
        assert FractionDigits(Fraction(1, 2)).hex() is None


class TestHelpers:
    def test_radix_digits(self):
        assert list(radix_digits(0b1101, 1)) == ["1", "0", "1", "1"]
        assert list(radix_digits(0xbeef, 4)) == ["f", "e", "e", "b"]
        assert list(radix_digits(0, 3)) == []

    def test_radix_digits_negative(self):
        with pytest.raises(ValueError):
            list(radix_digits(-1, 4))

    def test_decimal_int_digits_huge(self):
        """Huge ints are not limited by the int-to-str digit limit."""
        n = 10 ** 5000
        assert read(decimal_int_digits(n)) == "1" + "0" * 5000

    def test_long_division(self):
        assert "".join(long_division_digits(1, 8, 10)) == "125"
        assert "".join(long_division_digits(1, 7, 12)) == "142857142857"
        assert "".join(long_division_digits(0, 3, 5)) == ""

    def test_long_division_unbounded(self):
        assert "".join(islice(long_division_digits(1, 3), 50)) == "3" * 50

    @pytest.mark.parametrize(
        "text, whole, fraction",
        [
            pytest.param("12.5", "12", "5", id="fraction"),
            pytest.param("3.0", "3", None, id="single-zero"),
            pytest.param("3.00", "3", "00", id="significant-zeros"),
            pytest.param("0.25", "", "25", id="leading-zero"),
            pytest.param("7", "7", None, id="integer"),
        ],
    )
    def test_split_decimal_text(self, text, whole, fraction):
        left, right = split_decimal_text(text)
        assert read(left) == whole
        assert (None if right is None else "".join(right)) == fraction
