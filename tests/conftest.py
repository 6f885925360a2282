#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Callable, Iterable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Local Classes --------------------------------------------------------------------------------------------------------

class StubDigits:
    """
    Hand-built digit source: digits are given most significant first, as they read.

    Non-decimal bases are unsupported unless their digits are passed explicitly.
    """

    def __init__(self, whole: str = "", fraction: str | None = None, *,
                 negative: bool = False,
                 binary: str | None = None,
                 octal: str | None = None,
                 hex: str | None = None):
        self.whole = whole
        self.fraction = fraction
        self.negative = negative
        self._binary = binary
        self._octal = octal
        self._hex = hex

    @staticmethod
    def _stream(text: str | None) -> Iterable[str] | None:
        return None if text is None else iter(text[::-1])

    def binary(self):
        return self._stream(self._binary)

    def octal(self):
        return self._stream(self._octal)

    def hex(self):
        return self._stream(self._hex)

    def decimal(self):
        return iter(self.whole[::-1]), (None if self.fraction is None else iter(self.fraction))

    def is_negative(self) -> bool:
        return self.negative


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def stub_digits() -> Callable[..., StubDigits]:
    """Factory for custom DigitSource objects with fixed digit streams."""

    def _create(whole: str = "", fraction: str | None = None, **kwargs) -> StubDigits:
        return StubDigits(whole, fraction, **kwargs)

    return _create
