"""
Exceptions raised while rendering numbers or parsing format specs.

Render errors derive from FormatError and parse errors from ParseError; both
are ValueError subclasses so callers treating bad input generically keep
working. Each exception keeps its diagnostic payload as attributes.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_value


# Render Errors --------------------------------------------------------------------------------------------------------

class FormatError(ValueError):
    """Base class for errors raised while rendering a number."""


class IncompatibleAlignment(FormatError):
    """Zero padding requested together with left or center alignment."""

    def __init__(self, align: Any):
        self.align = align
        super().__init__(f"zero padding requires right or decimal alignment, got {fmt_value(str(align))}")


class UnsupportedBase(FormatError):
    """The value's digit source has no representation in the requested base."""

    def __init__(self, base: Any, type_name: str):
        self.base = base
        self.type_name = type_name
        super().__init__(f"{type_name} values cannot be rendered in {getattr(base, 'name', base).lower()} base")


class NonFiniteNumber(FormatError):
    """The value is nan or infinite and has no digits to render."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"non-finite value has no digit representation: {fmt_value(value)}")


class IllegalDigit(FormatError):
    """A digit source produced a character outside its base's alphabet."""

    def __init__(self, digit: Any, base: Any):
        self.digit = digit
        self.base = base
        super().__init__(f"illegal digit {fmt_value(digit)} for {getattr(base, 'name', base).lower()} base; "
                         f"check the value's digit source")


# Parse Errors ---------------------------------------------------------------------------------------------------------

class ParseError(ValueError):
    """Base class for format spec parse errors."""


class NoMatch(ParseError):
    """The format spec does not match the grammar."""

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(f"format spec does not match the grammar: {fmt_value(spec)}")


class InvalidIntegerField(ParseError):
    """A width, precision or spacing field is out of the representable range."""

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"failed to parse {field} integer value {text!r}")
