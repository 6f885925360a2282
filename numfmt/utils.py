"""
Diagnostic helpers shared across the package.

Used to build error messages that name the offending value or type without
risking a second failure inside an error path.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, prefix non-builtin classes with their module.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(1.5)
        'float'
        >>> from decimal import Decimal
        >>> class_name(Decimal(1), fully_qualified=True)
        'decimal.Decimal'
    """
    cls = obj if isinstance(obj, type) else obj.__class__

    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", None) or str(cls)
    module = getattr(cls, "__module__", None)

    if fully_qualified and module and module != "builtins":
        return f"{module}.{name}"
    return name


def fmt_type(obj: Any) -> str:
    """
    Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(str)
        '<type: str>'
    """
    return f"<type: {class_name(obj)}>"


def fmt_value(x: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Broken __repr__ methods are reported instead of raised, and long reprs are
    truncated with '...' so a hostile value never floods an error message.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("^0")
        "<str: '^0'>"
    """
    t = class_name(x)

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    if max_repr > 0 and len(base_repr) > max_repr:
        base_repr = base_repr[:max_repr] + "..."

    return f"<{t}: {base_repr}>"
