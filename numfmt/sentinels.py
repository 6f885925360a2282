"""
Sentinel object for telling an omitted argument apart from an explicit None.

`NumFmt.merge()` and `NumFmtBuilder` accept None as a meaningful value
(e.g. `precision=None` restores natural precision, `separator=None` disables
grouping), so "not provided" needs its own marker.

Example:
    >>> def merge(precision: int | None | UnsetType = UNSET):
    ...     precision = ifnotunset(precision, default=current.precision)
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, compared by identity and preserved through pickling.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check. If not UNSET, this value is returned.
        default: The fallback value when value is UNSET.

    Returns:
        The value itself if not UNSET, otherwise default.

    Example:
        >>> ifnotunset(UNSET, default=3)
        3
        >>> ifnotunset(None, default=3) is None
        True
    """
    return default if value is UNSET else value
