"""
Format spec parser.

## Grammar

The grammar derives substantially from Python's format spec mini-language:

    format_spec := [[fill]align][sign]['#'][['0']width]['.' precision][base][separator[spacing]]
    fill        := any single character, only recognized when followed by align
    align       := '<' | '^' | '>' | 'v'
    sign        := '-' | '+'
    width       := integer not beginning with '0'
    precision   := integer
    base        := 'b' | 'o' | 'd' | 'x' | 'X'
    separator   := '_' | ',' | ' '
    spacing     := integer

There is no syntax for dynamic width, precision or spacing; pass a Dynamic to
NumFmt.render_with() instead, it always overrides the parsed values.

An empty spec is valid and yields the defaults. A '0' directly before the
width engages zero padding, which differs from an explicit '0' fill in that
the sign counts toward the width:

    >>> parse_spec("-03").render(-1)
    '-01'
    >>> parse_spec("0>-3").render(-1)
    '-001'

It is not possible to disable grouping or to pick a separator outside '_', ','
and ' ' through a spec; use NumFmt fields or NumFmtBuilder for that.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .core import NumFmt
from .errors import InvalidIntegerField, NoMatch
from .options import FmtConf
from .utils import fmt_type

logger = logging.getLogger(__name__)

SPEC_RE = re.compile(
    r"""
    (?:
        (?P<fill>.)?
        (?P<align>[<^>v])
    )?
    (?P<sign>[-+])?
    (?P<hash>\#)?
    (?:
        (?P<zero>0)?
        (?P<width>[1-9][0-9]*)
    )?
    (?:
        \.
        (?P<precision>[0-9]+)
    )?
    (?P<base>[bodxX])?
    (?:
        (?P<separator>[_,\ ])
        (?P<spacing>[0-9]+)?
    )?
    """,
    re.VERBOSE | re.DOTALL,
)


# Methods --------------------------------------------------------------------------------------------------------------

def parse_spec(spec: str) -> NumFmt:
    """
    Parse a NumFmt from a format spec string.

    Args:
        spec: Format spec, see module docs for the grammar.

    Returns:
        The parsed NumFmt.

    Raises:
        TypeError: spec is not a str.
        NoMatch: spec does not match the grammar.
        InvalidIntegerField: width, precision or spacing exceeds FmtConf.MAX_FIELD.

    Examples:
        >>> parse_spec("") == NumFmt()
        True
        >>> parse_spec("-v-#012.3d").render(-1.5)
        '-0d000000001.500'
    """
    if not isinstance(spec, str):
        raise TypeError(f"format spec must be str, but got {fmt_type(spec)}")

    match = SPEC_RE.fullmatch(spec)
    if match is None:
        logger.debug("format spec %r does not match the grammar", spec)
        raise NoMatch(spec)

    groups = match.groupdict()
    builder = NumFmt.builder()

    if groups["align"] is not None:
        builder.align(groups["align"])
    if groups["fill"] is not None:
        builder.fill(groups["fill"])
    if groups["sign"] is not None:
        builder.sign(groups["sign"])
    if groups["hash"] is not None:
        builder.hash(True)
    if groups["zero"] is not None:
        builder.zero(True)
    if groups["width"] is not None:
        builder.width(_int_field("width", groups["width"]))
    if groups["precision"] is not None:
        builder.precision(_int_field("precision", groups["precision"]))
    if groups["base"] is not None:
        builder.base(groups["base"])
    builder.separator(groups["separator"])
    if groups["spacing"] is not None:
        builder.spacing(_int_field("spacing", groups["spacing"]))

    return builder.build()


def _int_field(field: str, text: str) -> int:
    """Parse a numeric spec field, rejecting values beyond FmtConf.MAX_FIELD."""
    # Length check first, so absurdly long digit runs never reach int()
    significant = text.lstrip("0") or "0"
    if len(significant) > len(str(FmtConf.MAX_FIELD)) or int(significant) > FmtConf.MAX_FIELD:
        logger.debug("%s field %r out of range", field, text)
        raise InvalidIntegerField(field, text)
    return int(significant)
