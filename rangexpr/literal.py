"""Range literal grammar.

Literals follow the `start..end` style: `a..b` is half-open, `a..=b` includes
`b`, and either bound may be left out to mean unbounded on that side.
"""

import re
from dataclasses import dataclass

from rangexpr.errors import MalformedRangeLiteral
from rangexpr.util import NEG_INF, POS_INF

RANGE_LITERAL = re.compile(r"(-?[0-9]+)?\.\.(=?)(-?[0-9]+)?")


@dataclass(frozen=True)
class LiteralParts:
    """Bounds of a parsed literal, before normalization.

    Attributes:
        start: Lower bound, -inf when the literal leaves it out
        end: Upper bound as written, +inf when the literal leaves it out
        inclusive: True when the literal uses `..=`
    """

    start: int | float
    end: int | float
    inclusive: bool


def parse(text: str) -> LiteralParts:
    """Split a range literal into its bounds.

    Raises:
        MalformedRangeLiteral: If text is not a string, does not match, or
            holds a bound too long to convert
    """
    if not isinstance(text, str):
        raise MalformedRangeLiteral(text)

    match = RANGE_LITERAL.fullmatch(text.strip())
    if match is None:
        raise MalformedRangeLiteral(text)

    start, eq, end = match.groups()
    try:
        return LiteralParts(
            start=NEG_INF if start is None else int(start),
            end=POS_INF if end is None else int(end),
            inclusive=eq == "=",
        )
    except ValueError as exc:
        # past sys.get_int_max_str_digits()
        raise MalformedRangeLiteral(text) from exc


def format_bound(value: int | float) -> str:
    """Render a bound for a literal; infinities render as nothing."""
    if value in (POS_INF, NEG_INF):
        return ""
    return str(value)
