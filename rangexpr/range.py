"""Integer ranges in the `start..end` literal style.

`Range` is the one value type. The variants (`RangeFrom`, `RangeTo`,
`RangeFull`, `RangeInclusive`, `RangeToInclusive`) only pin bounds at
construction; the unbounded ones also drop the iteration capability.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger
from typing_extensions import Self, override

from rangexpr.errors import InvalidBound, UnboundedIteration
from rangexpr.literal import format_bound, parse
from rangexpr.util import (
    NEG_INF,
    POS_INF,
    SLICE_BEFORE_START,
    SLICE_PAST_END,
    fits_literal,
    is_finite,
    is_nan,
    is_safe_integer,
    normalize_bound,
)


class RangeKind(Enum):
    """Shape of a range, derived from its bounds and inclusive flag."""

    BOUNDED = "bounded"
    FROM = "from"
    TO = "to"
    FULL = "full"
    INCLUSIVE = "inclusive"
    TO_INCLUSIVE = "to_inclusive"


@dataclass(frozen=True, init=False, repr=False)
class Range:
    """The range `start..end` holds every integer with `start <= x < end`.

    With `inclusive=True` it is `start..=end` and holds `end` as well. The end
    is always stored in exclusive form, so an inclusive range keeps
    `end + 1` and remembers the flag for display and membership.

    It is empty when `start >= end` (using the stored end).
    """

    start: int | float
    end: int | float
    inclusive: bool

    def __init__(self, start: int | float, end: int | float, inclusive: bool = False):
        """
        Args:
            start: Lower bound, included. Use float("-inf") for unbounded.
            end: Upper bound, excluded unless `inclusive`. Use float("inf")
                for unbounded.
            inclusive: Whether `end` itself belongs to the range

        Raises:
            InvalidBound: If either bound is NaN or too long to write out
            TypeError: If either bound is not a number
        """
        if is_nan(start):
            raise InvalidBound("start", start)
        if is_nan(end):
            raise InvalidBound("end", end)

        start = normalize_bound(start)
        end = normalize_bound(end)

        for edge, value in (("start", start), ("end", end)):
            if not fits_literal(value):
                raise InvalidBound(
                    edge, value, detail="has too many digits to write as a literal"
                )

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end + 1 if inclusive else end)
        object.__setattr__(self, "inclusive", bool(inclusive))

    @classmethod
    def _from_stored(
        cls, start: int | float, end: int | float, inclusive: bool
    ) -> Self:
        """Build an instance of `cls` from already-normalized fields."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "start", start)
        object.__setattr__(instance, "end", end)
        object.__setattr__(instance, "inclusive", inclusive)
        return instance

    @classmethod
    def from_pattern(cls, text: str) -> "Range":
        """Parse a range literal such as `2..5`, `2..=5`, `2..`, `..5` or `..`.

        The variant returned matches the literal's shape, e.g. `"3.."` gives a
        `RangeFrom`, so only fully bounded literals are iterable.

        Raises:
            MalformedRangeLiteral: If text does not follow the literal grammar
        """
        parts = parse(text)
        open_start = parts.start == NEG_INF
        open_end = parts.end == POS_INF

        if open_start and open_end and not parts.inclusive:
            return RangeFull()
        if open_start:
            if parts.inclusive:
                return RangeToInclusive(parts.end)
            return RangeTo(parts.end)
        if open_end:
            # `a..=` holds no extra point past an infinite end
            return RangeFrom(parts.start)
        if parts.inclusive:
            return RangeInclusive(parts.start, parts.end)
        return Range(parts.start, parts.end)

    @property
    def kind(self) -> RangeKind:
        if self.start == NEG_INF:
            if self.end == POS_INF:
                return RangeKind.FULL
            return RangeKind.TO_INCLUSIVE if self.inclusive else RangeKind.TO
        if self.end == POS_INF:
            return RangeKind.FROM
        return RangeKind.INCLUSIVE if self.inclusive else RangeKind.BOUNDED

    @property
    def _shown_end(self) -> int | float:
        """The end as it was requested: stored end minus one when inclusive."""
        return self.end - 1 if self.inclusive else self.end

    def get_bounds(self) -> tuple[int | None, int | None]:
        """Return `(start, end)` as a half-open window for slicing.

        Unbounded sides come back as values `slice()` understands, so
        `seq[slice(*r.get_bounds())]` works for every variant.
        """
        start: int | None
        end: int | None

        if self.start == NEG_INF:
            start = None
        elif self.start == POS_INF:
            start = SLICE_PAST_END
        else:
            start = int(self.start)

        if self.end == POS_INF:
            end = None
        elif self.end == NEG_INF:
            end = SLICE_BEFORE_START
        else:
            end = int(self.end)

        return start, end

    def as_slice(self) -> slice:
        return slice(*self.get_bounds())

    def contains(self, item: Any) -> bool:
        """Return True if `item` lies in the range.

        Values that are not safe integers never match; anything other than
        NaN is also reported through the logger.
        """
        if is_nan(item):
            return False
        if not is_safe_integer(item):
            logger.warning(
                "Range {} cannot contain {!r}: expected a safe integer", self, item
            )
            return False

        if self.inclusive:
            return self.start <= item <= self._shown_end
        return self.start <= item < self.end

    def is_empty(self) -> bool:
        return not (self.start < self.end)

    def is_exhaustive(self) -> bool:
        """True if neither bound is infinite."""
        return is_finite(self.start) and is_finite(self.end)

    def is_inclusive(self) -> bool:
        return self.inclusive

    def clone(self) -> Self:
        """Return an independent range of the same variant with the same bounds."""
        return type(self)._from_stored(self.start, self.end, self.inclusive)

    def __copy__(self) -> Self:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.clone()

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[int]:
        """Yield `start, start + 1, ..., end - 1`, fresh on every call.

        Raises:
            UnboundedIteration: If either bound is infinite
        """
        if not self.is_exhaustive():
            raise UnboundedIteration(str(self))
        return iter(range(int(self.start), int(self.end)))

    @override
    def __str__(self) -> str:
        """Canonical literal, e.g. `1..5`, `1..=4`, `3..` or `..`."""
        eq = "=" if self.inclusive else ""
        return f"{format_bound(self.start)}..{eq}{format_bound(self._shown_end)}"

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class RangeFrom(Range):
    """`start..`: every integer from `start` up."""

    __iter__ = None  # type: ignore[assignment]

    def __init__(self, start: int | float):
        super().__init__(start, POS_INF)


class RangeTo(Range):
    """`..end`: every integer below `end`."""

    __iter__ = None  # type: ignore[assignment]

    def __init__(self, end: int | float):
        super().__init__(NEG_INF, end)


class RangeFull(Range):
    """`..`: every integer."""

    __iter__ = None  # type: ignore[assignment]

    def __init__(self):
        super().__init__(NEG_INF, POS_INF)


class RangeInclusive(Range):
    """`start..=end`: both bounds included."""

    def __init__(self, start: int | float, end: int | float):
        super().__init__(start, end, inclusive=True)


class RangeToInclusive(Range):
    """`..=end`: every integer up to and including `end`."""

    __iter__ = None  # type: ignore[assignment]

    def __init__(self, end: int | float):
        super().__init__(NEG_INF, end, inclusive=True)
