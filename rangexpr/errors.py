"""Exceptions raised by rangexpr."""


class RangeError(Exception):
    """Base class for all rangexpr errors."""


class InvalidBound(RangeError, ValueError):
    """A range was constructed with a bound it cannot hold."""

    def __init__(self, edge: str, value: object, detail: str | None = None):
        self.edge: str = edge
        self.value: object = value
        if detail is None:
            detail = f"must be a number, got {value!r}"
        super().__init__(
            f"Range {edge} bound {detail}.\n"
            f"Hint: use float('inf') or float('-inf') for an unbounded side:\n"
            f"  Range(0, float('inf'))  # same as RangeFrom(0)"
        )


class MalformedRangeLiteral(RangeError, ValueError):
    """A range literal did not match the `start..end` grammar."""

    def __init__(self, text: object):
        self.text: object = text
        super().__init__(
            f"Malformed range literal: {text!r}\n"
            f"Expected one of: 'a..b', 'a..=b', 'a..', '..b', '..=b', '..'\n"
            f"Examples:\n"
            f"  Range.from_pattern('2..5')   # 2, 3, 4\n"
            f"  Range.from_pattern('2..=5')  # 2, 3, 4, 5"
        )


class UnboundedIteration(RangeError, TypeError):
    """Iteration was requested over a range with an infinite bound."""

    def __init__(self, literal: str):
        self.literal: str = literal
        super().__init__(
            f"Cannot iterate over unbounded range {literal!r}.\n"
            f"Hint: only ranges with both bounds finite are iterable; "
            f"check is_exhaustive() first."
        )
