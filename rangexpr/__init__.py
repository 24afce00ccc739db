from importlib.resources import files

from .errors import InvalidBound, MalformedRangeLiteral, RangeError, UnboundedIteration
from .range import (
    Range,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeKind,
    RangeTo,
    RangeToInclusive,
)

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Range",
    "RangeFrom",
    "RangeTo",
    "RangeFull",
    "RangeInclusive",
    "RangeToInclusive",
    "RangeKind",
    "RangeError",
    "InvalidBound",
    "MalformedRangeLiteral",
    "UnboundedIteration",
    "docs",
]
