from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, NewType

# ---- Aliases for clarity ----
InertPredicate = Callable[[int], bool]  # offset -> lies inside a comment
LanguageId = NewType("LanguageId", str)  # "AngularJS", ...
HostKind = Literal["text", "attribute"]


@dataclass(frozen=True)
class Region:
    """
    Half-open offset range [start, end) into a text buffer.
    """
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def shift(self, delta: int) -> Region:
        return Region(self.start + delta, self.end + delta)

    def substring(self, text: str) -> str:
        return text[self.start:self.end]

    def __repr__(self) -> str:
        return f"Region({self.start}, {self.end})"


@dataclass(frozen=True)
class DelimiterPair:
    """
    Start/end markers bounding an embedded expression.

    An empty marker on either side means injection is disabled.
    """
    start: str
    end: str

    @property
    def enabled(self) -> bool:
        return bool(self.start) and bool(self.end)


__all__ = [
    "InertPredicate",
    "LanguageId",
    "HostKind",
    "Region",
    "DelimiterPair",
]
