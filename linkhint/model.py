"""Core link model: viewport bounds, candidates, and surface variants.

Nothing here holds state across dispatcher calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Variant(str, Enum):
    """Kinds of rendered surfaces with their own link representation."""

    INFO = "info"
    HELP = "help"
    WOMAN = "woman"
    EWW = "eww"
    COMPILATION = "compilation"
    GNUS = "gnus"
    ORG = "org"
    CUSTOM = "custom"
    ADDRESS = "address"
    XREF = "xref"


@dataclass(frozen=True)
class Viewport:
    """Half-open ``[start, end)`` offset range currently visible."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid viewport [{self.start}, {self.end})")

    def contains(self, position: int) -> bool:
        return self.start <= position < self.end


@dataclass(frozen=True)
class Candidate:
    """One discoverable link, addressed purely by document offset.

    ``label`` is informational (display only) and never used for selection.
    """

    position: int
    label: str | None = None
