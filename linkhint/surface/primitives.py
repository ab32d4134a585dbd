"""Host-surface operations consumed by collectors and activators.

A surface supplies only the primitives its variant needs; every field other
than ``viewport`` is optional. Navigation primitives take a position and
return the first stop strictly after it (or ``None``); some hosts wrap back to
the top of the document, so callers must guard against cycles themselves.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import PrimitiveUnavailable
from ..model import Viewport

# Bracket links (``[[target]]`` / ``[[target][description]]``), angle links,
# and plain links with a known scheme.
ORG_LINK_RE = re.compile(
    r"\[\[(?P<target>[^][\n]+)\](?:\[(?P<description>[^][\n]+)\])?\]"
    r"|<(?P<angle>(?:https?|ftp|file|mailto|doi|info|man|woman|help):[^>\n]+)>"
    r"|(?P<plain>\b(?:https?|ftp|file|mailto|doi):[^\s\][<>()]+)"
)


@dataclass(frozen=True)
class Decoration:
    """Transient annotation over ``[start, end)`` that is not part of the text."""

    start: int
    end: int
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SurfacePrimitives:
    """Mode-native operations exposed by one host surface."""

    viewport: Callable[[], Viewport]
    # Navigation.
    next_reference: Callable[[int], int | None] | None = None
    next_widget: Callable[[int], int | None] | None = None
    next_button: Callable[[int], int | None] | None = None
    # Probes.
    property_at: Callable[[int, str], Any] | None = None
    next_property_change: Callable[[int, str, int], int | None] | None = None
    peek_target: Callable[[int], str | None] | None = None
    is_hidden: Callable[[int], bool] | None = None
    text_between: Callable[[int, int], str] | None = None
    decorations_overlapping: Callable[[int, int], Iterable[Decoration]] | None = None
    link_pattern: re.Pattern[str] = ORG_LINK_RE
    # Activation.
    follow_nearest: Callable[[int], bool] | None = None
    activate_at: Callable[[int], object] | None = None
    open_at: Callable[[int], object] | None = None

    def require(self, name: str) -> Callable[..., Any]:
        """Return primitive ``name`` or raise ``PrimitiveUnavailable``."""
        primitive = getattr(self, name, None)
        if primitive is None or not callable(primitive):
            raise PrimitiveUnavailable(name)
        return primitive
