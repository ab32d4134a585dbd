"""In-memory document model with tagged text runs, folds, and overlays.

Acts as a reference host for the link collectors: it answers the same
probes an editor buffer would (tag value at a position, next tag change,
folding, overlays in a range) without any rendering concerns.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..model import Viewport
from .primitives import Decoration, SurfacePrimitives

INFO_REF_TAG = "info-ref"
WIDGET_TAG = "widget"
BUTTON_TAG = "button"


@dataclass(frozen=True)
class _TaggedRun:
    start: int
    end: int
    value: Any


class Buffer:
    """Plain text plus tagged runs, hidden ranges, and transient overlays.

    Later ``put_property`` calls win where runs of the same tag overlap.
    Overlays are enumerated newest first, like an editor's overlay list.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._runs: dict[str, list[_TaggedRun]] = {}
        self._folds: list[tuple[int, int]] = []
        self._overlays: list[Decoration] = []

    def __len__(self) -> int:
        return len(self.text)

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"range [{start}, {end}) outside buffer of length {len(self.text)}")

    def put_property(self, start: int, end: int, tag: str, value: Any) -> None:
        """Tag ``[start, end)`` with ``value`` (``None`` clears the tag there)."""
        self._check_range(start, end)
        if start == end:
            return
        self._runs.setdefault(tag, []).append(_TaggedRun(start, end, value))

    def get_property(self, position: int, tag: str) -> Any:
        """Return the value of ``tag`` at ``position`` or ``None``."""
        for run in reversed(self._runs.get(tag, ())):
            if run.start <= position < run.end:
                return run.value
        return None

    def next_property_change(self, position: int, tag: str, limit: int | None = None) -> int | None:
        """Return the first offset after ``position`` where ``tag`` changes value.

        Only offsets strictly below ``limit`` (default: end of text) count.
        """
        if limit is None:
            limit = len(self.text)
        boundaries = sorted({edge for run in self._runs.get(tag, ()) for edge in (run.start, run.end)})
        current = self.get_property(position, tag)
        for boundary in boundaries[bisect_right(boundaries, position):]:
            if boundary >= limit:
                return None
            value = self.get_property(boundary, tag)
            if value != current:
                return boundary
            current = value
        return None

    def run_starts(self, tag: str) -> list[int]:
        """Return the sorted starts of maximal non-null runs of ``tag``."""
        starts: list[int] = []
        position = 0
        if self.get_property(0, tag) is None:
            position = self.next_property_change(0, tag)
        while position is not None:
            if self.get_property(position, tag) is not None:
                starts.append(position)
            position = self.next_property_change(position, tag)
        return starts

    def fold(self, start: int, end: int) -> None:
        """Hide ``[start, end)`` as folded text."""
        self._check_range(start, end)
        self._folds.append((start, end))

    def is_hidden(self, position: int) -> bool:
        return any(start <= position < end for start, end in self._folds)

    def make_overlay(self, start: int, end: int, **properties: Any) -> Decoration:
        """Attach a transient decoration and return it."""
        self._check_range(start, end)
        overlay = Decoration(start, end, dict(properties))
        self._overlays.append(overlay)
        return overlay

    def overlays_in(self, start: int, end: int) -> list[Decoration]:
        """Return overlays overlapping ``[start, end)``, newest first."""
        return [
            overlay
            for overlay in reversed(self._overlays)
            if overlay.start < end and overlay.end > start
        ]

    def substring(self, start: int, end: int) -> str:
        return self.text[max(0, start):min(len(self.text), end)]

    def line_range(self, first_line: int, line_count: int) -> Viewport:
        """Return the viewport covering ``line_count`` lines from ``first_line``."""
        lines = self.text.splitlines(keepends=True)
        first_line = max(0, min(first_line, len(lines)))
        start = sum(len(line) for line in lines[:first_line])
        end = start + sum(len(line) for line in lines[first_line:first_line + max(0, line_count)])
        return Viewport(start, end)


class BufferSurface:
    """Navigation and probe primitives over a ``Buffer`` and fixed viewport."""

    def __init__(self, buffer: Buffer, viewport: Viewport | None = None) -> None:
        self.buffer = buffer
        self.viewport = viewport if viewport is not None else Viewport(0, len(buffer))

    def _wrapping_next(self, tag: str, position: int) -> int | None:
        """Next run start after ``position``, wrapping to the first one."""
        starts = self.buffer.run_starts(tag)
        if not starts:
            return None
        index = bisect_right(starts, position)
        return starts[index] if index < len(starts) else starts[0]

    def next_reference(self, position: int) -> int | None:
        return self._wrapping_next(INFO_REF_TAG, position)

    def next_widget(self, position: int) -> int | None:
        return self._wrapping_next(WIDGET_TAG, position)

    def next_button(self, position: int) -> int | None:
        starts = self.buffer.run_starts(BUTTON_TAG)
        index = bisect_right(starts, position)
        return starts[index] if index < len(starts) else None

    def nearest_reference(self, position: int) -> str | None:
        """Return the node named by the reference covering ``position``."""
        value = self.buffer.get_property(position, INFO_REF_TAG)
        return value if isinstance(value, str) else None

    def primitives(
        self,
        *,
        goto_node: Callable[[str], object] | None = None,
        activate_at: Callable[[int], object] | None = None,
        open_at: Callable[[int], object] | None = None,
    ) -> SurfacePrimitives:
        """Build ``SurfacePrimitives`` with the host's activation callbacks.

        ``goto_node`` backs ``follow_nearest`` and is only consulted when a
        reference covers the position being followed.
        """
        follow_nearest = None
        if goto_node is not None:
            def follow_nearest(position: int) -> bool:
                node = self.nearest_reference(position)
                if node is None:
                    return False
                goto_node(node)
                return True

        return SurfacePrimitives(
            viewport=lambda: self.viewport,
            next_reference=self.next_reference,
            next_widget=self.next_widget,
            next_button=self.next_button,
            property_at=self.buffer.get_property,
            next_property_change=self.buffer.next_property_change,
            peek_target=self.nearest_reference,
            is_hidden=self.buffer.is_hidden,
            text_between=self.buffer.substring,
            decorations_overlapping=self.buffer.overlays_in,
            follow_nearest=follow_nearest,
            activate_at=activate_at,
            open_at=open_at,
        )
