"""Per-variant link collectors.

Each collector normalizes one surface's link representation into
``Candidate`` objects inside the visible range, in strictly increasing
offset order. Host navigation may wrap or stall, so every forward scan stops
as soon as a stop fails to advance past the previous one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .model import Candidate, Viewport
from .surface.markup import ADDRESS_TAG, ANNOTATION_TAG
from .surface.primitives import SurfacePrimitives

HELP_BUTTON_TAG = "button"
GNUS_LINK_TAGS = ("gnus-string", "shr-url")
CUSTOM_BUTTON_TAG = "button"
XREF_TAG = "xref-item"
# Probing this far before a match's end lands inside the target of
# ``[[target]]`` and inside the description of ``[[target][description]]``.
ORG_VISIBILITY_PROBE = 3


def forward_stops(advance: Callable[[int], int | None], viewport: Viewport) -> Iterator[int]:
    """Yield successive ``advance`` stops inside ``viewport``.

    Stops when ``advance`` fails, does not move strictly forward, or leaves
    the visible range.
    """
    previous = viewport.start - 1
    while True:
        position = advance(previous)
        if position is None or position <= previous or position >= viewport.end:
            return
        assert position > previous
        yield position
        previous = position


def tagged_runs(primitives: SurfacePrimitives, tag: str, viewport: Viewport) -> Iterator[tuple[int, object]]:
    """Yield ``(start, value)`` for each maximal non-null run of ``tag``."""
    property_at = primitives.require("property_at")
    next_change = primitives.require("next_property_change")

    position: int | None = viewport.start
    if property_at(viewport.start, tag) is None:
        position = next_change(viewport.start, tag, viewport.end)
    previous = viewport.start - 1
    while position is not None and previous < position < viewport.end:
        value = property_at(position, tag)
        yield position, value
        previous = position
        # Touching runs with different non-null values form one maximal run.
        run_end = next_change(position, tag, viewport.end)
        while run_end is not None and property_at(run_end, tag) is not None:
            following = next_change(run_end, tag, viewport.end)
            if following is not None and following <= run_end:
                return
            run_end = following
        if run_end is None:
            return
        position = next_change(run_end, tag, viewport.end)


def _text_label(value: object) -> str | None:
    return value if isinstance(value, str) else None


def collect_info(primitives: SurfacePrimitives) -> list[Candidate]:
    """One candidate per structural reference, labelled by its target node."""
    viewport = primitives.viewport()
    next_reference = primitives.require("next_reference")
    peek_target = primitives.require("peek_target")
    return [
        Candidate(position, peek_target(position))
        for position in forward_stops(next_reference, viewport)
    ]


def collect_help(primitives: SurfacePrimitives) -> list[Candidate]:
    viewport = primitives.viewport()
    return [
        Candidate(position, _text_label(value))
        for position, value in tagged_runs(primitives, HELP_BUTTON_TAG, viewport)
    ]


def collect_woman(primitives: SurfacePrimitives) -> list[Candidate]:
    viewport = primitives.viewport()
    next_button = primitives.require("next_button")
    return [Candidate(position) for position in forward_stops(next_button, viewport)]


def collect_annotated(primitives: SurfacePrimitives) -> list[Candidate]:
    """One candidate per run of hover-text annotation (web pages, compiler output)."""
    viewport = primitives.viewport()
    return [
        Candidate(position, _text_label(value))
        for position, value in tagged_runs(primitives, ANNOTATION_TAG, viewport)
    ]


def _marked_widgets(primitives: SurfacePrimitives, tags: tuple[str, ...]) -> list[Candidate]:
    viewport = primitives.viewport()
    next_widget = primitives.require("next_widget")
    property_at = primitives.require("property_at")
    candidates: list[Candidate] = []
    for position in forward_stops(next_widget, viewport):
        for tag in tags:
            value = property_at(position, tag)
            if value is not None:
                candidates.append(Candidate(position, _text_label(value)))
                break
    return candidates


def collect_gnus(primitives: SurfacePrimitives) -> list[Candidate]:
    """Widget stops carrying a message-link or rendered-URL marker."""
    return _marked_widgets(primitives, GNUS_LINK_TAGS)


def collect_custom(primitives: SurfacePrimitives) -> list[Candidate]:
    """Widget stops that are also buttons."""
    return _marked_widgets(primitives, (CUSTOM_BUTTON_TAG,))


def collect_org(primitives: SurfacePrimitives) -> list[Candidate]:
    """Link-pattern matches whose text is not folded away."""
    viewport = primitives.viewport()
    text_between = primitives.require("text_between")
    is_hidden = primitives.require("is_hidden")
    text = text_between(viewport.start, viewport.end)

    candidates: list[Candidate] = []
    for match in primitives.link_pattern.finditer(text):
        start = viewport.start + match.start()
        end = viewport.start + match.end()
        probe = max(start, end - ORG_VISIBILITY_PROBE)
        if is_hidden(probe):
            continue
        target = next((group for group in match.groups() if group), None)
        candidates.append(Candidate(start, target))
    return candidates


def collect_address(primitives: SurfacePrimitives) -> list[Candidate]:
    """Address overlays whose start is visible, in document order.

    Overlays come back newest first; reversing approximates document order
    and the final sort makes it exact, dropping overlays sharing a start.
    """
    viewport = primitives.viewport()
    decorations_overlapping = primitives.require("decorations_overlapping")
    by_position: dict[int, Candidate] = {}
    for decoration in reversed(list(decorations_overlapping(viewport.start, viewport.end))):
        if not decoration.properties.get(ADDRESS_TAG):
            continue
        if not viewport.contains(decoration.start) or decoration.start in by_position:
            continue
        label = decoration.properties.get("address")
        by_position[decoration.start] = Candidate(decoration.start, _text_label(label))
    return [by_position[position] for position in sorted(by_position)]


def collect_xref(primitives: SurfacePrimitives) -> list[Candidate]:
    viewport = primitives.viewport()
    return [Candidate(position) for position, _value in tagged_runs(primitives, XREF_TAG, viewport)]
