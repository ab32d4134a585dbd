"""Dispatcher: collect, select, then activate for one surface variant.

This is the only orchestration in the package. Candidates live for one call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from . import activators, collectors
from .errors import UnsupportedSurface
from .model import Candidate, Variant
from .surface.primitives import SurfacePrimitives

logger = logging.getLogger("linkhint.dispatch")

Selector = Callable[[Sequence[int]], int | None]


class FollowOutcome(Enum):
    """Non-error results of one ``follow_link`` call."""

    FOLLOWED = "followed"
    NO_CANDIDATES = "no-candidates"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class LinkHandler:
    """Collector/activator pair registered for one variant."""

    collect: Callable[[SurfacePrimitives], list[Candidate]]
    activate: activators.Activator


REGISTRY: dict[Variant, LinkHandler] = {
    Variant.INFO: LinkHandler(collectors.collect_info, activators.activate_info),
    Variant.HELP: LinkHandler(collectors.collect_help, activators.activate_help),
    Variant.WOMAN: LinkHandler(collectors.collect_woman, activators.activate_woman),
    Variant.EWW: LinkHandler(collectors.collect_annotated, activators.activate_eww),
    Variant.COMPILATION: LinkHandler(collectors.collect_annotated, activators.activate_compilation),
    Variant.GNUS: LinkHandler(collectors.collect_gnus, activators.activate_gnus),
    Variant.ORG: LinkHandler(collectors.collect_org, activators.activate_org),
    Variant.CUSTOM: LinkHandler(collectors.collect_custom, activators.activate_custom),
    Variant.ADDRESS: LinkHandler(collectors.collect_address, activators.activate_address),
    Variant.XREF: LinkHandler(collectors.collect_xref, activators.activate_xref),
}

MODE_VARIANTS: dict[str, Variant] = {
    "Info-mode": Variant.INFO,
    "help-mode": Variant.HELP,
    "woman-mode": Variant.WOMAN,
    "eww-mode": Variant.EWW,
    "compilation-mode": Variant.COMPILATION,
    "grep-mode": Variant.COMPILATION,
    "gnus-article-mode": Variant.GNUS,
    "gnus-summary-mode": Variant.GNUS,
    "org-mode": Variant.ORG,
    "Custom-mode": Variant.CUSTOM,
    "xref--xref-buffer-mode": Variant.XREF,
}


def _variant(variant: Variant | str) -> Variant:
    try:
        return Variant(variant)
    except ValueError:
        raise UnsupportedSurface(str(variant)) from None


def collect(variant: Variant | str, primitives: SurfacePrimitives) -> list[Candidate]:
    """Run the collector registered for ``variant``."""
    return REGISTRY[_variant(variant)].collect(primitives)


def follow_link(variant: Variant | str, primitives: SurfacePrimitives, select: Selector) -> FollowOutcome:
    """Let the user pick one visible link of ``variant`` and follow it.

    ``select`` is never called when nothing is collected. ``LinkError``
    subclasses raised by collection or activation propagate. An unknown
    variant tag raises ``UnsupportedSurface``.
    """
    variant = _variant(variant)
    handler = REGISTRY[variant]
    candidates = handler.collect(primitives)
    logger.debug("%s: collected %d candidates", variant.value, len(candidates))
    if not candidates:
        return FollowOutcome.NO_CANDIDATES

    chosen = select([candidate.position for candidate in candidates])
    if chosen is None:
        logger.debug("%s: selection cancelled", variant.value)
        return FollowOutcome.CANCELLED

    logger.debug("%s: activating offset %d", variant.value, chosen)
    handler.activate(chosen, primitives)
    return FollowOutcome.FOLLOWED


def variant_for_mode(mode: str, address_links: bool = False) -> Variant:
    """Map a host mode name to its variant.

    Unknown modes fall back to address links when the surface shows any.
    """
    variant = MODE_VARIANTS.get(mode)
    if variant is not None:
        return variant
    if address_links:
        return Variant.ADDRESS
    raise UnsupportedSurface(mode)


def follow_link_for_mode(
    mode: str,
    primitives: SurfacePrimitives,
    select: Selector,
    address_links: bool = False,
) -> FollowOutcome:
    """``follow_link`` for whichever variant ``mode`` maps to."""
    return follow_link(variant_for_mode(mode, address_links), primitives, select)
