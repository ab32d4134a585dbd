"""Per-variant link activators.

An activator receives only the chosen document offset. Where the follow
operation is invoked relative to that offset differs per surface: some
activate exactly at the candidate, others one character past it, matching
each host's own "activate control at point" behaviour.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import NotFollowable
from .surface.primitives import SurfacePrimitives

logger = logging.getLogger("linkhint.activators")

Activator = Callable[[int, SurfacePrimitives], None]

EXACT = 0
PAST_START = 1


def activate_info(position: int, primitives: SurfacePrimitives) -> None:
    """Follow the nearest node, stepping forward one offset per failed attempt.

    Raises ``NotFollowable`` once the visible end is reached.
    """
    follow_nearest = primitives.require("follow_nearest")
    end = primitives.viewport().end
    point = position
    while point < end:
        if follow_nearest(point):
            if point != position:
                logger.debug("followed node at %d after %d retries", point, point - position)
            return
        point += 1
    raise NotFollowable(position, end)


def _activate_with(primitive: str, placement: int) -> Activator:
    def activate(position: int, primitives: SurfacePrimitives) -> None:
        action = primitives.require(primitive)
        action(position + placement)

    return activate


activate_help = _activate_with("activate_at", PAST_START)
activate_woman = _activate_with("activate_at", PAST_START)
activate_eww = _activate_with("activate_at", PAST_START)
activate_compilation = _activate_with("activate_at", PAST_START)
activate_gnus = _activate_with("activate_at", PAST_START)
activate_org = _activate_with("open_at", EXACT)
activate_custom = _activate_with("activate_at", EXACT)
activate_address = _activate_with("open_at", PAST_START)
activate_xref = _activate_with("activate_at", EXACT)
