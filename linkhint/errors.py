"""Link-following error hierarchy.

Empty collections and cancelled selections are outcomes, not errors; see
``linkhint.dispatch.FollowOutcome``.
"""

from __future__ import annotations


class LinkError(Exception):
    """Base class for failures surfaced by the dispatcher."""


class NotFollowable(LinkError):
    """No followable link was found between the chosen offset and the bound."""

    def __init__(self, position: int, end: int) -> None:
        super().__init__(f"no followable link between offsets {position} and {end}")
        self.position = position
        self.end = end


class PrimitiveUnavailable(LinkError):
    """A surface primitive required by a collector or activator is missing."""

    def __init__(self, primitive: str) -> None:
        super().__init__(f"surface does not provide the {primitive!r} primitive")
        self.primitive = primitive


class UnsupportedSurface(LinkError):
    """No variant is registered for the active surface kind."""

    def __init__(self, mode: str) -> None:
        super().__init__(f"{mode} isn't supported")
        self.mode = mode
