"""Public package surface for linkhint.

Exports the dispatcher entry points and the core link model.
``main`` is imported lazily to keep library imports free of terminal code.
"""

from __future__ import annotations

from .dispatch import FollowOutcome, follow_link, follow_link_for_mode, variant_for_mode
from .errors import LinkError, NotFollowable, PrimitiveUnavailable, UnsupportedSurface
from .model import Candidate, Variant, Viewport


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Candidate",
    "FollowOutcome",
    "LinkError",
    "NotFollowable",
    "PrimitiveUnavailable",
    "UnsupportedSurface",
    "Variant",
    "Viewport",
    "follow_link",
    "follow_link_for_mode",
    "main",
    "variant_for_mode",
]
