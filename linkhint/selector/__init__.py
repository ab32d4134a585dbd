"""Hint-label selection: label assignment, overlay painting, key loop."""

from .labels import hint_labels
from .overlay import DEFAULT_HINT_STYLE, is_valid_hint_style, render_hint_overlay
from .selector import HintRenderRequest, HintSelector

__all__ = [
    "DEFAULT_HINT_STYLE",
    "HintRenderRequest",
    "HintSelector",
    "hint_labels",
    "is_valid_hint_style",
    "render_hint_overlay",
]
