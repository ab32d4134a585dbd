"""Keyboard hint selector.

Turns a list of candidate offsets into one user choice: every candidate gets
a minimal-keystroke label, the overlay is redrawn after each key, and typing a
full label picks that candidate.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .labels import hint_labels

CANCEL_KEYS = frozenset({"ESC", "\x03", "CTRL_C", "CTRL_G"})


@dataclass(frozen=True)
class HintRenderRequest:
    """What the host must draw for one selection step."""

    hints: tuple[tuple[int, str], ...]
    typed: str


class HintSelector:
    """Selector blocking on ``read_key`` until a label is complete or cancelled."""

    def __init__(
        self,
        read_key: Callable[[], str],
        render: Callable[[HintRenderRequest], None],
        keys: str = "asdfghjkl",
        single_candidate_jump: bool = True,
    ) -> None:
        self.read_key = read_key
        self.render = render
        self.keys = keys
        self.single_candidate_jump = single_candidate_jump

    def __call__(self, positions: Sequence[int]) -> int | None:
        return self.select(positions)

    def select(self, positions: Sequence[int]) -> int | None:
        """Return the chosen offset, or ``None`` when the user cancels."""
        if not positions:
            return None
        if len(positions) == 1 and self.single_candidate_jump:
            return positions[0]

        hints = tuple(zip(positions, hint_labels(len(positions), self.keys)))
        typed = ""
        while True:
            self.render(HintRenderRequest(hints=hints, typed=typed))
            key = self.read_key()
            if key in CANCEL_KEYS or len(key) != 1:
                return None
            typed += key
            remaining = [(position, label) for position, label in hints if label.startswith(typed)]
            if not remaining:
                return None
            for position, label in remaining:
                if label == typed:
                    return position
