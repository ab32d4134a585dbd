"""Paint hint labels over visible document text.

Labels overwrite the characters at their candidate offsets. A label never
runs past a line end or into the next hint; what does not fit is dropped.
"""

from __future__ import annotations

from collections.abc import Sequence

from pygments.console import ansiformat

DEFAULT_HINT_STYLE = "*yellow*"


def is_valid_hint_style(style: str) -> bool:
    """Return whether ``style`` is a Pygments console attribute string."""
    try:
        ansiformat(style, "")
    except (KeyError, IndexError):
        return False
    return bool(style.strip("*_+"))


def render_hint_overlay(
    text: str,
    offset: int,
    hints: Sequence[tuple[int, str]],
    typed: str = "",
    style: str = DEFAULT_HINT_STYLE,
    no_color: bool = False,
) -> str:
    """Return ``text`` (starting at document ``offset``) with labels painted in.

    Only labels starting with ``typed`` are shown, minus that prefix.
    """
    live = sorted(
        (position - offset, label[len(typed):])
        for position, label in hints
        if label.startswith(typed) and 0 <= position - offset < len(text)
    )
    out: list[str] = []
    cursor = 0
    for i, (index, remaining) in enumerate(live):
        limit = live[i + 1][0] if i + 1 < len(live) else len(text)
        line_end = text.find("\n", index, limit)
        if line_end != -1:
            limit = line_end
        shown = remaining[:max(0, limit - index)] or remaining[:1]
        covered = min(len(shown), max(0, limit - index))
        out.append(text[cursor:index])
        out.append(shown if no_color else ansiformat(style, shown))
        cursor = index + covered
    out.append(text[cursor:])
    return "".join(out)
