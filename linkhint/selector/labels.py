"""Minimal-keystroke hint labels.

Labels form a prefix-free tree over the key alphabet: with ``k`` keys and
``n`` candidates, every label has length ``floor(log_k(n))`` or one more,
and the shorter labels are handed out first.
"""

from __future__ import annotations

import math


def subdivide(count: int, base: int) -> list[int]:
    """Split ``count`` leaves into ``base`` subtree sizes.

    Sizes are full subtrees of the two smallest fitting depths, small ones
    first, with one partially filled subtree between them.
    """
    depth = math.floor(math.log(count, base) + 1e-6) - 1
    small = base ** depth
    large = small * base
    extra = count - large
    n_large = extra // (large - small)
    n_small = base - n_large - 1
    middle = count - n_small * small - n_large * large
    return [small] * n_small + [middle] + [large] * n_large


def hint_labels(count: int, keys: str) -> list[str]:
    """Return ``count`` prefix-free labels over ``keys`` in candidate order."""
    if len(set(keys)) != len(keys) or len(keys) < 2:
        raise ValueError("hint keys must contain at least two distinct characters")
    if count <= 0:
        return []

    labels: list[str] = []

    def assign(prefix: str, n: int) -> None:
        if n < len(keys):
            labels.extend(prefix + key for key in keys[:n])
            return
        for key, size in zip(keys, subdivide(n, len(keys))):
            if size == 1:
                labels.append(prefix + key)
            elif size > 1:
                assign(prefix + key, size)

    assign("", count)
    return labels
