"""
Vertical merge (second pass of the tile decomposition).

Runs are only ever joined with a run of the exact same x-span, directly on
top of them and of a matching color, so every merge keeps shapes rectangular.
This is a greedy sweep: it does not look for the minimal number of
rectangles (an L-shaped region with rows of unequal widths stays split).

The candidates live in an arena visited bottom band first, so the y_min of
the candidates left to scan never decreases. A candidate absorbed by a
growing shape is flagged instead of being removed, which keeps indices valid
during the scan.

Complexity: O(n²) on the number of runs n, with n <= S² (checkerboard).
"""

import logging

from colors import colors_match
from rectangles import Shape

logger = logging.getLogger(__name__)


def _can_absorb(growing: Shape, candidate: Shape) -> bool:
    return (
        candidate.y_min == growing.y_max
        and growing.same_span(candidate)
        and colors_match(candidate.color, growing.color)
    )


def vertical_merge(runs: list[Shape]) -> list[Shape]:
    """
    Merge vertically stacked runs of identical span and color.

    Args:
        runs: Output of the horizontal pass, in input scan order
            (non-increasing y_min).

    Returns:
        The finalized shapes, bottom band first.
    """
    # Arena, visited from the last input row backward
    arena: list[Shape] = runs[::-1]
    absorbed: list[bool] = [False] * len(arena)
    finalized: list[Shape] = []

    for i, growing in enumerate(arena):
        if absorbed[i]:
            continue

        for j in range(i + 1, len(arena)):
            if absorbed[j]:
                continue
            candidate = arena[j]
            if candidate.y_min > growing.y_max:
                break
            if _can_absorb(growing, candidate):
                growing = growing.extended_to(candidate.y_max)
                absorbed[j] = True

        finalized.append(growing)

    logger.debug("Merged %d runs into %d shapes", len(runs), len(finalized))
    return finalized


__all__ = ["vertical_merge"]
