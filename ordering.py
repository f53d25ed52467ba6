"""
Deterministic ordering of 2D-positioned entities.

The order is not about one position being "greater" than another, only about
iterating tiles and shapes the same way every time so that exports are
reproducible byte for byte. All conventions compare y first, then x; the
AscendFrom tag selects which corner holds the first entry.
"""

from collections.abc import Iterable
from enum import Enum
from functools import cmp_to_key
from typing import Protocol, TypeVar


class AscendFrom(Enum):
    """Corner in which the first entry resides (y bottom-up)."""

    LOW_Y_LOW_X = "low-y-low-x"  # bottom-left
    HIGH_Y_LOW_X = "high-y-low-x"  # top-left
    LOW_Y_HIGH_X = "low-y-high-x"  # bottom-right
    HIGH_Y_HIGH_X = "high-y-high-x"  # top-right


DEFAULT_ASCEND_FROM = AscendFrom.LOW_Y_LOW_X


class Positioned(Protocol):
    def position(self) -> tuple[int, int]:
        """(x, y) position used for ordering."""
        ...


P = TypeVar("P", bound=Positioned)


def compare(
    this: tuple[int, int],
    that: tuple[int, int],
    ascend_from: AscendFrom | None = None,
) -> int:
    """
    Compare two (x, y) positions.

    Returns:
        A negative value if `this` comes first, a positive value if `that`
        comes first, 0 if both share the same position.
    """
    this_x, this_y = this
    that_x, that_y = that

    match ascend_from or DEFAULT_ASCEND_FROM:
        case AscendFrom.LOW_Y_LOW_X:
            y_comp, x_comp = this_y - that_y, this_x - that_x
        case AscendFrom.HIGH_Y_LOW_X:
            y_comp, x_comp = that_y - this_y, this_x - that_x
        case AscendFrom.LOW_Y_HIGH_X:
            y_comp, x_comp = this_y - that_y, that_x - this_x
        case AscendFrom.HIGH_Y_HIGH_X:
            y_comp, x_comp = that_y - this_y, that_x - this_x

    return y_comp if y_comp != 0 else x_comp


def order_key(x: int, y: int, ascend_from: AscendFrom | None = None) -> tuple[int, int]:
    """Sort key equivalent to `compare` for the given convention."""
    match ascend_from or DEFAULT_ASCEND_FROM:
        case AscendFrom.LOW_Y_LOW_X:
            return (y, x)
        case AscendFrom.HIGH_Y_LOW_X:
            return (-y, x)
        case AscendFrom.LOW_Y_HIGH_X:
            return (y, -x)
        case AscendFrom.HIGH_Y_HIGH_X:
            return (-y, -x)


def sort_positioned(
    items: Iterable[P], ascend_from: AscendFrom | None = None
) -> tuple[P, ...]:
    """
    Sort entities by their position.

    Raises:
        ValueError: if two entities share a position, as the order would
        then depend on the input order.
    """
    ordered = tuple(
        sorted(items, key=lambda item: order_key(*item.position(), ascend_from))
    )
    for previous, current in zip(ordered, ordered[1:]):
        if previous.position() == current.position():
            raise ValueError(f"Two entities share the position {current.position()}")
    return ordered


def comparator(ascend_from: AscendFrom | None = None):
    """`functools` key wrapper over `compare`, for use with `sorted`."""
    return cmp_to_key(
        lambda this, that: compare(this.position(), that.position(), ascend_from)
    )


__all__ = [
    "AscendFrom",
    "DEFAULT_ASCEND_FROM",
    "Positioned",
    "compare",
    "order_key",
    "sort_positioned",
    "comparator",
]
