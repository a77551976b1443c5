"""Named directions of the 3x3 neighborhood and their coordinate offsets.

Offsets are ``(dx, dy)`` pairs where ``x`` is the vertical axis (rows, growing
downwards) and ``y`` the horizontal axis (columns, growing to the right)::

    TOP_LEFT    (-1, -1)   TOP    (-1, 0)   TOP_RIGHT    (-1, 1)
    LEFT        ( 0, -1)   CENTER ( 0, 0)   RIGHT        ( 0, 1)
    BOTTOM_LEFT ( 1, -1)   BOTTOM ( 1, 0)   BOTTOM_RIGHT ( 1, 1)

"""

from __future__ import annotations

import enum
from numbers import Integral

__all__ = [
    "NEIGHBOR_OFFSETS",
    "Direction",
    "get_all_vectors",
    "get_vector",
]


class Direction(enum.IntEnum):
    """The nine directions, numbered from top-left to bottom-right."""

    TOP_LEFT = 1
    TOP = 2
    TOP_RIGHT = 3
    LEFT = 4
    CENTER = 5
    RIGHT = 6
    BOTTOM_LEFT = 7
    BOTTOM = 8
    BOTTOM_RIGHT = 9

    @property
    def vector(self) -> tuple[int, int]:
        """The ``(dx, dy)`` offset of this direction."""
        return _VECTORS[self]

    @classmethod
    def coerce(cls, value) -> Direction | None:
        """Resolve a direction from a member, its number or its name.

        Names are case-insensitive, so ``"bottom_right"`` and ``"BOTTOM_RIGHT"``
        both resolve. Anything else returns None.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, Integral):
            try:
                return cls(int(value))
            except ValueError:
                return None
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


# fmt: off
_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.TOP_LEFT: (-1, -1),    Direction.TOP: (-1, 0),    Direction.TOP_RIGHT: (-1, 1),
    Direction.LEFT: (0, -1),         Direction.CENTER: (0, 0),  Direction.RIGHT: (0, 1),
    Direction.BOTTOM_LEFT: (1, -1),  Direction.BOTTOM: (1, 0),  Direction.BOTTOM_RIGHT: (1, 1),
}
# fmt: on

_ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

# row-major scan of the neighborhood: dx outer, dy inner, center skipped
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def get_vector(direction) -> tuple[int, int] | None:
    """Return the ``(dx, dy)`` offset for a direction.

    Args:
        direction: a Direction, its integer value or its name

    Returns:
        the offset pair, or None if the direction is not recognized. Callers must
        treat None as "cannot compute" rather than as ``(0, 0)``.
    """
    resolved = Direction.coerce(direction)
    if resolved is None:
        return None
    return _VECTORS[resolved]


def get_all_vectors() -> tuple[Direction, ...]:
    """Return every direction in order, from top-left to bottom-right."""
    return _ALL_DIRECTIONS
