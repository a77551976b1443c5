"""Marker values returned alongside grid payloads.

Payloads are arbitrary, so ``None``, ``0`` or ``""`` are all legitimate cell
contents. The markers below are enum members and compare equal only to
themselves, which keeps them apart from any payload.
"""

import enum

__all__ = ["NIL_VALUE", "NOT_VALID", "OUTSIDE", "Sentinel"]


class Sentinel(enum.Enum):
    """Distinguished markers used by the grid."""

    OUTSIDE = "OUTSIDE"
    """A queried neighbor fell off the grid."""

    NOT_VALID = "NOT_VALID"
    """An invalid query; pass it as ``default`` to tell misses apart from ``None`` payloads."""

    NIL_VALUE = "NIL_VALUE"
    """Explicit "no value"; ``populate`` writes the grid default in its place."""

    def __repr__(self):  # noqa: D105
        return f"cellgrid.{self.name}"


OUTSIDE = Sentinel.OUTSIDE
NOT_VALID = Sentinel.NOT_VALID
NIL_VALUE = Sentinel.NIL_VALUE
