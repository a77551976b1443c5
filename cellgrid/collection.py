"""Lazy, restartable results of batch grid queries.

Every batch operation on a :class:`~cellgrid.grid.Grid` returns a
:class:`CellSequence`. Nothing is computed until the sequence is iterated, and
every new iteration starts the query over against the grid's current state.
Materialize it with ``list(...)`` (or :meth:`CellSequence.to_list`) when a
snapshot is needed. Sequences have no ``len()``; use :meth:`CellSequence.count`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, NamedTuple, TypeVar

import pandas as pd

__all__ = ["CellSequence", "GridEntry"]

E = TypeVar("E")


class GridEntry(NamedTuple):
    """A cell coordinate together with its value.

    Entries unpack as plain ``(x, y, value)`` triples and can be fed straight
    back into :meth:`~cellgrid.grid.Grid.populate`. For neighbors that fall
    outside the grid ``x`` and ``y`` are None and ``value`` is ``OUTSIDE``.
    """

    x: int | None
    y: int | None
    value: Any


class CellSequence(Generic[E]):
    """A finite iterable that re-runs its query on every iteration.

    Attributes:
        label (str): short description of the query, used in the repr

    """

    __slots__ = ("_factory", "label")

    def __init__(self, factory: Callable[[], Iterable[E]], label: str = "") -> None:
        """Initialize a CellSequence.

        Args:
            factory: zero-argument callable returning a fresh iterable of the results
            label: short description of the query
        """
        self._factory = factory
        self.label = label

    def __iter__(self) -> Iterator[E]:  # noqa: D105
        return iter(self._factory())

    def __bool__(self) -> bool:  # noqa: D105
        return any(True for _ in self)

    def __getitem__(self, index: int) -> E:
        """Return one result by position.

        Every lookup runs the whole query again; call :meth:`to_list` once when
        accessing several positions.
        """
        return self.to_list()[index]

    def __eq__(self, other) -> bool:  # noqa: D105
        if isinstance(other, CellSequence):
            return self.to_list() == other.to_list()
        if isinstance(other, list | tuple):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:  # noqa: D105
        return f"<CellSequence {self.label!r}: {self.to_list()!r}>"

    def count(self) -> int:
        """Run the query and return the number of results."""
        return sum(1 for _ in self)

    def to_list(self) -> list[E]:
        """Materialize the sequence into a list."""
        return list(self)

    def to_dataframe(self) -> pd.DataFrame:
        """Materialize a sequence of GridEntry items as a DataFrame.

        Returns:
            a DataFrame with the columns ``x``, ``y`` and ``value``. Plain value
            sequences (e.g. from ``get_cells``) get a single ``value`` column.
        """
        items = self.to_list()
        if items and all(isinstance(item, GridEntry) for item in items):
            return pd.DataFrame.from_records(items, columns=list(GridEntry._fields))
        if not items:
            return pd.DataFrame(columns=list(GridEntry._fields))
        return pd.DataFrame({"value": pd.Series(items, dtype=object)})
