"""
Right-hand sides for column assignment.

``PyFrame.set`` accepts exactly one of these variants:

  - Scalar: one value broadcast to every row
  - RowFunction: ``fn(current_value, row_index)`` evaluated per row
  - SourceColumn: a single-column PyFrame copied over by position

Examples
--------
>>> frame['status'] = Scalar('open')
>>> frame['amount'] = RowFunction(lambda value, i: value.strip())
>>> frame['copy'] = SourceColumn(frame['amount'])
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Scalar:
    """A value written into every row of the target column."""

    value: Any


@dataclass(frozen=True)
class RowFunction:
    """
    Per-row transform of an existing column.

    Attributes
    ----------
    fn : Callable[[Any, int], Any]
        Receives the row's current value for the column and the row index;
        returns the new value. Rows are visited in order, but ``fn`` must not
        rely on that for correctness.
    """

    fn: Callable[[Any, int], Any]


@dataclass(frozen=True)
class SourceColumn:
    """A single-column frame whose values are copied row-for-row."""

    frame: Any


Assignment = Union[Scalar, RowFunction, SourceColumn]
