"""
Row-major storage for PyFrame.

Rows are plain dicts keyed by column name, kept in a list so they stay
addressable by position. The column list is the frame's schema.
"""

from __future__ import annotations
import warnings
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import PyFrameIndexError


class RowStore:
	"""
	Ordered rows plus the ordered, unique list of column names.

	Parameters
	----------
	rows : iterable of Mapping
		Input rows. Every row is copied; the schema is taken from the
		first row's key order.
	"""

	__slots__ = ('_rows', '_columns')

	def __init__(self, rows: Iterable[Mapping[str, Any]] = ()):
		self._rows = []
		self._columns = []
		for row in rows:
			if not self._columns and not self._rows:
				self._columns = list(row.keys())
			self._rows.append(self._conform(row, len(self._rows)))

	def _conform(self, row: Mapping[str, Any], index: int) -> dict:
		"""Copy ``row`` into a dict with exactly the schema's keys."""
		extra = [key for key in row if key not in self._columns]
		if extra:
			warnings.warn(f"Row {index} has columns not in the schema, dropped: {extra}")
		return {column: row.get(column) for column in self._columns}

	@property
	def columns(self) -> tuple:
		return tuple(self._columns)

	def row_count(self) -> int:
		return len(self._rows)

	def __len__(self):
		return len(self._rows)

	def row_at(self, index: int) -> dict:
		"""Return the live row at ``index``."""
		if not isinstance(index, int) or index < 0 or index >= len(self._rows):
			raise PyFrameIndexError(
				f"Row index {index!r} out of range for frame with {len(self._rows)} rows"
			)
		return self._rows[index]

	def add_column_name(self, name) -> None:
		if name not in self._columns:
			self._columns.append(name)

	def remove_column_name(self, name) -> None:
		if name in self._columns:
			self._columns.remove(name)

	def append_row(self, row: dict) -> None:
		self._rows.append(row)

	def replace_row(self, index: int, row: dict) -> None:
		self.row_at(index)
		self._rows[index] = row
