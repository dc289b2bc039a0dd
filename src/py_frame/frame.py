import logging
import re
from collections.abc import Mapping

from .assign import RowFunction, Scalar, SourceColumn
from .convert import DEFAULT_DATE_FORMAT, SemanticType, normalizer_for
from .cursor import RowCursor
from .errors import (
	DateParseError,
	InvalidColumnError,
	MissingColumnError,
	PyFrameTypeError,
	PyFrameValueError,
	RowCountMismatchError,
	SchemaMismatchError,
)
from .naming import _attribute_map
from .store import RowStore

logger = logging.getLogger(__name__)


def _missing_col_error(name, context="PyFrame"):
	return InvalidColumnError(f"Column '{name}' doesn't exist in {context}")


class PyFrame:
	""" Rows of named scalar fields, addressed by column """

	def __init__(self, rows=()):
		self._store = RowStore(rows)
		self._cursor = RowCursor(self._store)

	@classmethod
	def from_records(cls, records, columns):
		"""Build a frame from positional records and a header of column names."""
		columns = list(columns)
		rows = []
		for i, record in enumerate(records):
			record = tuple(record)
			if len(record) != len(columns):
				raise SchemaMismatchError(
					f"Record {i} has {len(record)} values, but {len(columns)} columns were given"
				)
			rows.append(dict(zip(columns, record)))
		frame = cls(rows)
		if not rows:
			for column in columns:
				frame._store.add_column_name(column)
		return frame

	# ------------------------------------------------------------------
	# Row storage
	# ------------------------------------------------------------------
	@property
	def columns(self):
		"""The schema: column names in order (a tuple, so callers can't mutate it)."""
		return self._store.columns

	def row_at(self, index):
		"""Return a copy of the row at ``index``."""
		return dict(self._store.row_at(index))

	def row_count(self):
		return self._store.row_count()

	def __len__(self):
		return self._store.row_count()

	def to_records(self):
		"""Copies of every row, in order."""
		return [dict(row) for row in self._store._rows]

	def copy(self):
		frame = PyFrame(self.to_records())
		for column in self.columns:
			frame._store.add_column_name(column)
		return frame

	# ------------------------------------------------------------------
	# Iteration
	# ------------------------------------------------------------------
	@property
	def cursor(self):
		"""The frame's single RowCursor."""
		return self._cursor

	def __iter__(self):
		"""Walk the rows with the frame's cursor, yielding the live rows."""
		cursor = self._cursor
		cursor.rewind()
		while cursor.valid():
			yield cursor.current()
			cursor.next()

	# ------------------------------------------------------------------
	# Column access
	# ------------------------------------------------------------------
	def has(self, column):
		return column in self._store.columns

	def __contains__(self, column):
		return self.has(column)

	def must_have(self, column):
		if not self.has(column):
			raise _missing_col_error(column)

	def exists(self, column):
		"""True iff every row carries ``column`` as a key."""
		return all(column in row for row in self._store._rows)

	def get(self, column):
		"""A new single-column frame holding a copy of ``column``."""
		self.must_have(column)
		frame = PyFrame([{column: row[column]} for row in self._store._rows])
		frame._store.add_column_name(column)
		return frame

	def __getitem__(self, column):
		return self.get(column)

	def __getattr__(self, attr):
		"""Access columns by sanitized attribute name."""
		if attr.startswith('_'):
			raise AttributeError(f"{self.__class__.__name__!s} object has no attribute '{attr}'")
		column = _attribute_map(self._store.columns).get(attr.lower(), _MISSING)
		if column is _MISSING:
			raise AttributeError(f"{self.__class__.__name__!s} object has no attribute '{attr}'")
		return self.get(column)

	def __dir__(self):
		base_attrs = object.__dir__(self)
		return sorted(set(base_attrs + list(_attribute_map(self._store.columns).keys())))

	def set(self, target, rhs):
		"""
		Assign to column ``target``.

		Args:
			target: Column name; created by Scalar and SourceColumn if absent
			rhs: Scalar, RowFunction or SourceColumn

		Raises:
			InvalidColumnError: RowFunction on a column that doesn't exist
			SchemaMismatchError: SourceColumn frame without exactly one column
			RowCountMismatchError: SourceColumn frame with a different row count
			PyFrameTypeError: rhs is not an assignment variant
		"""
		if isinstance(rhs, Scalar):
			self._set_value(target, rhs.value)
		elif isinstance(rhs, RowFunction):
			self._set_function(target, rhs.fn)
		elif isinstance(rhs, SourceColumn):
			self._set_frame(target, rhs.frame)
		else:
			raise PyFrameTypeError(
				f"Cannot assign {type(rhs).__name__} to column '{target}'. "
				"Wrap the value in Scalar, RowFunction or SourceColumn."
			)
		return self

	def __setitem__(self, target, rhs):
		self.set(target, rhs)

	def broadcast(self, target, value):
		return self.set(target, Scalar(value))

	def apply_column(self, target, fn):
		return self.set(target, RowFunction(fn))

	def assign_column(self, target, source):
		return self.set(target, SourceColumn(source))

	def _set_value(self, target, value):
		self._store.add_column_name(target)
		for row in self._store._rows:
			row[target] = value

	def _set_function(self, target, fn):
		self.must_have(target)
		rows = self._store._rows
		for i in range(len(rows)):
			rows[i][target] = fn(rows[i][target], i)

	def _set_frame(self, target, source):
		if not isinstance(source, PyFrame):
			raise PyFrameTypeError(
				f"SourceColumn for '{target}' must wrap a PyFrame, got {type(source).__name__}"
			)
		if len(source.columns) != 1:
			raise SchemaMismatchError(
				f"Can only set column '{target}' from a frame with a single column; "
				f"source has {len(source.columns)}: {list(source.columns)}"
			)
		if len(source) != len(self):
			raise RowCountMismatchError(
				f"Source and target frames must have identical number of rows: "
				f"source has {len(source)}, target has {len(self)}"
			)

		self._store.add_column_name(target)
		sole = source.columns[0]
		for i in range(len(self)):
			self._store.row_at(i)[target] = source._store.row_at(i)[sole]

	def unset(self, column):
		"""Remove ``column`` from every row and from the schema."""
		self.must_have(column)
		for row in self._store._rows:
			row.pop(column, None)
		self._store.remove_column_name(column)
		return self

	def __delitem__(self, column):
		self.unset(column)

	remove_column = unset

	# ------------------------------------------------------------------
	# Whole-frame operations
	# ------------------------------------------------------------------
	def append(self, other):
		"""
		Append the rows of ``other``, keeping only this frame's columns.

		A frame without rows or columns takes on ``other``'s columns.
		"""
		if not isinstance(other, PyFrame):
			raise PyFrameTypeError(f"Can only append a PyFrame, got {type(other).__name__}")
		if len(other) == 0:
			return self

		if not self._store.columns and len(self) == 0:
			for column in other.columns:
				self._store.add_column_name(column)

		columns = self._store.columns
		missing = [column for column in columns if not other.has(column)]
		if missing:
			raise MissingColumnError(
				f"Cannot append: source frame lacks columns {missing}"
			)

		# snapshot first: other may be this frame
		for row in list(other._store._rows):
			self._store.append_row({column: row[column] for column in columns})
		return self

	def apply(self, fn):
		"""
		Replace each row with ``fn(row, index)``.

		Frames with a single column are different: ``fn`` receives and returns
		only that column's value, ``fn(value, index)``.
		"""
		columns = self._store.columns
		rows = self._store._rows

		if len(columns) == 1:
			sole = columns[0]
			for i in range(len(rows)):
				rows[i][sole] = fn(rows[i][sole], i)
		elif len(columns) > 1:
			expected = set(columns)
			for i in range(len(rows)):
				result = fn(dict(rows[i]), i)
				if not isinstance(result, Mapping):
					raise PyFrameTypeError(
						f"apply() function must return a row mapping; row {i} got {type(result).__name__}"
					)
				if set(result.keys()) != expected:
					raise SchemaMismatchError(
						f"apply() must return a row with columns {list(columns)}; "
						f"row {i} returned {list(result.keys())}"
					)
				self._store.replace_row(i, {column: result[column] for column in columns})
		return self

	def replace(self, pattern, replacement):
		"""Regex-substitute ``pattern`` in every value of every row."""
		regex = re.compile(pattern) if isinstance(pattern, str) else pattern
		for row in self._store._rows:
			for column, value in row.items():
				if value is not None:
					row[column] = regex.sub(replacement, str(value))
		return self

	def convert_types(self, type_map, from_date_formats=None, to_date_format=None):
		"""
		Normalize the text of typed columns in place.

		ie:
			frame.convert_types({
				'some_amount': 'DECIMAL',
				'some_int': 'INT',
				'some_date': 'DATE',
			}, ['Y-m-d', 'm/d/Y'], 'm/d/Y')

		Args:
			type_map: {column: SemanticType or its name}, applied in order
			from_date_formats: One date format or candidate list for DATE columns
			to_date_format: Output format for DATE columns

		Unrecognized semantic types are skipped. No rollback: an error part way
		through leaves the rows already visited converted.
		"""
		from_formats = from_date_formats if from_date_formats is not None else DEFAULT_DATE_FORMAT
		to_format = to_date_format if to_date_format is not None else DEFAULT_DATE_FORMAT

		plan = []
		for column, type_name in type_map.items():
			semantic_type = SemanticType.lookup(type_name)
			if semantic_type is None:
				logger.debug("Skipping column %r: unrecognized semantic type %r", column, type_name)
				continue
			self.must_have(column)
			plan.append((column, normalizer_for(semantic_type, from_formats, to_format)))

		rows = self._store._rows
		for i in range(len(rows)):
			row = rows[i]
			for column, normalize in plan:
				try:
					row[column] = normalize(row[column])
				except DateParseError as e:
					raise DateParseError(e.value, e.date_format, column=column, row=i) from e
				except PyFrameValueError as e:
					raise PyFrameValueError(f"Column '{column}', row {i}: {e}") from e
		return self

	# ------------------------------------------------------------------
	# Adapters
	# ------------------------------------------------------------------
	def query(self, sql, connection=None):
		"""Run ``sql`` against this frame loaded as table 'dataframe'."""
		from .sql import query
		return query(self, sql, connection)

	def to_sql(self, table, connection):
		from .sql import to_sql
		to_sql(self, table, connection)

	def to_csv(self, path, **kwargs):
		from .csv import to_csv
		to_csv(self, path, **kwargs)

	def __repr__(self):
		from .display import _printr
		return _printr(self)


_MISSING = object()
