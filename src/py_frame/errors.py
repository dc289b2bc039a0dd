class PyFrameError(Exception):
	"""Base exception for py-frame library."""
	pass


class PyFrameKeyError(PyFrameError, KeyError):
	"""Raised when a column/key is missing."""

	def __str__(self):
		# KeyError quotes its message; keep ours readable
		return Exception.__str__(self)


class PyFrameTypeError(PyFrameError, TypeError):
	"""Raised for invalid types in API calls."""
	pass


class PyFrameValueError(PyFrameError, ValueError):
	"""Raised for invalid values or mismatched lengths."""
	pass


class PyFrameIndexError(PyFrameError, IndexError):
	"""Raised for row positions outside the frame."""
	pass


class InvalidColumnError(PyFrameKeyError):
	"""Raised when a column is not part of the frame's schema."""
	pass


class MissingColumnError(PyFrameKeyError):
	"""Raised when rows being appended lack columns of the target frame."""
	pass


class SchemaMismatchError(PyFrameValueError):
	"""Raised when a frame or row does not have the expected columns."""
	pass


class RowCountMismatchError(PyFrameValueError):
	"""Raised when two frames must be aligned by position but differ in length."""
	pass


class DateParseError(PyFrameValueError):
	"""Raised when none of the candidate date formats parse a value."""

	def __init__(self, value, date_format, column=None, row=None):
		self.value = value
		self.date_format = date_format
		self.column = column
		self.row = row
		msg = f"Error parsing date string '{value}' with date format {date_format}"
		if column is not None:
			msg += f" (column '{column}', row {row})"
		super().__init__(msg)


class UnsupportedDialectError(PyFrameValueError):
	"""Raised when the SQL bridge is handed a database it cannot target."""
	pass
