"""Forward-only row cursor used to walk a PyFrame."""

from .errors import PyFrameIndexError


class RowCursor:
	"""
	A single mutable position over a frame's rows.

	One cursor belongs to each frame and it is not re-entrant: rewinding it
	restarts every traversal that shares it. Rows handed out by ``current()``
	are the frame's own rows, so edits to their values land in the frame.
	Adding or removing rows while a traversal is open is undefined.
	"""
	__slots__ = ('_store', '_index')

	def __init__(self, store):
		self._store = store
		self._index = 0

	def rewind(self):
		self._index = 0

	def valid(self):
		return 0 <= self._index < self._store.row_count()

	def current(self):
		if not self.valid():
			raise PyFrameIndexError(
				f"Cursor at {self._index} is past the last row ({self._store.row_count()} rows)"
			)
		return self._store.row_at(self._index)

	def key(self):
		return self._index

	def next(self):
		self._index += 1

	advance = next

	def count(self):
		return self._store.row_count()

	def __repr__(self):
		return f"RowCursor({self._index}/{self._store.row_count()})"
