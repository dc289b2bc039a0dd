"""Display and repr logic for PyFrame."""

from __future__ import annotations
from typing import List


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it contains anything outside [A-Za-z0-9_]
	OR has leading/trailing whitespace."""
	if not name:
		return False
	if name != name.strip():
		return True
	return not all(c.isalnum() or c == "_" for c in name)


def _is_numeric(values) -> bool:
	present = [v for v in values if v is not None]
	return bool(present) and all(
		isinstance(v, (int, float)) and not isinstance(v, bool) for v in present
	)


def _row_indices(nrows: int, max_preview: int = MAX_HEAD_ROWS):
	"""Row positions to show; None marks the '...' gap."""
	if nrows > max_preview * 2:
		return list(range(max_preview)) + [None] + list(range(nrows - max_preview, nrows))
	return list(range(nrows))


def _format_column(values, numeric: bool) -> List[str]:
	"""Returns a list of strings representing one column's visible cells."""
	out = []
	for v in values:
		if v is Ellipsis:
			out.append('...')
		elif v is None:
			out.append('None')
		elif isinstance(v, float):
			out.append(f"{v:.1f}" if v == int(v) else f"{v:g}")
		elif isinstance(v, str):
			out.append(repr(v))
		else:
			out.append(str(v))

	max_len = max(len(s) for s in out) if out else 0
	if numeric:
		return [s.rjust(max_len) for s in out]
	return [s.ljust(max_len) for s in out]


def _header(column) -> str:
	if column is Ellipsis:
		return "..."
	name = str(column)
	return repr(name) if _needs_quoting(name) else name


def _footer(nrows: int, ncols: int) -> str:
	return f"# {nrows}×{ncols} frame"


def _repr_frame(frame) -> str:
	"""Pretty repr for a PyFrame."""
	columns = list(frame.columns)
	nrows = frame.row_count()
	ncols = len(columns)

	if ncols == 0:
		return _footer(nrows, 0)

	if ncols > MAX_HEAD_COLS * 2:
		columns = columns[:MAX_HEAD_COLS] + [Ellipsis] + columns[-MAX_HEAD_COLS:]

	positions = _row_indices(nrows)
	rows = [frame._store.row_at(i) if i is not None else None for i in positions]

	formatted_cols = []
	headers = []
	numeric_flags = []
	for column in columns:
		if column is Ellipsis:
			cells = [Ellipsis] * len(rows)
			numeric = False
		else:
			cells = [Ellipsis if row is None else row[column] for row in rows]
			numeric = _is_numeric(c for c in cells if c is not Ellipsis)
		formatted_cols.append(_format_column(cells, numeric))
		headers.append(_header(column))
		numeric_flags.append(numeric)

	# Pad columns and headers to consistent widths
	lines = []
	widths = [
		max([len(h)] + [len(s) for s in col])
		for h, col in zip(headers, formatted_cols)
	]
	lines.append("  ".join(
		h.rjust(w) if numeric else h.ljust(w)
		for h, w, numeric in zip(headers, widths, numeric_flags)
	).rstrip())
	for r in range(len(rows)):
		lines.append("  ".join(
			col[r].rjust(w) if numeric else col[r].ljust(w)
			for col, w, numeric in zip(formatted_cols, widths, numeric_flags)
		).rstrip())

	lines.append("")
	lines.append(_footer(nrows, ncols))
	return "\n".join(lines)


def _printr(frame) -> str:
	"""Entry point used by PyFrame.__repr__."""
	return _repr_frame(frame)
