"""Attribute names for columns, so ``frame.unit_price`` finds 'Unit Price'."""

from __future__ import annotations
import re

_NON_IDENTIFIER = re.compile(r'[^a-z0-9_]+')


def _column_identifier(column) -> str | None:
	"""Lowercased identifier spelling of a column name, or None if nothing is left.

	'Unit Price' -> 'unit_price', '2nd' -> 'c2nd', '%%' -> None
	"""
	identifier = _NON_IDENTIFIER.sub('_', str(column).lower()).strip('_')
	if not identifier:
		return None
	if identifier[0].isdigit():
		return 'c' + identifier
	return identifier


def _attribute_map(columns) -> dict:
	"""Map attribute names to the column names they stand for.

	Columns that collapse to the same identifier keep their schema order:
	the first wins the plain name, later ones get '__2', '__3', ...
	Columns with no identifier at all are reachable as ``col{position}_``.
	"""
	attribute_map = {}
	for position, column in enumerate(columns):
		identifier = _column_identifier(column)
		if identifier is None:
			attribute_map[f'col{position}_'] = column
			continue
		name, suffix = identifier, 2
		while name in attribute_map:
			name = f"{identifier}__{suffix}"
			suffix += 1
		attribute_map[name] = column
	return attribute_map
