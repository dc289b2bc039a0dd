"""
py-frame: a row-oriented table of named scalar fields

Rows are ordered mappings from column name to a string-like scalar. Columns
are read, assigned, transformed and removed as a unit; typed interpretation
of the text is left to the conversion pipeline.

Main classes:
    - PyFrame: the table (rows + ordered column names)
    - RowCursor: forward-only cursor over a frame's rows

Assignment variants for ``frame[column] = ...``:
    - Scalar: broadcast one value to every row
    - RowFunction: fn(value, row_index) per row
    - SourceColumn: copy a single-column frame by position

Zero external dependencies - pure Python stdlib only.
"""

import logging

from .assign import Scalar, RowFunction, SourceColumn
from .convert import (
	SemanticType,
	convert_decimal,
	convert_int,
	convert_date,
	convert_currency,
	convert_accounting,
)
from .cursor import RowCursor
from .frame import PyFrame
from .csv import read_csv, to_csv
from .errors import (
	PyFrameError,
	PyFrameKeyError,
	PyFrameValueError,
	PyFrameTypeError,
	PyFrameIndexError,
	InvalidColumnError,
	MissingColumnError,
	SchemaMismatchError,
	RowCountMismatchError,
	DateParseError,
	UnsupportedDialectError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
	"PyFrame",
	"RowCursor",
	"Scalar",
	"RowFunction",
	"SourceColumn",
	"SemanticType",
	"convert_decimal",
	"convert_int",
	"convert_date",
	"convert_currency",
	"convert_accounting",
	"read_csv",
	"to_csv",
	"PyFrameError",
	"PyFrameKeyError",
	"PyFrameValueError",
	"PyFrameTypeError",
	"PyFrameIndexError",
	"InvalidColumnError",
	"MissingColumnError",
	"SchemaMismatchError",
	"RowCountMismatchError",
	"DateParseError",
	"UnsupportedDialectError",
]
