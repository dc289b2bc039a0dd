"""
Scalar normalizers behind PyFrame.convert_types.

Every normalizer takes the cell's text and returns text: values stay
string-like after conversion, only their spelling changes. ``None`` is
treated as the empty string.

Date formats use PHP-style letters (``Y-m-d``, ``m/d/Y``, ``d M Y H:i``);
a format containing ``%`` is passed to ``strptime``/``strftime`` as is.
"""

from __future__ import annotations
import enum
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable

from .errors import DateParseError, PyFrameValueError

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "Y-m-d"
EMPTY_DATE = "0001-01-01"

_MONTHS = ("January", "February", "March", "April", "May", "June", "July",
	"August", "September", "October", "November", "December")
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# format letter -> strptime directive
_PARSE_DIRECTIVES = {
	'Y': '%Y', 'y': '%y',
	'm': '%m', 'n': '%m',
	'd': '%d', 'j': '%d',
	'H': '%H', 'G': '%H',
	'h': '%I', 'g': '%I',
	'i': '%M', 's': '%S',
	'A': '%p', 'a': '%p',
	'M': '%b', 'F': '%B',
	'D': '%a', 'l': '%A',
}

# format letter -> renderer; locale independent, unlike strftime
_RENDERERS = {
	'Y': lambda dt: f"{dt.year:04d}",
	'y': lambda dt: f"{dt.year % 100:02d}",
	'm': lambda dt: f"{dt.month:02d}",
	'n': lambda dt: str(dt.month),
	'd': lambda dt: f"{dt.day:02d}",
	'j': lambda dt: str(dt.day),
	'H': lambda dt: f"{dt.hour:02d}",
	'G': lambda dt: str(dt.hour),
	'h': lambda dt: f"{dt.hour % 12 or 12:02d}",
	'g': lambda dt: str(dt.hour % 12 or 12),
	'i': lambda dt: f"{dt.minute:02d}",
	's': lambda dt: f"{dt.second:02d}",
	'A': lambda dt: "PM" if dt.hour >= 12 else "AM",
	'a': lambda dt: "pm" if dt.hour >= 12 else "am",
	'M': lambda dt: _MONTHS[dt.month - 1][:3],
	'F': lambda dt: _MONTHS[dt.month - 1],
	'D': lambda dt: _WEEKDAYS[dt.weekday()][:3],
	'l': lambda dt: _WEEKDAYS[dt.weekday()],
}


class SemanticType(str, enum.Enum):
	"""Semantic column types understood by convert_types."""
	DECIMAL = "DECIMAL"
	INT = "INT"
	DATE = "DATE"
	CURRENCY = "CURRENCY"
	ACCOUNTING = "ACCOUNTING"

	@classmethod
	def lookup(cls, name):
		"""Resolve a member or a case-insensitive name; None when unrecognized."""
		if isinstance(name, cls):
			return name
		if not isinstance(name, str):
			return None
		key = name.strip().upper()
		if key == "INTEGER":
			key = "INT"
		try:
			return cls(key)
		except ValueError:
			return None


def _text(value) -> str:
	if value is None:
		return ""
	return value if isinstance(value, str) else str(value)


def _move_trailing_minus(value: str) -> str:
	if value.endswith('-'):
		return '-' + value[:-1]
	return value


def convert_decimal(value) -> str:
	"""Normalize a decimal amount: ``"$1,234.50-"`` -> ``"-1234.50"``."""
	value = _text(value)
	for ch in ('$', ',', ' '):
		value = value.replace(ch, '')

	if value.startswith('.'):
		value = '0' + value

	if value in ('0', '', '-0.00'):
		return '0.00'

	return _move_trailing_minus(value)


def convert_int(value) -> str:
	"""Normalize an integer: ``""`` -> ``"0"``, ``"1,234-"`` -> ``"-1234"``."""
	value = _text(value)
	if value == '':
		return '0'
	return _move_trailing_minus(value).replace(',', '')


def _tokenize(date_format: str):
	"""Yield (is_field, text) pairs; a backslash escapes the next character."""
	escaped = False
	for ch in date_format:
		if escaped:
			yield False, ch
			escaped = False
		elif ch == '\\':
			escaped = True
		else:
			yield ch in _PARSE_DIRECTIVES, ch


def _strptime_pattern(date_format: str) -> str:
	parts = []
	for is_field, ch in _tokenize(date_format):
		if is_field:
			parts.append(_PARSE_DIRECTIVES[ch])
		else:
			parts.append('%%' if ch == '%' else ch)
	return ''.join(parts)


def parse_date(value: str, date_format: str) -> datetime:
	"""Parse ``value`` with one format; raises ValueError when it doesn't fit."""
	if '%' in date_format:
		return datetime.strptime(value, date_format)
	return datetime.strptime(value, _strptime_pattern(date_format))


def format_date(moment: datetime, date_format: str) -> str:
	if '%' in date_format:
		return moment.strftime(date_format)
	return ''.join(
		_RENDERERS[ch](moment) if is_field else ch
		for is_field, ch in _tokenize(date_format)
	)


def convert_date(value, from_formats: str | Iterable[str] = DEFAULT_DATE_FORMAT,
		to_format: str = DEFAULT_DATE_FORMAT) -> str:
	"""
	Re-render a date string in ``to_format``.

	``from_formats`` is one format or an ordered list of candidates; the
	first that parses ``value`` wins. Empty values become ``EMPTY_DATE``.

	Raises
	------
	DateParseError
		No candidate parsed the value. Names the value and the last
		format tried.
	"""
	value = _text(value)
	if value == '':
		return EMPTY_DATE

	if isinstance(from_formats, str):
		from_formats = [from_formats]

	last_format = None
	for date_format in from_formats:
		last_format = date_format
		try:
			moment = parse_date(value, date_format)
		except ValueError:
			continue
		return format_date(moment, to_format)

	raise DateParseError(value, last_format)


def _split_amount(value: str):
	"""Split into (negative, grouped integer part, fraction) with defaults applied."""
	parts = value.split('.')
	integer = parts[0]
	fraction = parts[1] if len(parts) > 1 else '00'

	if integer in ('', '-'):
		integer = '0'
	if fraction in ('', '0'):
		fraction = '00'

	digits = integer.replace(',', '').replace('$', '').replace(' ', '')
	negative = digits.startswith('-')
	if negative:
		digits = digits[1:]

	try:
		amount = Decimal(digits)
	except InvalidOperation:
		raise PyFrameValueError(f"Cannot format '{value}' as an amount: integer part is not numeric") from None
	if not amount.is_finite():
		raise PyFrameValueError(f"Cannot format '{value}' as an amount: integer part is not finite")

	grouped = f"{int(amount.to_integral_value(rounding=ROUND_HALF_UP)):,}"
	return negative, grouped, fraction


def convert_currency(value) -> str:
	"""``"-1234"`` -> ``"-$1,234.00"``; ``"1234.5"`` -> ``"$1,234.5"``."""
	negative, grouped, fraction = _split_amount(_text(value))
	dollars = f"{grouped}.{fraction}"
	if negative:
		return '-$' + dollars
	return '$' + dollars


def convert_accounting(value) -> str:
	"""Like convert_currency, but negatives are parenthesized: ``"$(1,234.00)"``."""
	negative, grouped, fraction = _split_amount(_text(value))
	dollars = f"{grouped}.{fraction}"
	if negative:
		return f"$({dollars})"
	return '$' + dollars


def normalizer_for(semantic_type: SemanticType, from_formats=DEFAULT_DATE_FORMAT,
		to_format=DEFAULT_DATE_FORMAT):
	"""Return the one-argument normalizer for ``semantic_type``."""
	if semantic_type is SemanticType.DECIMAL:
		return convert_decimal
	if semantic_type is SemanticType.INT:
		return convert_int
	if semantic_type is SemanticType.DATE:
		return lambda value: convert_date(value, from_formats, to_format)
	if semantic_type is SemanticType.CURRENCY:
		return convert_currency
	if semantic_type is SemanticType.ACCOUNTING:
		return convert_accounting
	raise PyFrameValueError(f"No normalizer for semantic type {semantic_type!r}")
