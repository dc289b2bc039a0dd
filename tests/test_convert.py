"""Scalar normalizers used by convert_types"""
import pytest
from py_frame import (
	SemanticType,
	convert_accounting,
	convert_currency,
	convert_date,
	convert_decimal,
	convert_int,
)
from py_frame.errors import DateParseError, PyFrameValueError


class TestDecimal:

	@pytest.mark.parametrize("value,expected", [
		("1,234.50", "1234.50"),
		("$ 1,234.50", "1234.50"),
		(".5", "0.5"),
		("0", "0.00"),
		("", "0.00"),
		("-0.00", "0.00"),
		("5.00-", "-5.00"),
		(".50-", "-0.50"),
		(None, "0.00"),
		(12.5, "12.5"),
	])
	def test_decimal(self, value, expected):
		assert convert_decimal(value) == expected

	@pytest.mark.parametrize("value", ["1,234.50", "$9.99", "5.00-", ""])
	def test_idempotent(self, value):
		once = convert_decimal(value)
		assert convert_decimal(once) == once


class TestInt:

	@pytest.mark.parametrize("value,expected", [
		("1,234-", "-1234"),
		("", "0"),
		("1,000,000", "1000000"),
		("42", "42"),
		(7, "7"),
	])
	def test_int(self, value, expected):
		assert convert_int(value) == expected


class TestDate:

	def test_second_candidate_matches(self):
		assert convert_date("03/04/2020", ["Y-m-d", "m/d/Y"], "Y-m-d") == "2020-03-04"

	def test_first_candidate_wins(self):
		assert convert_date("2020-03-04", ["Y-m-d", "Y-d-m"], "m/d/Y") == "03/04/2020"

	def test_single_format(self):
		assert convert_date("2020-03-04", "Y-m-d", "d.m.y") == "04.03.20"

	def test_empty_value(self):
		assert convert_date("", ["m/d/Y"], "m/d/Y") == "0001-01-01"

	def test_unparseable(self):
		with pytest.raises(DateParseError, match="'not-a-date' with date format Y-m-d"):
			convert_date("not-a-date", ["Y-m-d"], "Y-m-d")

	def test_error_names_last_format(self):
		with pytest.raises(DateParseError) as excinfo:
			convert_date("nope", ["Y-m-d", "m/d/Y"], "Y-m-d")
		assert excinfo.value.value == "nope"
		assert excinfo.value.date_format == "m/d/Y"

	def test_single_format_unparseable(self):
		with pytest.raises(DateParseError):
			convert_date("2020/03/04", "Y-m-d", "Y-m-d")

	def test_no_candidates(self):
		with pytest.raises(DateParseError):
			convert_date("2020-03-04", [], "Y-m-d")

	def test_names_and_time_fields(self):
		assert convert_date("2021-07-05 14:09:03", "Y-m-d H:i:s", "D, j F Y g:i A") == "Mon, 5 July 2021 2:09 PM"

	def test_escaped_letters_are_literal(self):
		assert convert_date("2021-07-05", "Y-m-d", "\\Y\\e\\a\\r: Y") == "Year: 2021"

	def test_year_is_zero_padded(self):
		assert convert_date("0001-01-01", "Y-m-d", "Y/m/d") == "0001/01/01"

	def test_strftime_directives(self):
		assert convert_date("04/03/2020", "%d/%m/%Y", "%Y-%m-%d") == "2020-03-04"


class TestCurrency:

	@pytest.mark.parametrize("value,expected", [
		("-1234", "-$1,234.00"),
		("", "$0.00"),
		("1234567.89", "$1,234,567.89"),
		("12.", "$12.00"),
		("12.0", "$12.00"),
		("-", "$0.00"),
		(".5", "$0.5"),
		("-0.50", "-$0.50"),
		("1,234", "$1,234.00"),
	])
	def test_currency(self, value, expected):
		assert convert_currency(value) == expected

	@pytest.mark.parametrize("value,expected", [
		("-1234", "$(1,234.00)"),
		("", "$0.00"),
		("1234.56", "$1,234.56"),
		("-0.50", "$(0.50)"),
	])
	def test_accounting(self, value, expected):
		assert convert_accounting(value) == expected

	def test_non_numeric(self):
		with pytest.raises(PyFrameValueError, match="'abc'"):
			convert_currency("abc")


class TestSemanticType:

	@pytest.mark.parametrize("name,expected", [
		("DECIMAL", SemanticType.DECIMAL),
		("int", SemanticType.INT),
		("Integer", SemanticType.INT),
		(" date ", SemanticType.DATE),
		(SemanticType.CURRENCY, SemanticType.CURRENCY),
		("accounting", SemanticType.ACCOUNTING),
		("VARCHAR", None),
		(3, None),
	])
	def test_lookup(self, name, expected):
		assert SemanticType.lookup(name) is expected
