"""
SQL bridge against in-memory SQLite.
"""

import sqlite3

import pytest
from py_frame import PyFrame
from py_frame.errors import UnsupportedDialectError
from py_frame.sql import column_definitions, detect_dialect, query


def make_frame():
	return PyFrame([
		{'id': '1', 'name': 'ann', 'team': 'red'},
		{'id': '2', 'name': 'bob', 'team': 'blue'},
		{'id': '3', 'name': 'cy', 'team': 'red'},
	])


class FakeConnection:
	pass


class TestDialect:

	def test_sqlite(self):
		assert detect_dialect(sqlite3.connect(":memory:")) == "sqlite"

	def test_unknown_driver(self):
		with pytest.raises(UnsupportedDialectError, match="not yet supported"):
			detect_dialect(FakeConnection())

	def test_sqlite_columns(self):
		assert column_definitions(['a', 'b'], 'sqlite') == "a, b"

	def test_mysql_columns(self):
		assert column_definitions(['a', 'b'], 'mysql') == "a VARCHAR(255), b VARCHAR(255)"

	def test_unknown_dialect(self):
		with pytest.raises(UnsupportedDialectError, match="oracle"):
			column_definitions(['a'], 'oracle')


class TestQuery:

	def test_select(self):
		result = make_frame().query("SELECT name FROM dataframe WHERE team = 'red' ORDER BY id")
		assert result.columns == ('name',)
		assert result.to_records() == [{'name': 'ann'}, {'name': 'cy'}]

	def test_select_is_new_frame(self):
		f = make_frame()
		result = f.query("SELECT * FROM dataframe")
		assert result.to_records() == f.to_records()
		result.broadcast('name', 'x')
		assert f.row_at(0)['name'] == 'ann'

	def test_non_select_returns_whole_table(self):
		result = make_frame().query("DELETE FROM dataframe WHERE team = 'blue'")
		assert [row['id'] for row in result] == ['1', '3']

	def test_leading_whitespace_and_case(self):
		result = make_frame().query("  select count(*) AS n from dataframe")
		assert result.to_records() == [{'n': 3}]

	def test_given_connection_is_cleaned_up(self):
		conn = sqlite3.connect(":memory:")
		make_frame().query("SELECT * FROM dataframe", conn)
		tables = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
		assert tables == []

	def test_failed_sql_still_drops_working_table(self):
		conn = sqlite3.connect(":memory:")
		with pytest.raises(sqlite3.OperationalError):
			query(make_frame(), "SELECT missing_column FROM dataframe", conn)
		tables = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
		assert tables == []

	def test_default_connection_is_closed(self, monkeypatch):
		opened = []
		connect = sqlite3.connect

		def tracking_connect(*args, **kwargs):
			conn = connect(*args, **kwargs)
			opened.append(conn)
			return conn

		monkeypatch.setattr(sqlite3, "connect", tracking_connect)
		make_frame().query("SELECT * FROM dataframe")
		assert len(opened) == 1
		with pytest.raises(sqlite3.ProgrammingError):
			opened[0].execute("SELECT 1")

	def test_unsupported_connection(self):
		with pytest.raises(UnsupportedDialectError):
			query(make_frame(), "SELECT 1", FakeConnection())

	def test_empty_result_keeps_columns(self):
		result = make_frame().query("SELECT id, name FROM dataframe WHERE 1 = 0")
		assert result.columns == ('id', 'name')
		assert len(result) == 0


class TestToSql:

	def test_rows_inserted(self):
		conn = sqlite3.connect(":memory:")
		conn.execute("CREATE TABLE people (id, name, team)")
		make_frame().to_sql('people', conn)
		assert conn.execute("SELECT name FROM people ORDER BY id").fetchall() == [('ann',), ('bob',), ('cy',)]
