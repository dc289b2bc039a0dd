"""
SQL bridge: load a PyFrame into a DB-API connection, query it, and wrap the
result in a new PyFrame.

The dialect is read off the connection's driver module, the way a DB-API
connection announces itself: ``type(conn).__module__``. Only SQLite and MySQL
drivers are recognized; anything else is refused rather than guessed at.
"""

from __future__ import annotations
import logging
import sqlite3

from .errors import UnsupportedDialectError

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "dataframe"

SQLITE = "sqlite"
MYSQL = "mysql"

# driver package -> dialect
_DRIVERS = {
	"sqlite3": SQLITE,
	"pymysql": MYSQL,
	"MySQLdb": MYSQL,
	"mysql": MYSQL,
}

_PLACEHOLDERS = {
	SQLITE: "?",
	MYSQL: "%s",
}


def detect_dialect(connection) -> str:
	"""Return 'sqlite' or 'mysql' for a DB-API connection."""
	driver = type(connection).__module__.split('.')[0]
	dialect = _DRIVERS.get(driver)
	if dialect is None:
		raise UnsupportedDialectError(f"{driver} is not yet supported for PyFrame query.")
	return dialect


def column_definitions(columns, dialect: str) -> str:
	"""Render the column list of a CREATE TABLE statement for ``dialect``."""
	if dialect == SQLITE:
		return ", ".join(str(column) for column in columns)
	if dialect == MYSQL:
		return ", ".join(f"{column} VARCHAR(255)" for column in columns)
	raise UnsupportedDialectError(f"{dialect} is not yet supported for PyFrame query.")


def to_sql(frame, table: str, connection) -> None:
	"""Insert every row of ``frame`` into an existing ``table``."""
	dialect = detect_dialect(connection)
	columns = frame.columns
	if not columns or len(frame) == 0:
		return

	placeholder = _PLACEHOLDERS[dialect]
	statement = (
		f"INSERT INTO {table} ({', '.join(str(c) for c in columns)}) "
		f"VALUES ({', '.join(placeholder for _ in columns)})"
	)
	values = [tuple(row[c] for c in columns) for row in frame.to_records()]

	logger.debug("%s (%d rows)", statement, len(values))
	cursor = connection.cursor()
	try:
		cursor.executemany(statement, values)
	finally:
		cursor.close()
	connection.commit()


def _fetch_frame(cursor):
	from .frame import PyFrame

	columns = [d[0] for d in cursor.description] if cursor.description else []
	return PyFrame.from_records(cursor.fetchall(), columns)


def query(frame, sql: str, connection=None, table: str = DEFAULT_TABLE):
	"""
	Run ``sql`` against ``frame`` loaded as ``table`` and return the result.

	Args:
		frame: PyFrame to load
		sql: SELECT returns its result set; any other statement is executed
			and the whole table is selected afterwards
		connection: DB-API connection; defaults to a fresh in-memory SQLite
		table: name of the working table, dropped again afterwards

	Returns:
		New PyFrame built from the result rows.
	"""
	sql = sql.strip()
	query_type = sql.split(None, 1)[0].upper() if sql else ""

	owns_connection = connection is None
	if owns_connection:
		connection = sqlite3.connect(":memory:")

	try:
		dialect = detect_dialect(connection)
		sql_columns = column_definitions(frame.columns, dialect)

		cursor = connection.cursor()
		try:
			_execute(cursor, f"DROP TABLE IF EXISTS {table}")
			_execute(cursor, f"CREATE TABLE IF NOT EXISTS {table} ({sql_columns})")
			connection.commit()

			to_sql(frame, table, connection)

			if query_type == "SELECT":
				_execute(cursor, sql)
			else:
				_execute(cursor, sql)
				connection.commit()
				_execute(cursor, f"SELECT * FROM {table}")
			result = _fetch_frame(cursor)
		finally:
			# the working table never outlives the call, even when sql fails
			try:
				_execute(cursor, f"DROP TABLE IF EXISTS {table}")
				connection.commit()
			finally:
				cursor.close()
	finally:
		if owns_connection:
			connection.close()

	return result


def _execute(cursor, statement):
	logger.debug(statement)
	cursor.execute(statement)
