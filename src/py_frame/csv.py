"""CSV reading and writing for PyFrame."""

import csv
import logging

logger = logging.getLogger(__name__)


def read_csv(path, delimiter=',', encoding='utf-8', **kwargs):
	"""
	Read a CSV file with a header row into a PyFrame.

	Every value stays a string; use PyFrame.convert_types to normalize them.
	Extra keyword arguments go to csv.reader.
	"""
	from .frame import PyFrame

	with open(path, newline='', encoding=encoding) as f:
		reader = csv.reader(f, delimiter=delimiter, **kwargs)
		header = next(reader, None)
		if header is None:
			return PyFrame()
		records = [record for record in reader if record]

	logger.debug("Read %d rows from %s", len(records), path)
	return PyFrame.from_records(records, header)


def to_csv(frame, path, delimiter=',', encoding='utf-8', **kwargs):
	"""Write ``frame`` to ``path`` with a header row."""
	columns = frame.columns
	with open(path, 'w', newline='', encoding=encoding) as f:
		writer = csv.writer(f, delimiter=delimiter, **kwargs)
		writer.writerow(columns)
		for i in range(frame.row_count()):
			row = frame.row_at(i)
			writer.writerow(['' if row[c] is None else row[c] for c in columns])

	logger.debug("Wrote %d rows to %s", frame.row_count(), path)
