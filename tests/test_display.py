"""repr of PyFrame"""
from py_frame import PyFrame
from py_frame import display


def test_repr_small_frame():
	f = PyFrame([{'id': 1, 'name': 'ann'}, {'id': 20, 'name': 'bob'}])
	lines = repr(f).splitlines()
	assert lines[0] == "id  name"
	assert lines[1] == " 1  'ann'"
	assert lines[2] == "20  'bob'"
	assert lines[-1] == "# 2×2 frame"


def test_repr_empty():
	assert repr(PyFrame()) == "# 0×0 frame"


def test_repr_truncates_rows():
	f = PyFrame([{'n': i} for i in range(display.MAX_HEAD_ROWS * 2 + 3)])
	lines = repr(f).splitlines()
	assert '...' in lines
	# header + head + gap + tail + blank + footer
	assert len(lines) == 1 + display.MAX_HEAD_ROWS * 2 + 1 + 2
	assert lines[-1] == f"# {display.MAX_HEAD_ROWS * 2 + 3}×1 frame"


def test_repr_truncates_columns():
	f = PyFrame([{f'c{i}': i for i in range(display.MAX_HEAD_COLS * 2 + 1)}])
	header = repr(f).splitlines()[0]
	assert '...' in header
	assert 'c5' not in header.split()


def test_quoted_header():
	f = PyFrame([{'unit price': '1.00'}])
	assert repr(f).splitlines()[0].startswith("'unit price'")
