import gzip

import pytest


@pytest.fixture
def write_input(tmp_path):
    """Write sparse input text to a file and return its path."""
    def _write(text, name="distances.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def read_matrix():
    """Decompress a matrix file and return its lines (last one is empty)."""
    def _read(path):
        with gzip.open(path, 'rt') as f:
            return f.read().split('\n')
    return _read
