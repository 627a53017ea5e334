"""Shared test fixtures for langnames tests."""

import io

import pytest


class FlushRecorder(io.StringIO):
    """StringIO that remembers what had been flushed, one snapshot per flush()."""

    def __init__(self):
        super().__init__()
        self.snapshots = []

    def flush(self):
        super().flush()
        self.snapshots.append(self.getvalue())


@pytest.fixture
def flush_recorder():
    return FlushRecorder()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def split_rows():
    """Split captured output into lists of cells, header included."""
    def _split(text):
        return [line.split("\t") for line in text.splitlines()]
    return _split
