"""Shared pytest fixtures for slicereader tests."""

import pytest

from slicereader import SliceReader
from tests.fixtures import ALL_SEQUENCES, MIXED


@pytest.fixture
def mixed_reader():
    """Reader over ["value1", "value2", False, True], positioned at 0."""
    return SliceReader(MIXED)


@pytest.fixture(params=ALL_SEQUENCES, ids=["empty", "single", "pair", "mixed"])
def sequence(request):
    """Each sample sequence in turn."""
    return request.param
