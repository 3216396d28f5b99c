"""Shared fixtures for the tracker tests."""

import itertools

import pytest

from jobtracker.storage import EntryStorage, InMemoryStore
from jobtracker.tracker import TrackerView


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def storage(store):
    return EntryStorage(store)


@pytest.fixture
def clock():
    ticks = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def tracker(storage, clock):
    return TrackerView(storage, clock=clock)
