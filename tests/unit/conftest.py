"""
Shared fixtures for unit tests.

Provides fresh fake stores and a SyncRepository wired to them, so each
test starts from empty stores with no failures injected.
"""

import pytest

from application.services import SyncRepository
from tests.fakes import FakeLocalStore, FakeRemoteStore


@pytest.fixture
def local_store() -> FakeLocalStore:
    return FakeLocalStore()


@pytest.fixture
def remote_store() -> FakeRemoteStore:
    return FakeRemoteStore()


@pytest.fixture
def repo(local_store: FakeLocalStore, remote_store: FakeRemoteStore) -> SyncRepository:
    return SyncRepository(local_store=local_store, remote_store=remote_store)
