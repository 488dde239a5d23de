"""
E2E test fixtures.

These fixtures provide:
- A JsonFileLocalStore backed by a per-test file
- An in-memory remote store
- A SyncRepository wired to both
"""

import pytest

from application.services import SyncRepository
from infrastructure import JsonFileLocalStore
from tests.fakes import FakeRemoteStore


@pytest.fixture
def local(tmp_path) -> JsonFileLocalStore:
    return JsonFileLocalStore(tmp_path / "store.json")


@pytest.fixture
def remote() -> FakeRemoteStore:
    return FakeRemoteStore()


@pytest.fixture
def repo(local: JsonFileLocalStore, remote: FakeRemoteStore) -> SyncRepository:
    return SyncRepository(local_store=local, remote_store=remote)
