"""
Store Interfaces (Ports) for the Uplift sync core.

This package defines abstract interfaces that decouple the sync logic
from concrete persistence. Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the sync core needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import LocalStore, RemoteStore

    class SyncRepository:
        def __init__(self, local_store: LocalStore, remote_store: RemoteStore):
            self._local = local_store
            self._remote = remote_store
"""

from application.ports.local_store import LocalStore
from application.ports.remote_store import RemoteStore

__all__ = [
    "LocalStore",
    "RemoteStore",
]
