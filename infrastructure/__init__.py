"""
Infrastructure Layer for the Uplift sync core.

This package contains concrete implementations of the store interfaces:
- local/: On-device stores (JSON file, in-memory)
- remote/: Off-device stores (Supabase, disabled)
"""

from infrastructure.local import InMemoryLocalStore, JsonFileLocalStore
from infrastructure.remote import DisabledRemoteStore, SupabaseRemoteStore

__all__ = [
    "InMemoryLocalStore",
    "JsonFileLocalStore",
    "DisabledRemoteStore",
    "SupabaseRemoteStore",
]
