"""
Remote store adapters (RemoteStore implementations).

Usage:
    from supabase import create_client
    from infrastructure.remote import SupabaseRemoteStore

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    remote_store = SupabaseRemoteStore(client)
"""

from infrastructure.remote.disabled_store import DisabledRemoteStore
from infrastructure.remote.supabase_store import SupabaseRemoteStore

__all__ = [
    "DisabledRemoteStore",
    "SupabaseRemoteStore",
]
