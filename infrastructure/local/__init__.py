"""
Local store adapters (LocalStore implementations).
"""

from infrastructure.local.json_file_store import JsonFileLocalStore
from infrastructure.local.memory_store import InMemoryLocalStore

__all__ = [
    "InMemoryLocalStore",
    "JsonFileLocalStore",
]
