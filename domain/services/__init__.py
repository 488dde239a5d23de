"""
Domain services for the Uplift sync core.

Pure, side-effect-free logic operating on domain models.
"""

from domain.services.merge_engine import MergeEngine, OneSided

__all__ = [
    "MergeEngine",
    "OneSided",
]
