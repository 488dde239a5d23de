"""
Factory for the SyncRepository and its collaborators.

Replaces process-wide store singletons with explicit construction: the
presentation layer receives a SyncRepository built here, and tests build
their own with fakes.

Usage:
    from backend.bootstrap import create_sync_repository
    from backend.settings import Settings

    # Default repository (uses get_settings())
    repo = create_sync_repository()

    # Local-only repository for tests
    repo = create_sync_repository(
        Settings(environment="test", remote_sync_enabled=False, _env_file=None)
    )
"""

import logging
from typing import Optional

import sentry_sdk
from supabase import create_client

from application.ports import LocalStore, RemoteStore
from application.services import SyncRepository
from backend.settings import Settings, get_settings
from domain.services import MergeEngine
from infrastructure import (
    DisabledRemoteStore,
    InMemoryLocalStore,
    JsonFileLocalStore,
    SupabaseRemoteStore,
)

logger = logging.getLogger(__name__)


def create_sync_repository(
    settings: Optional[Settings] = None,
    *,
    local_store: Optional[LocalStore] = None,
    remote_store: Optional[RemoteStore] = None,
    merge_engine: Optional[MergeEngine] = None,
) -> SyncRepository:
    """
    Create a SyncRepository wired from settings.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings().
        local_store: Override for the configured local store
        remote_store: Override for the configured remote store
        merge_engine: Override for the default MergeEngine

    Returns:
        Configured SyncRepository instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    if local_store is None:
        local_store = create_local_store(settings)
    if remote_store is None:
        remote_store = create_remote_store(settings)

    return SyncRepository(
        local_store=local_store,
        remote_store=remote_store,
        merge_engine=merge_engine,
    )


def create_local_store(settings: Settings) -> LocalStore:
    """JSON file store when a path is configured, in-memory otherwise."""
    if settings.local_store_path:
        logger.info(f"Using local store file {settings.local_store_path}")
        return JsonFileLocalStore(settings.local_store_path)
    logger.warning("No local store path configured, data will not persist")
    return InMemoryLocalStore()


def create_remote_store(settings: Settings) -> RemoteStore:
    """Supabase store when configured, DisabledRemoteStore otherwise."""
    if not settings.remote_sync_enabled:
        logger.info("Remote sync disabled, running local-only")
        return DisabledRemoteStore("remote sync is disabled")
    if not settings.remote_configured:
        logger.warning("Supabase credentials not configured, running local-only")
        return DisabledRemoteStore("remote store is not configured")

    client = create_client(settings.supabase_url, settings.supabase_key)
    logger.info("Remote sync enabled (Supabase)")
    return SupabaseRemoteStore(
        client,
        workouts_table=settings.supabase_workouts_table,
        templates_table=settings.supabase_templates_table,
        max_attempts=settings.remote_max_attempts,
        min_wait_seconds=settings.remote_min_wait_seconds,
        max_wait_seconds=settings.remote_max_wait_seconds,
    )


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for uplift sync")
