"""
End-to-end sync scenarios.

These tests drive a SyncRepository wired to a real JsonFileLocalStore
and an in-memory remote, covering the full fetch, merge, reconcile
and write-through flows.

Usage:
    pytest -m e2e tests/e2e/
"""
