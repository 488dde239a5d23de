"""
Application Layer for the Uplift sync core.

This package contains:
- ports/: Abstract store interfaces (what the sync core needs)
- services/: The SyncRepository coordinating both stores and the merge engine
- exceptions: Errors raised across the application and infrastructure layers
"""
