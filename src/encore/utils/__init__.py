"""Shared utilities for Encore.

Contains cross-cutting utilities used by multiple modules.
"""

from encore.utils.time import utc_now, utc_timestamp

__all__ = ["utc_now", "utc_timestamp"]
