"""Utility functions for Inkpost Core.

This package provides centralized utilities for common operations.
Import convention: use module-level imports for clarity.

    from utils import isodatetime, uid
    timestamp = isodatetime.now()
    lifetime = isodatetime.parse_duration("1d")
    uuid = uid.generate_uuid()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
