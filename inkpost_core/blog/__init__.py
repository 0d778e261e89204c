"""Blog content module for Inkpost Core.

Posts are created once and listed; there is no update, delete, filtering
or pagination.
"""

from . import schemas, service

__all__ = ["schemas", "service"]
