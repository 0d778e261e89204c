"""Record ID generation.

Users and blog posts get a random UUID v4 as their primary key. This is the
only module that imports uuid4; everything else calls uid.generate_uuid().
"""

from uuid import uuid4


def generate_uuid() -> str:
    """Return a new record ID."""
    return str(uuid4())
