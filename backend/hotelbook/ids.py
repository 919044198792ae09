"""Row identifiers."""

import uuid


def new_id() -> str:
    """Return a random version-4 UUID in canonical 36-character form."""
    return str(uuid.uuid4())
