import uuid


def new_id() -> str:
    """Opaque, unique record id."""
    return uuid.uuid4().hex
