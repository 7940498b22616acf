# blog_api/core/ids.py
import uuid

from blog_api.core.errors import MalformedIdError


def parse_id(raw: str | uuid.UUID | None) -> uuid.UUID:
    """Parse a client-supplied record id, raising MalformedIdError if it is not a UUID."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw).strip())
    except (ValueError, AttributeError, TypeError):
        raise MalformedIdError()
