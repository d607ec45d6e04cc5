"""Record store policies for operations that target an absent id."""

from enum import Enum


class UpdatePolicy(str, Enum):
    """What ``update`` does when the target id does not exist."""

    STRICT = "strict"   # fail with NOT_FOUND
    UPSERT = "upsert"   # create the record


class DeletePolicy(str, Enum):
    """What ``delete`` does when the target id does not exist."""

    STRICT = "strict"          # fail with NOT_FOUND
    IDEMPOTENT = "idempotent"  # succeed as a no-op
