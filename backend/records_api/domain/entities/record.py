"""Domain entity — pure Python business object for a stored record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """Core domain entity representing a catalogued record.

    The ``id`` is assigned by the caller and never generated by the store.
    Records are replaced wholesale on update, so the entity is immutable.
    """

    id: str
    name: str
    description: str
    page_count: int = 0
