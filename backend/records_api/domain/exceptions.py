"""Domain error taxonomy, framework-independent.

Expected failures travel as ``OperationError`` values inside a ``Result``.
``OperationErrorException`` only exists to carry such a value out of a
route handler so that one exception handler renders every error body.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Classification of an operation failure."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UPSTREAM_FAILURE = "upstream_failure"
    DECODE_FAILURE = "decode_failure"
    INVALID_INPUT = "invalid_input"
    STORE_UNAVAILABLE = "store_unavailable"
    INTERNAL_FAULT = "internal_fault"


_DEFAULT_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UPSTREAM_FAILURE: 502,
    ErrorKind.DECODE_FAILURE: 500,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.STORE_UNAVAILABLE: 500,
    ErrorKind.INTERNAL_FAULT: 500,
}


@dataclass(frozen=True)
class OperationError:
    """Typed failure value returned (not raised) by store and client operations."""

    kind: ErrorKind
    reason: str
    status_hint: int

    @classmethod
    def not_found(cls, entity_type: str, entity_id: str) -> "OperationError":
        return cls._of(ErrorKind.NOT_FOUND, f"{entity_type} with id '{entity_id}' not found")

    @classmethod
    def conflict(cls, entity_type: str, entity_id: str) -> "OperationError":
        return cls._of(ErrorKind.CONFLICT, f"{entity_type} with id '{entity_id}' already exists")

    @classmethod
    def upstream_failure(cls, reason: str) -> "OperationError":
        return cls._of(ErrorKind.UPSTREAM_FAILURE, reason)

    @classmethod
    def decode_failure(cls, reason: str) -> "OperationError":
        return cls._of(ErrorKind.DECODE_FAILURE, reason)

    @classmethod
    def invalid_input(cls, reason: str) -> "OperationError":
        return cls._of(ErrorKind.INVALID_INPUT, reason)

    @classmethod
    def store_unavailable(cls, reason: str) -> "OperationError":
        return cls._of(ErrorKind.STORE_UNAVAILABLE, reason)

    @classmethod
    def internal_fault(cls, reason: str = "Internal server error") -> "OperationError":
        return cls._of(ErrorKind.INTERNAL_FAULT, reason)

    @classmethod
    def _of(cls, kind: ErrorKind, reason: str) -> "OperationError":
        return cls(kind=kind, reason=reason, status_hint=_DEFAULT_STATUS[kind])


class OperationErrorException(Exception):
    """Raised by the presentation layer to turn an ``OperationError`` into a response."""

    def __init__(self, error: OperationError, status_code: int | None = None):
        self.error = error
        self.status_code = status_code if status_code is not None else error.status_hint
        super().__init__(f"[{error.kind.value}] {self.status_code}: {error.reason}")
