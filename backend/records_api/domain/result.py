"""Tagged success / failure values threaded through every call chain."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from records_api.domain.exceptions import OperationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying an ``OperationError``."""

    error: OperationError


Result = Union[Ok[T], Err]

# Outcome of a remote call; same shape as Result.
FetchResult = Result
