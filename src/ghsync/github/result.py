"""
Success-or-error results returned by the client.

Every client operation returns either ``Ok`` (the parsed value plus the HTTP
status code and headers of the final response) or ``Err`` (a typed ApiError).
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, TypeVar, Union

from ..errors import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful response"""
    value: T
    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed response"""
    error: ApiError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the wrapped error"""
        raise self.error


Result = Union[Ok[T], Err]
