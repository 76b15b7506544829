"""Result types for railway-oriented programming.

Operations that can fail in an expected way (wrong password, exhausted trial,
upstream outage) return a Result instead of raising. The caller matches on it
and decides how the failure is presented.

Usage:
    def check_pages(count: int, ceiling: int) -> Result[int, str]:
        if count > ceiling:
            return Failure(error="too_many_pages")
        return Success(value=count)

    match check_pages(2, 10):
        case Success(value=count):
            print(f"{count} pages accepted")
        case Failure(error=code):
            print(f"Rejected: {code}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: What went wrong (usually a DomainError subclass).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
