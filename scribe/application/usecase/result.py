"""Typed use case results.

Use cases return one of these instead of raising for expected outcomes.
The interface layer maps each kind to an HTTP status.
"""

from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class Success(BaseModel, Generic[T]):
    """Operation completed; ``data`` is None when there is nothing to return."""

    data: Optional[T] = None


class Invalid(BaseModel):
    """Input failed validation."""

    errors: dict[str, list[str]]


class NotFound(BaseModel):
    """Requested resource does not exist for this user."""

    resource: str
    identifier: str


class Unexpected(BaseModel):
    """Operation failed for a reason the caller cannot fix."""

    error: str
    error_type: str


Result = Union[Success, Invalid, NotFound, Unexpected]
