"""Domain value objects for Scribe."""

import math
from typing import Generic, TypeVar

from pydantic import Field, computed_field

from scribe.domain.value.common import ValueObject

T = TypeVar("T")


class Page(ValueObject, Generic[T]):
    """One page of an ordered listing.

    Pages are 1-based. ``total`` counts every matching item, not only the
    ones on this page.
    """

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    per_page: int = Field(ge=1)

    @computed_field
    @property
    def last_page(self) -> int:
        """Number of the last page (at least 1, even for empty listings)."""
        return max(1, math.ceil(self.total / self.per_page))
