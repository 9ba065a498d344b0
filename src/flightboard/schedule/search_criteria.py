from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from typing import Optional


class InvalidSearchError(ValueError):
    """Raised when a search form is incomplete or self-contradictory."""


@dataclass(frozen=True)
class SearchCriteria:
    """What the user asked for on the search form."""

    origin_id: Optional[str]
    destination_id: Optional[str]
    date: date_type
    airline_id: Optional[str]

    def validate(self) -> "SearchCriteria":
        if not self.origin_id or not self.destination_id or not self.airline_id:
            raise InvalidSearchError("Please select origin, destination and airline")
        if self.origin_id == self.destination_id:
            raise InvalidSearchError("Origin and destination cannot be the same")
        return self


__all__ = ["InvalidSearchError", "SearchCriteria"]
