"""Pagination parameters for list queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass
class Paging:
    page: int = 0
    limit: int = 0
    total: int = 0

    def process(self) -> None:
        """Replace out-of-range values with the defaults."""
        if self.page <= 0:
            self.page = DEFAULT_PAGE
        if self.limit <= 0 or self.limit > MAX_LIMIT:
            self.limit = DEFAULT_LIMIT

    def to_dict(self) -> dict[str, Any]:
        return {"page": self.page, "limit": self.limit, "total": self.total}