"""Ordering and paging parameters shared by list queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderSpec:
    """Requested sort.

    Attributes:
        property_name: Name of a response field to sort by. Names that are
            not orderable for the response shape are ignored.
        descending: Sort descending instead of ascending.
    """

    property_name: str | None = None
    descending: bool = False


@dataclass(frozen=True)
class PageSpec:
    """Requested page, plus the size of the unpaged result once counted.

    Attributes:
        page_number: 1-based page index.
        count_per_page: Page size. Paging applies only when both this and
            ``page_number`` are positive.
        total_count: Size of the filtered set before paging. Output only;
            filled in by :meth:`geodex.service_layer.composer.QueryResult.count`.
    """

    page_number: int = 1
    count_per_page: int = 0
    total_count: int = field(default=0, compare=False)

    @property
    def is_paged(self) -> bool:
        return self.page_number > 0 and self.count_per_page > 0

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.count_per_page
