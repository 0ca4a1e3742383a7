"""Port for grouped dashboard reads."""

from typing import Protocol

from src.application.cancellation import CancellationToken
from src.domain.models import CategoryTotals, PersonTotals


class DashboardRepositoryPort(Protocol):
    """Port exposing per-group income and expense sums."""

    def fetch_totals_by_person(
        self,
        cancellation: CancellationToken | None = None,
    ) -> list[PersonTotals]:
        """Return one row per person, including people without activity."""

    def fetch_totals_by_category(
        self,
        cancellation: CancellationToken | None = None,
    ) -> list[CategoryTotals]:
        """Return one row per category, ordered by description."""


__all__ = ["DashboardRepositoryPort"]
