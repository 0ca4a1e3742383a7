"""Use case to report income, expenses and balance per person."""

from src.application.cancellation import CancellationToken
from src.application.ports.dashboard_repository import DashboardRepositoryPort
from src.domain.models import TotalsByPerson
from src.domain.services.dashboard import compute_grand_total
from src.infrastructure.logging.logger import get_app_logger


class GetTotalsByPersonUseCase:
    """Compute per-person totals and their grand total."""

    def __init__(
        self,
        dashboard_repository: DashboardRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            dashboard_repository: Port providing grouped sums.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._dashboard_repository = dashboard_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        cancellation: CancellationToken | None = None,
    ) -> TotalsByPerson:
        """Return per-person rows and the grand total derived from them.

        Both parts come from a single repository read, so the grand total
        always matches the rows returned alongside it.

        Args:
            cancellation: Optional token aborting the underlying query.

        Returns:
            TotalsByPerson: Rows plus the consolidated grand total.
        """
        items = self._dashboard_repository.fetch_totals_by_person(
            cancellation=cancellation,
        )
        grand_total = compute_grand_total(items)
        self._logger.info(
            f"Totals by person computed for {len(items)} people: "
            f"income={grand_total.total_income}, "
            f"expense={grand_total.total_expense}, "
            f"balance={grand_total.balance}"
        )
        return TotalsByPerson(items=items, grand_total=grand_total)


__all__ = ["GetTotalsByPersonUseCase", "TotalsByPerson"]
