"""Use case to report income, expenses and balance per category."""

from src.application.cancellation import CancellationToken
from src.application.ports.dashboard_repository import DashboardRepositoryPort
from src.domain.models import TotalsByCategory
from src.domain.services.dashboard import compute_grand_total
from src.infrastructure.logging.logger import get_app_logger


class GetTotalsByCategoryUseCase:
    """Compute per-category totals and their grand total."""

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
    ) -> TotalsByCategory:
        """Return per-category rows (ordered by description) and the total.

        Args:
            cancellation: Optional token aborting the underlying query.

        Returns:
            TotalsByCategory: Rows plus the consolidated grand total.
        """
        items = self._dashboard_repository.fetch_totals_by_category(
            cancellation=cancellation,
        )
        grand_total = compute_grand_total(items)
        self._logger.info(
            f"Totals by category computed for {len(items)} categories: "
            f"income={grand_total.total_income}, "
            f"expense={grand_total.total_expense}, "
            f"balance={grand_total.balance}"
        )
        return TotalsByCategory(items=items, grand_total=grand_total)


__all__ = ["GetTotalsByCategoryUseCase", "TotalsByCategory"]
