"""CLI adapter printing the dashboard totals to the terminal."""

from src.application.use_cases import (
    GetTotalsByCategoryUseCase,
    GetTotalsByPersonUseCase,
)
from src.infrastructure.container import (
    build_dashboard_repository,
    build_database_adapter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import format_amount

_HEADER = f"{'':<32} {'Income':>12} {'Expense':>12} {'Balance':>12}"


def _format_row(label: str, income, expense, balance) -> str:
    return (
        f"{label[:32]:<32} "
        f"{format_amount(income):>12} "
        f"{format_amount(expense):>12} "
        f"{format_amount(balance):>12}"
    )


def render_report(totals_by_person, totals_by_category) -> list[str]:
    """Render both dashboard views as printable lines.

    Args:
        totals_by_person: Result of the per-person use case.
        totals_by_category: Result of the per-category use case.

    Returns:
        list[str]: Report lines, sections separated by a blank line.
    """
    lines = ["Totals by person", _HEADER]
    for row in totals_by_person.items:
        lines.append(
            _format_row(
                row.person_name,
                row.total_income,
                row.total_expense,
                row.balance,
            )
        )
    total = totals_by_person.grand_total
    lines.append(
        _format_row(
            "TOTAL",
            total.total_income,
            total.total_expense,
            total.balance,
        )
    )

    lines.extend(["", "Totals by category", _HEADER])
    for row in totals_by_category.items:
        lines.append(
            _format_row(
                row.category_description,
                row.total_income,
                row.total_expense,
                row.balance,
            )
        )
    total = totals_by_category.grand_total
    lines.append(
        _format_row(
            "TOTAL",
            total.total_income,
            total.total_expense,
            total.balance,
        )
    )
    return lines


def main() -> None:
    """Print per-person and per-category totals."""
    logger = get_app_logger()
    repository = build_dashboard_repository(build_database_adapter())

    by_person = GetTotalsByPersonUseCase(repository, logger=logger).execute()
    by_category = GetTotalsByCategoryUseCase(
        repository,
        logger=logger,
    ).execute()

    for line in render_report(by_person, by_category):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
