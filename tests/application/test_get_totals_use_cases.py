"""Tests for the dashboard totals use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.cancellation import (
    CancellationToken,
    OperationCancelledError,
)
from src.application.use_cases.get_totals_by_category import (
    GetTotalsByCategoryUseCase,
)
from src.application.use_cases.get_totals_by_person import (
    GetTotalsByPersonUseCase,
)
from src.domain.models import CategoryTotals, PersonTotals
from fakes import FakeDashboardRepository


def _person_row(person_id, name, income, expense) -> PersonTotals:
    income, expense = Decimal(income), Decimal(expense)
    return PersonTotals(
        person_id=person_id,
        person_name=name,
        total_income=income,
        total_expense=expense,
        balance=income - expense,
    )


def _category_row(category_id, description, income, expense):
    income, expense = Decimal(income), Decimal(expense)
    return CategoryTotals(
        category_id=category_id,
        category_description=description,
        total_income=income,
        total_expense=expense,
        balance=income - expense,
    )


def test_totals_by_person_grand_total_matches_rows():
    """Grand total must equal the sum of the rows returned with it."""
    repository = FakeDashboardRepository(
        person_rows=[
            _person_row(1, "Ana", "100.00", "40.00"),
            _person_row(2, "Bob", "0.00", "20.00"),
            _person_row(3, "Cid", "0.00", "0.00"),
        ]
    )
    logger = MagicMock()
    use_case = GetTotalsByPersonUseCase(repository, logger=logger)

    result = use_case.execute()

    assert [row.person_name for row in result.items] == ["Ana", "Bob", "Cid"]
    assert result.items[1].balance == Decimal("-20.00")
    assert result.grand_total.total_income == Decimal("100.00")
    assert result.grand_total.total_expense == Decimal("60.00")
    assert result.grand_total.balance == Decimal("40.00")
    assert repository.calls == [("person", None)]
    logger.info.assert_called_once()


def test_totals_by_person_empty_store_returns_zero_grand_total():
    use_case = GetTotalsByPersonUseCase(
        FakeDashboardRepository(),
        logger=MagicMock(),
    )

    result = use_case.execute()

    assert result.items == []
    assert result.grand_total.total_income == Decimal("0.00")
    assert result.grand_total.total_expense == Decimal("0.00")
    assert result.grand_total.balance == Decimal("0.00")


def test_totals_by_category_keeps_repository_order():
    repository = FakeDashboardRepository(
        category_rows=[
            _category_row(2, "Food", "0.00", "60.00"),
            _category_row(1, "Salary", "100.00", "0.00"),
        ]
    )
    use_case = GetTotalsByCategoryUseCase(repository, logger=MagicMock())

    result = use_case.execute()

    assert [row.category_id for row in result.items] == [2, 1]
    assert result.grand_total.balance == Decimal("40.00")


def test_totals_forward_cancellation_token():
    repository = FakeDashboardRepository()
    token = CancellationToken()

    GetTotalsByPersonUseCase(repository, logger=MagicMock()).execute(
        cancellation=token,
    )
    GetTotalsByCategoryUseCase(repository, logger=MagicMock()).execute(
        cancellation=token,
    )

    assert repository.calls == [("person", token), ("category", token)]


def test_totals_propagate_cancellation_without_result():
    repository = MagicMock()
    repository.fetch_totals_by_category.side_effect = (
        OperationCancelledError("cancelled")
    )
    logger = MagicMock()
    use_case = GetTotalsByCategoryUseCase(repository, logger=logger)

    with pytest.raises(OperationCancelledError):
        use_case.execute(cancellation=CancellationToken())

    logger.info.assert_not_called()


def test_totals_use_case_is_read_only():
    repository = FakeDashboardRepository(
        person_rows=[_person_row(1, "Ana", "10.00", "0.00")]
    )
    use_case = GetTotalsByPersonUseCase(repository, logger=MagicMock())

    first = use_case.execute()
    second = use_case.execute()

    assert first == second
