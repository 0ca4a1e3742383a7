"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.use_cases.get_totals_by_category import (
    GetTotalsByCategoryUseCase,
    TotalsByCategory,
)
from src.application.use_cases.get_totals_by_person import (
    GetTotalsByPersonUseCase,
    TotalsByPerson,
)
from src.domain.models import Category, Person, Transaction
from src.infrastructure.container import (
    build_categories_use_case,
    build_dashboard_repository,
    build_people_use_case,
    build_transactions_use_case,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter

INCOME_COLOR = "#2e7d32"
EXPENSE_COLOR = "#e76f51"


def _fetch_totals_by_person() -> TotalsByPerson:
    """Fetch per-person totals from the finance database."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    use_case = GetTotalsByPersonUseCase(build_dashboard_repository(adapter))
    return use_case.execute()


def _fetch_totals_by_category() -> TotalsByCategory:
    """Fetch per-category totals from the finance database."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    use_case = GetTotalsByCategoryUseCase(build_dashboard_repository(adapter))
    return use_case.execute()


def _fetch_ledger() -> tuple[
    list[Transaction],
    list[Person],
    list[Category],
]:
    """Fetch transactions plus the people and categories they point at."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    return (
        build_transactions_use_case(adapter).list_all(),
        build_people_use_case(adapter).list_all(),
        build_categories_use_case(adapter).list_all(),
    )


def _format_money(value: Decimal) -> str:
    """Format amounts for display."""
    return f"{value:,.2f}"


def _totals_table(rows, label_attr: str, label: str) -> list[dict]:
    """Build dataframe rows for a totals view."""
    return [
        {
            label: getattr(row, label_attr),
            "Income": _format_money(row.total_income),
            "Expense": _format_money(row.total_expense),
            "Balance": _format_money(row.balance),
        }
        for row in rows
    ]


def _prepare_bar_chart_data(
    rows,
    label_attr: str,
) -> list[dict[str, str | float]]:
    """Flatten totals rows into one record per (group, kind) pair.

    Args:
        rows: Per-person or per-category totals.
        label_attr: Attribute holding the group label.

    Returns:
        Altair-ready records with group, kind and amount fields.
    """
    data: list[dict[str, str | float]] = []
    for row in rows:
        label = getattr(row, label_attr)
        data.append(
            {
                "group": label,
                "kind": "Income",
                "amount": float(row.total_income),
                "amount_label": _format_money(row.total_income),
            }
        )
        data.append(
            {
                "group": label,
                "kind": "Expense",
                "amount": float(row.total_expense),
                "amount_label": _format_money(row.total_expense),
            }
        )
    return data


def _render_totals_chart(rows, label_attr: str, title: str) -> None:
    """Render a grouped income vs expense bar chart."""
    if not rows:
        st.info("No data available for the chart.")
        return
    data = _prepare_bar_chart_data(rows, label_attr)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("group:N", title=None, sort=None),
        xOffset=alt.XOffset("kind:N"),
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Income", "Expense"],
                range=[INCOME_COLOR, EXPENSE_COLOR],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("group:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_grand_total(grand_total) -> None:
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric("Total income", _format_money(grand_total.total_income))
    expense_col.metric(
        "Total expense",
        _format_money(grand_total.total_expense),
    )
    balance_col.metric("Balance", _format_money(grand_total.balance))


def _ledger_table(
    transactions: Sequence[Transaction],
    people: Sequence[Person],
    categories: Sequence[Category],
) -> list[dict]:
    """Join transactions with person names and category descriptions."""
    name_by_id = {person.id: person.name for person in people}
    description_by_id = {
        category.id: category.description for category in categories
    }
    return [
        {
            "Date": transaction.created_at.strftime("%Y-%m-%d %H:%M"),
            "Description": transaction.description,
            "Type": transaction.type.name.title(),
            "Amount": _format_money(transaction.amount),
            "Person": name_by_id.get(transaction.person_id, "-"),
            "Category": description_by_id.get(transaction.category_id, "-"),
        }
        for transaction in transactions
    ]


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Transactions"])

    if page == "Dashboard":
        view = st.sidebar.selectbox("Group by", ["Person", "Category"])
        if view == "Person":
            totals = _fetch_totals_by_person()
            label_attr, label = "person_name", "Person"
        else:
            totals = _fetch_totals_by_category()
            label_attr, label = "category_description", "Category"

        _render_grand_total(totals.grand_total)
        if not totals.items:
            st.warning(f"No {label.lower()} registered yet.")
            return
        st.dataframe(
            _totals_table(totals.items, label_attr, label),
            width="stretch",
            hide_index=True,
        )
        _render_totals_chart(
            totals.items,
            label_attr,
            f"Income vs expense by {label.lower()}",
        )
    else:
        transactions, people, categories = _fetch_ledger()
        st.caption(f"{len(transactions)} transactions recorded")
        if not transactions:
            st.warning("No transactions recorded yet.")
            return
        st.dataframe(
            _ledger_table(transactions, people, categories),
            width="stretch",
            hide_index=True,
            height=420,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
