"""Tests for the Streamlit app module."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

from src.adapters.interface.streamlit import app
from src.domain.constants import CategoryPurpose, TransactionType
from src.domain.models import (
    Category,
    CategoryTotals,
    GrandTotal,
    Person,
    PersonTotals,
    TotalsByCategory,
    TotalsByPerson,
    Transaction,
)

GRAND_TOTAL = GrandTotal(
    total_income=Decimal("100.00"),
    total_expense=Decimal("60.00"),
    balance=Decimal("40.00"),
)

BY_PERSON = TotalsByPerson(
    items=[
        PersonTotals(
            person_id=1,
            person_name="Ana",
            total_income=Decimal("100.00"),
            total_expense=Decimal("40.00"),
            balance=Decimal("60.00"),
        ),
        PersonTotals(
            person_id=2,
            person_name="Bob",
            total_income=Decimal("0.00"),
            total_expense=Decimal("20.00"),
            balance=Decimal("-20.00"),
        ),
    ],
    grand_total=GRAND_TOTAL,
)

BY_CATEGORY = TotalsByCategory(
    items=[
        CategoryTotals(
            category_id=2,
            category_description="Food",
            total_income=Decimal("0.00"),
            total_expense=Decimal("60.00"),
            balance=Decimal("-60.00"),
        ),
    ],
    grand_total=GRAND_TOTAL,
)


def test_fetch_totals_by_person_invokes_use_case(monkeypatch):
    """_fetch_totals_by_person should wire the repository into the use case."""

    class _FakeUseCase:
        def __init__(self, repository):
            self.repository = repository

        def execute(self):
            return BY_PERSON

    monkeypatch.setattr(
        app,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: "adapter",
    )
    monkeypatch.setattr(
        app,
        "build_dashboard_repository",
        lambda adapter: f"repo:{adapter}",
    )
    monkeypatch.setattr(app, "GetTotalsByPersonUseCase", _FakeUseCase)

    assert app._fetch_totals_by_person() is BY_PERSON


def test_prepare_bar_chart_data_emits_income_and_expense():
    data = app._prepare_bar_chart_data(BY_PERSON.items, "person_name")

    assert data[0] == {
        "group": "Ana",
        "kind": "Income",
        "amount": 100.0,
        "amount_label": "100.00",
    }
    assert [(row["group"], row["kind"]) for row in data] == [
        ("Ana", "Income"),
        ("Ana", "Expense"),
        ("Bob", "Income"),
        ("Bob", "Expense"),
    ]


def test_ledger_table_resolves_names():
    transaction = Transaction(
        id=1,
        description="Groceries",
        amount=Decimal("1234.50"),
        type=TransactionType.EXPENSE,
        category_id=2,
        person_id=1,
        created_at=datetime(2024, 1, 5, 8, 0, tzinfo=timezone.utc),
    )

    rows = app._ledger_table(
        [transaction],
        [Person(id=1, name="Ana", age=30)],
        [Category(id=2, description="Food", purpose=CategoryPurpose.EXPENSE)],
    )

    assert rows == [
        {
            "Date": "2024-01-05 08:00",
            "Description": "Groceries",
            "Type": "Expense",
            "Amount": "1,234.50",
            "Person": "Ana",
            "Category": "Food",
        }
    ]


class _FakeColumn:
    def __init__(self, owner) -> None:
        self._owner = owner

    def metric(self, label, value, *args, **kwargs):
        self._owner.metrics.append((label, value))


class _FakeStreamlit:
    def __init__(self, page: str, group_by: str = "Person") -> None:
        self.metrics: list[tuple[str, str]] = []
        self.captions: list[str] = []
        self.warnings: list[str] = []
        self.dataframe_payload = None
        self.charts: list[object] = []
        self.subheaders: list[str] = []
        self._choices = {"Page": page, "Group by": group_by}
        self.sidebar = SimpleNamespace(selectbox=self._selectbox)

    def _selectbox(self, label, options, **_kwargs):
        assert self._choices[label] in options
        return self._choices[label]

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.warnings.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


def test_main_renders_person_dashboard(monkeypatch):
    fake_st = _FakeStreamlit("Dashboard", "Person")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_fetch_totals_by_person", lambda: BY_PERSON)

    app.main()

    assert fake_st.title_text == "Finance Dashboard"
    assert fake_st.metrics == [
        ("Total income", "100.00"),
        ("Total expense", "60.00"),
        ("Balance", "40.00"),
    ]
    table, kwargs = fake_st.dataframe_payload
    assert table[1] == {
        "Person": "Bob",
        "Income": "0.00",
        "Expense": "20.00",
        "Balance": "-20.00",
    }
    assert kwargs["hide_index"] is True
    assert len(fake_st.charts) == 1
    assert fake_st.warnings == []


def test_main_renders_category_dashboard(monkeypatch):
    fake_st = _FakeStreamlit("Dashboard", "Category")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_fetch_totals_by_category", lambda: BY_CATEGORY)

    app.main()

    table, _ = fake_st.dataframe_payload
    assert table[0]["Category"] == "Food"
    assert fake_st.subheaders == ["Income vs expense by category"]


def test_main_warns_when_no_people(monkeypatch):
    fake_st = _FakeStreamlit("Dashboard", "Person")
    empty = TotalsByPerson(
        items=[],
        grand_total=GrandTotal(
            total_income=Decimal("0.00"),
            total_expense=Decimal("0.00"),
            balance=Decimal("0.00"),
        ),
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_fetch_totals_by_person", lambda: empty)

    app.main()

    assert fake_st.warnings == ["No person registered yet."]
    assert fake_st.dataframe_payload is None


def test_main_warns_when_ledger_is_empty(monkeypatch):
    fake_st = _FakeStreamlit("Transactions")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_fetch_ledger", lambda: ([], [], []))

    app.main()

    assert fake_st.captions == ["0 transactions recorded"]
    assert fake_st.warnings == ["No transactions recorded yet."]


def test_each_render_reads_the_repository(monkeypatch):
    """Totals are recomputed on every render, never served from a cache."""

    class _CountingRepository:
        def __init__(self):
            self.calls = 0

        def fetch_totals_by_person(self, cancellation=None):
            self.calls += 1
            return list(BY_PERSON.items)

    repository = _CountingRepository()
    monkeypatch.setattr(app, "st", _FakeStreamlit("Dashboard", "Person"))
    monkeypatch.setattr(
        app,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: "adapter",
    )
    monkeypatch.setattr(
        app,
        "build_dashboard_repository",
        lambda adapter: repository,
    )

    app.main()
    app.main()

    assert repository.calls == 2
