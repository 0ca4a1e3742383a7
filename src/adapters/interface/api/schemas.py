"""Request and response schemas for the HTTP API.

Field names are camelCase on the wire. Amounts are serialized as strings
with exactly two decimal places; incoming amounts may be JSON numbers or
numeric strings and are parsed by the domain validators.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from src.domain.models import (
    Category,
    CategoryTotals,
    GrandTotal,
    Person,
    PersonTotals,
    TotalsByCategory,
    TotalsByPerson,
    Transaction,
    TransactionDraft,
)
from src.utils.decimal_utils import format_amount

Amount = Annotated[
    Decimal,
    PlainSerializer(format_amount, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonIn(CamelModel):
    name: str | None = None
    age: int | None = None


class PersonOut(CamelModel):
    id: int
    name: str
    age: int

    @classmethod
    def from_domain(cls, person: Person) -> "PersonOut":
        return cls(id=person.id, name=person.name, age=person.age)


class CategoryIn(CamelModel):
    description: str | None = None
    purpose: int | None = None


class CategoryOut(CamelModel):
    id: int
    description: str
    purpose: int

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryOut":
        return cls(
            id=category.id,
            description=category.description,
            purpose=int(category.purpose),
        )


class TransactionIn(CamelModel):
    description: str | None = None
    amount: Decimal | str | None = None
    type: int | None = None
    category_id: int = 0
    person_id: int = 0

    def to_draft(self) -> TransactionDraft:
        return TransactionDraft(
            description=self.description,
            amount=self.amount,
            type=self.type,
            category_id=self.category_id,
            person_id=self.person_id,
        )


class TransactionOut(CamelModel):
    id: int
    description: str
    amount: Amount
    type: int
    category_id: int
    person_id: int
    created_at: datetime

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionOut":
        return cls(
            id=transaction.id,
            description=transaction.description,
            amount=transaction.amount,
            type=int(transaction.type),
            category_id=transaction.category_id,
            person_id=transaction.person_id,
            created_at=transaction.created_at,
        )


class GrandTotalOut(CamelModel):
    total_income: Amount
    total_expense: Amount
    balance: Amount

    @classmethod
    def from_domain(cls, total: GrandTotal) -> "GrandTotalOut":
        return cls(
            total_income=total.total_income,
            total_expense=total.total_expense,
            balance=total.balance,
        )


class PersonTotalsOut(CamelModel):
    person_id: int
    person_name: str
    total_income: Amount
    total_expense: Amount
    balance: Amount

    @classmethod
    def from_domain(cls, row: PersonTotals) -> "PersonTotalsOut":
        return cls(
            person_id=row.person_id,
            person_name=row.person_name,
            total_income=row.total_income,
            total_expense=row.total_expense,
            balance=row.balance,
        )


class CategoryTotalsOut(CamelModel):
    category_id: int
    category_description: str
    total_income: Amount
    total_expense: Amount
    balance: Amount

    @classmethod
    def from_domain(cls, row: CategoryTotals) -> "CategoryTotalsOut":
        return cls(
            category_id=row.category_id,
            category_description=row.category_description,
            total_income=row.total_income,
            total_expense=row.total_expense,
            balance=row.balance,
        )


class TotalsByPersonOut(CamelModel):
    items: list[PersonTotalsOut]
    grand_total: GrandTotalOut

    @classmethod
    def from_domain(cls, totals: TotalsByPerson) -> "TotalsByPersonOut":
        return cls(
            items=[PersonTotalsOut.from_domain(row) for row in totals.items],
            grand_total=GrandTotalOut.from_domain(totals.grand_total),
        )


class TotalsByCategoryOut(CamelModel):
    items: list[CategoryTotalsOut]
    grand_total: GrandTotalOut

    @classmethod
    def from_domain(cls, totals: TotalsByCategory) -> "TotalsByCategoryOut":
        return cls(
            items=[CategoryTotalsOut.from_domain(row) for row in totals.items],
            grand_total=GrandTotalOut.from_domain(totals.grand_total),
        )


__all__ = [
    "Amount",
    "PersonIn",
    "PersonOut",
    "CategoryIn",
    "CategoryOut",
    "TransactionIn",
    "TransactionOut",
    "GrandTotalOut",
    "PersonTotalsOut",
    "CategoryTotalsOut",
    "TotalsByPersonOut",
    "TotalsByCategoryOut",
]
