"""HTTP routes for people, categories, transactions and the dashboard."""

import asyncio
from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from src.adapters.interface.api.errors import result_error_response
from src.adapters.interface.api.schemas import (
    CategoryIn,
    CategoryOut,
    PersonIn,
    PersonOut,
    TotalsByCategoryOut,
    TotalsByPersonOut,
    TransactionIn,
    TransactionOut,
)
from src.application.cancellation import CancellationToken
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases import (
    GetTotalsByCategoryUseCase,
    GetTotalsByPersonUseCase,
    ManageCategoriesUseCase,
    ManagePeopleUseCase,
    ManageTransactionsUseCase,
)
from src.infrastructure.container import (
    build_categories_use_case,
    build_people_use_case,
    build_totals_by_category_use_case,
    build_totals_by_person_use_case,
    build_transactions_use_case,
)

T = TypeVar("T")

DISCONNECT_POLL_SECONDS = 0.1


def get_db_port(request: Request) -> DatabaseEnginePort:
    return request.app.state.db_port


def get_people_use_case(
    db_port: DatabaseEnginePort = Depends(get_db_port),
) -> ManagePeopleUseCase:
    return build_people_use_case(db_port)


def get_categories_use_case(
    db_port: DatabaseEnginePort = Depends(get_db_port),
) -> ManageCategoriesUseCase:
    return build_categories_use_case(db_port)


def get_transactions_use_case(
    db_port: DatabaseEnginePort = Depends(get_db_port),
) -> ManageTransactionsUseCase:
    return build_transactions_use_case(db_port)


def get_totals_by_person_use_case(
    db_port: DatabaseEnginePort = Depends(get_db_port),
) -> GetTotalsByPersonUseCase:
    return build_totals_by_person_use_case(db_port)


def get_totals_by_category_use_case(
    db_port: DatabaseEnginePort = Depends(get_db_port),
) -> GetTotalsByCategoryUseCase:
    return build_totals_by_category_use_case(db_port)


async def run_cancellable(
    request: Request,
    func: Callable[..., T],
) -> T:
    """Run a blocking read in the threadpool, cancelling it on disconnect.

    A watcher task polls the connection; when the client goes away the
    token is cancelled and the running query is interrupted.

    Raises:
        OperationCancelledError: If the client disconnected mid-query.
    """
    token = CancellationToken()

    async def _watch_disconnect() -> None:
        while not token.cancelled:
            if await request.is_disconnected():
                token.cancel()
                return
            await asyncio.sleep(DISCONNECT_POLL_SECONDS)

    watcher = asyncio.create_task(_watch_disconnect())
    try:
        return await run_in_threadpool(func, cancellation=token)
    finally:
        watcher.cancel()


dashboard_router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@dashboard_router.get(
    "/totals-by-person",
    response_model=TotalsByPersonOut,
)
async def totals_by_person(
    request: Request,
    use_case: GetTotalsByPersonUseCase = Depends(
        get_totals_by_person_use_case
    ),
):
    totals = await run_cancellable(request, use_case.execute)
    return TotalsByPersonOut.from_domain(totals)


@dashboard_router.get(
    "/totals-by-category",
    response_model=TotalsByCategoryOut,
)
async def totals_by_category(
    request: Request,
    use_case: GetTotalsByCategoryUseCase = Depends(
        get_totals_by_category_use_case
    ),
):
    totals = await run_cancellable(request, use_case.execute)
    return TotalsByCategoryOut.from_domain(totals)


people_router = APIRouter(prefix="/api/people", tags=["people"])


@people_router.get("", response_model=list[PersonOut])
def list_people(
    use_case: ManagePeopleUseCase = Depends(get_people_use_case),
):
    return [PersonOut.from_domain(person) for person in use_case.list_all()]


@people_router.get("/{person_id}", response_model=PersonOut)
def get_person(
    person_id: int,
    request: Request,
    use_case: ManagePeopleUseCase = Depends(get_people_use_case),
):
    result = use_case.get(person_id)
    if not result.is_ok:
        return result_error_response(request, result)
    return PersonOut.from_domain(result.value)


@people_router.post("", response_model=PersonOut, status_code=201)
def create_person(
    payload: PersonIn,
    request: Request,
    response: Response,
    use_case: ManagePeopleUseCase = Depends(get_people_use_case),
):
    result = use_case.create(payload.name, payload.age)
    if not result.is_ok:
        return result_error_response(request, result)
    response.headers["Location"] = f"/api/people/{result.value.id}"
    return PersonOut.from_domain(result.value)


@people_router.put("/{person_id}", status_code=204)
def update_person(
    person_id: int,
    payload: PersonIn,
    request: Request,
    use_case: ManagePeopleUseCase = Depends(get_people_use_case),
):
    result = use_case.update(person_id, payload.name, payload.age)
    if not result.is_ok:
        return result_error_response(request, result)
    return Response(status_code=204)


@people_router.delete("/{person_id}", status_code=204)
def delete_person(
    person_id: int,
    request: Request,
    use_case: ManagePeopleUseCase = Depends(get_people_use_case),
):
    result = use_case.delete(person_id)
    if not result.is_ok:
        return result_error_response(request, result)
    return Response(status_code=204)


categories_router = APIRouter(prefix="/api/categories", tags=["categories"])


@categories_router.get("", response_model=list[CategoryOut])
def list_categories(
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
):
    return [
        CategoryOut.from_domain(category) for category in use_case.list_all()
    ]


@categories_router.get("/{category_id}", response_model=CategoryOut)
def get_category(
    category_id: int,
    request: Request,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
):
    result = use_case.get(category_id)
    if not result.is_ok:
        return result_error_response(request, result)
    return CategoryOut.from_domain(result.value)


@categories_router.post("", response_model=CategoryOut, status_code=201)
def create_category(
    payload: CategoryIn,
    request: Request,
    response: Response,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
):
    result = use_case.create(payload.description, payload.purpose)
    if not result.is_ok:
        return result_error_response(request, result)
    response.headers["Location"] = f"/api/categories/{result.value.id}"
    return CategoryOut.from_domain(result.value)


@categories_router.put("/{category_id}", status_code=204)
def update_category(
    category_id: int,
    payload: CategoryIn,
    request: Request,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
):
    result = use_case.update(
        category_id,
        payload.description,
        payload.purpose,
    )
    if not result.is_ok:
        return result_error_response(request, result)
    return Response(status_code=204)


@categories_router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: int,
    request: Request,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
):
    result = use_case.delete(category_id)
    if not result.is_ok:
        return result_error_response(request, result)
    return Response(status_code=204)


transactions_router = APIRouter(
    prefix="/api/transactions",
    tags=["transactions"],
)


@transactions_router.get("", response_model=list[TransactionOut])
def list_transactions(
    use_case: ManageTransactionsUseCase = Depends(get_transactions_use_case),
):
    return [
        TransactionOut.from_domain(transaction)
        for transaction in use_case.list_all()
    ]


@transactions_router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction(
    transaction_id: int,
    request: Request,
    use_case: ManageTransactionsUseCase = Depends(get_transactions_use_case),
):
    result = use_case.get(transaction_id)
    if not result.is_ok:
        return result_error_response(request, result)
    return TransactionOut.from_domain(result.value)


@transactions_router.post("", response_model=TransactionOut, status_code=201)
def create_transaction(
    payload: TransactionIn,
    request: Request,
    response: Response,
    use_case: ManageTransactionsUseCase = Depends(get_transactions_use_case),
):
    result = use_case.create(payload.to_draft())
    if not result.is_ok:
        return result_error_response(request, result)
    response.headers["Location"] = f"/api/transactions/{result.value.id}"
    return TransactionOut.from_domain(result.value)


@transactions_router.put("/{transaction_id}", status_code=204)
def update_transaction(
    transaction_id: int,
    payload: TransactionIn,
    request: Request,
    use_case: ManageTransactionsUseCase = Depends(get_transactions_use_case),
):
    result = use_case.update(transaction_id, payload.to_draft())
    if not result.is_ok:
        return result_error_response(request, result)
    return Response(status_code=204)


@transactions_router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    request: Request,
    use_case: ManageTransactionsUseCase = Depends(get_transactions_use_case),
):
    result = use_case.delete(transaction_id)
    if not result.is_ok:
        return result_error_response(request, result)
    return Response(status_code=204)


ROUTERS = (
    dashboard_router,
    people_router,
    categories_router,
    transactions_router,
)


__all__ = [
    "ROUTERS",
    "get_db_port",
    "run_cancellable",
]
