from fastapi import APIRouter, Depends, Path, Request, Response
from typing import Annotated, List, Optional

from expense_log.models.expense import ExpenseCreateIn, ExpenseOut, ExpenseUpdateIn
from expense_log.services.expense_service import ExpenseService

router = APIRouter(prefix="/expenses", tags=["expenses"])

ExpenseId = Annotated[int, Path(description="Expense identifier")]

# Dependencies -----------------------------------------------------


def get_expense_service(request: Request) -> ExpenseService:
    return request.app.state.expense_service


# Helpers ----------------------------------------------------------


def _row_to_expense_out(row: dict) -> ExpenseOut:
    return ExpenseOut(
        id=row["id"],
        amount=row["amount"],
        style=row["style"],
        description=row["description"],
        date=row["date"],
    )


# Routes -----------------------------------------------------------
@router.get("", response_model=List[ExpenseOut], summary="List all expenses")
async def list_expenses(service: ExpenseService = Depends(get_expense_service)):
    return [_row_to_expense_out(r) for r in service.list_expenses()]


@router.post("", response_model=ExpenseOut, status_code=201, summary="Create an expense")
async def create_expense(
    response: Response,
    payload: Optional[ExpenseCreateIn] = None,
    service: ExpenseService = Depends(get_expense_service),
):
    created = service.create_expense(payload or ExpenseCreateIn())
    response.headers["Location"] = created.location
    return _row_to_expense_out(created.record)


@router.get("/{expense_id}", response_model=ExpenseOut, summary="Fetch one expense")
async def get_expense(
    expense_id: ExpenseId,
    service: ExpenseService = Depends(get_expense_service),
):
    return _row_to_expense_out(service.get_expense(expense_id))


@router.delete("/{expense_id}", status_code=204, summary="Delete an expense")
async def delete_expense(
    expense_id: ExpenseId,
    service: ExpenseService = Depends(get_expense_service),
):
    service.delete_expense(expense_id)
    return Response(status_code=204)


@router.patch("/{expense_id}", status_code=204, summary="Edit an expense (partial)")
async def patch_expense(
    expense_id: ExpenseId,
    payload: Optional[ExpenseUpdateIn] = None,
    service: ExpenseService = Depends(get_expense_service),
):
    service.update_expense(expense_id, payload or ExpenseUpdateIn())
    return Response(status_code=204)
