from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ExpenseFields(BaseModel):
    """Request payload shared by create and partial update.

    Every field is optional at this layer; the expense service decides which
    ones are required. Numbers are accepted for text fields (``"amount": 9.5``)
    and unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    amount: Optional[str] = None
    style: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None


class ExpenseCreateIn(ExpenseFields):
    pass


class ExpenseUpdateIn(ExpenseFields):
    """Partial update model. At least one of amount/style/description is required."""


class ExpenseOut(BaseModel):
    id: int
    amount: str
    style: str
    description: str
    date: str
