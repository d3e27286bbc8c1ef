# expense_tracker/interfaces/api.py
# FastAPI backend for the expense tracker
# - transactions: list (filtered), add, delete
# - dashboard summary (income / expense / balance)
# - chart data: monthly totals, expense per category

from __future__ import annotations

import logging
from datetime import date as date_type
from typing import Dict, List, Literal, Optional, Union

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from expense_tracker.config import get_settings
from expense_tracker.domain.models import ALL, Transaction
from expense_tracker.services.ledger import TransactionStore, open_store

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Expense Tracker API", version="0.1.0")

# Allow local front-end dev server(s)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8501", "http://127.0.0.1:8501"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_store: Optional[TransactionStore] = None


def get_store() -> TransactionStore:
    # One store per process, hydrated from disk on first use
    global _store
    if _store is None:
        _store = open_store(settings)
    return _store


# ----------------------------
# Pydantic models
# ----------------------------
class TransactionOut(BaseModel):
    id: int
    type: str
    title: str
    amount: Union[int, float]
    category: str
    date: str
    paymentMode: str


class AddTransaction(BaseModel):
    type: Literal["income", "expense"]
    title: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    date: date_type = Field(..., description="YYYY-MM-DD")
    paymentMode: str = Field(..., min_length=1)


class SummaryOut(BaseModel):
    totalIncome: float
    totalExpense: float
    balance: float


class MonthlyOut(BaseModel):
    month: str
    income: float
    expense: float


def _to_out(tx: Transaction) -> TransactionOut:
    return TransactionOut(**tx.to_dict())


# ----------------------------
# Routes
# ----------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/transactions", response_model=List[TransactionOut])
def transactions(
    category: str = ALL,
    year: str = ALL,
    month: str = ALL,
    title: str = "",
    store: TransactionStore = Depends(get_store),
):
    rows = store.query(category=category, year=year, month=month, title=title)
    return [_to_out(t) for t in rows]


@app.post("/transactions", response_model=TransactionOut, status_code=201)
def add_transaction(tx: AddTransaction, store: TransactionStore = Depends(get_store)):
    try:
        stored = store.add(
            type=tx.type,
            title=tx.title,
            amount=tx.amount,
            category=tx.category,
            date=tx.date,
            payment_mode=tx.paymentMode,
        )
    except OSError as e:
        logger.exception("Could not persist new transaction")
        raise HTTPException(status_code=500, detail=str(e))
    return _to_out(stored)


@app.delete("/transactions/{tx_id}")
def delete_transaction(tx_id: int, store: TransactionStore = Depends(get_store)):
    try:
        deleted = store.delete(tx_id)
    except OSError as e:
        logger.exception("Could not persist deletion of %s", tx_id)
        raise HTTPException(status_code=500, detail=str(e))
    return {"deleted": deleted}


@app.get("/summary", response_model=SummaryOut)
def summary(store: TransactionStore = Depends(get_store)):
    return SummaryOut(**store.summarize().to_dict())


@app.get("/monthly", response_model=List[MonthlyOut])
def monthly(store: TransactionStore = Depends(get_store)):
    return [MonthlyOut(month=m.month, income=m.income, expense=m.expense) for m in store.group_by_month()]


@app.get("/categories", response_model=Dict[str, float])
def categories(store: TransactionStore = Depends(get_store)):
    return store.category_breakdown()
