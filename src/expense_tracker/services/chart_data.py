# Pandas views of the ledger for a plotting / table layer.
# Nothing here draws; callers hand the frames to their chart library.

from __future__ import annotations

from typing import Iterable

import pandas as pd

from expense_tracker.domain.models import RECORD_FIELDS, Transaction
from expense_tracker.services.ledger import TransactionStore


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    df = pd.DataFrame([t.to_dict() for t in transactions], columns=list(RECORD_FIELDS))
    if df.empty:
        return df

    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce")

    # Stable sort keeps collection order within a day
    df = df.sort_values("date", ascending=False, kind="stable", na_position="last")
    return df.reset_index(drop=True)


def category_series(store: TransactionStore) -> pd.Series:
    """Expense total per category, first-seen order (pie chart slices)."""
    breakdown = store.category_breakdown()
    series = pd.Series(breakdown, dtype="float64")
    series.index.name = "category"
    series.name = "expense"
    return series


def monthly_frame(store: TransactionStore) -> pd.DataFrame:
    """Income and expense per YYYY-MM, oldest month first (bar chart groups)."""
    rows = store.group_by_month()
    df = pd.DataFrame(
        {
            "income": [r.income for r in rows],
            "expense": [r.expense for r in rows],
        },
        index=pd.Index([r.month for r in rows], name="month"),
        dtype="float64",
    )
    return df
