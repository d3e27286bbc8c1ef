from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional

from expense_tracker.domain.models import (
    ALL,
    EXPENSE,
    MonthlyTotals,
    Summary,
    Transaction,
    TransactionFilters,
)

# Values offered by the month picker, "all" first
MONTH_OPTIONS = (ALL,) + tuple(f"{m:02d}" for m in range(1, 13))


def year_options(start_year: Optional[int] = None, span: int = 10) -> List[str]:
    """
    Values offered by the year picker: "all" plus `span` consecutive years.
    The default window ends at the current year.
    """
    if start_year is None:
        start_year = date.today().year - (span - 1)
    return [ALL] + [str(start_year + i) for i in range(span)]


def filter_transactions(
    transactions: Iterable[Transaction],
    filters: Optional[TransactionFilters] = None,
) -> List[Transaction]:
    """
    All records matching every filter dimension, newest first.
    The sort is stable, so records sharing a date keep collection order.
    """
    filters = filters or TransactionFilters()
    matched = [t for t in transactions if filters.matches(t)]
    return sorted(matched, key=lambda t: t.date, reverse=True)


def summarize(transactions: Iterable[Transaction]) -> Summary:
    income = 0
    expense = 0

    for t in transactions:
        if t.is_income:
            income += t.amount
        else:
            expense += t.amount

    return Summary(total_income=income, total_expense=expense, balance=income - expense)


def group_by_month(transactions: Iterable[Transaction]) -> List[MonthlyTotals]:
    buckets: Dict[str, Dict[str, float]] = {}

    for t in transactions:
        bucket = buckets.setdefault(t.month_key, {"income": 0, "expense": 0})
        if t.is_income:
            bucket["income"] += t.amount
        else:
            bucket["expense"] += t.amount

    # Zero-padded YYYY-MM keys sort chronologically
    return [
        MonthlyTotals(month=m, income=buckets[m]["income"], expense=buckets[m]["expense"])
        for m in sorted(buckets)
    ]


def category_breakdown(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """Expense total per category, in first-seen order."""
    totals: Dict[str, float] = {}
    for t in transactions:
        if t.type != EXPENSE:
            continue
        totals[t.category] = totals.get(t.category, 0) + t.amount
    return totals
