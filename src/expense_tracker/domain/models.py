from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

# Filter value meaning "no constraint" for category / year / month
ALL = "all"

# Offered by the entry form, never enforced
SUGGESTED_CATEGORIES = (
    "Food",
    "Transport",
    "Shopping",
    "Bills",
    "Entertainment",
    "Health",
    "Education",
    "Salary",
    "Other",
)
SUGGESTED_PAYMENT_MODES = ("Cash", "Card", "UPI", "Bank Transfer", "Other")

# Keys of a stored record, in the order they are written
RECORD_FIELDS = ("id", "type", "title", "amount", "category", "date", "paymentMode")


# Represents a single income or expense entry
@dataclass
class Transaction:
    id: int
    type: str
    title: str
    amount: float
    category: str
    date: str  # YYYY-MM-DD
    payment_mode: str

    @property
    def year(self) -> str:
        return self.date[0:4]

    @property
    def month(self) -> str:
        return self.date[5:7]

    @property
    def month_key(self) -> str:
        return self.date[0:7]

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "amount": self.amount,
            "category": self.category,
            "date": self.date,
            "paymentMode": self.payment_mode,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        """
        Build a record from its stored shape.

        Values are kept exactly as stored (no coercion) so that writing the
        record back reproduces the same JSON. Raises KeyError on a missing field
        and TypeError on a field the queries cannot work with.
        """
        for key in ("title", "date"):
            if not isinstance(data[key], str):
                raise TypeError(f"{key!r} must be a string, got {type(data[key]).__name__}")

        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise TypeError(f"'amount' must be a number, got {type(amount).__name__}")

        return cls(
            id=data["id"],
            type=data["type"],
            title=data["title"],
            amount=data["amount"],
            category=data["category"],
            date=data["date"],
            payment_mode=data["paymentMode"],
        )


@dataclass(frozen=True)
class TransactionFilters:
    category: str = ALL
    year: str = ALL
    month: str = ALL
    title: str = ""

    def matches(self, tx: Transaction) -> bool:
        match_category = self.category == ALL or tx.category == self.category
        match_year = self.year == ALL or tx.year == self.year
        match_month = self.month == ALL or tx.month == self.month
        match_title = self.title.lower() in tx.title.lower()
        return match_category and match_year and match_month and match_title


@dataclass(frozen=True)
class Summary:
    total_income: float
    total_expense: float
    balance: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
            "balance": self.balance,
        }


# Income/expense totals for one YYYY-MM bucket
@dataclass(frozen=True)
class MonthlyTotals:
    month: str
    income: float
    expense: float
