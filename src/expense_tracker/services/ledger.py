from __future__ import annotations

import json
import logging
from datetime import date as date_type
from typing import Dict, Iterator, List

from expense_tracker.config import Settings, get_settings
from expense_tracker.data.storage import JsonFileStorage, MemoryStorage
from expense_tracker.domain.models import (
    ALL,
    MonthlyTotals,
    Summary,
    Transaction,
    TransactionFilters,
)
from expense_tracker.services import queries

logger = logging.getLogger(__name__)

STORAGE_KEY = "transactions"


class TransactionStore:
    """
    Owns the transaction collection.

    The collection is read once from storage when the store is created and
    written back in full after every add/delete. Queries and aggregations
    never touch storage.
    """

    def __init__(self, storage: JsonFileStorage | MemoryStorage | None = None, key: str = STORAGE_KEY):
        self.storage = storage if storage is not None else MemoryStorage()
        self.key = key
        self._transactions: List[Transaction] = self._load()
        self._next_id = max((t.id for t in self._transactions if _is_int(t.id)), default=0) + 1

    # ----------------------------
    # Persistence
    # ----------------------------
    def _load(self) -> List[Transaction]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            transactions = [Transaction.from_dict(item) for item in data]
        except (json.JSONDecodeError, TypeError, KeyError) as e:
            # Unusable data counts as no prior data
            logger.warning("Ignoring malformed data under key %r: %s", self.key, e)
            return []

        logger.info("Loaded %d transactions", len(transactions))
        return transactions

    def _save(self):
        payload = json.dumps([t.to_dict() for t in self._transactions], ensure_ascii=False)
        self.storage.set_item(self.key, payload)

    # ----------------------------
    # Mutations
    # ----------------------------
    def add(
        self,
        type: str,
        title: str,
        amount: float,
        category: str,
        date: str | date_type,
        payment_mode: str,
    ) -> Transaction:
        if isinstance(date, date_type):
            date = date.strftime("%Y-%m-%d")

        tx = Transaction(
            id=self._next_id,
            type=type,
            title=title,
            amount=amount,
            category=category,
            date=date,
            payment_mode=payment_mode,
        )
        self._next_id += 1

        self._transactions.append(tx)
        self._save()
        logger.debug("Added transaction %s (%s %s)", tx.id, tx.type, tx.amount)
        return tx

    def delete(self, tx_id: int) -> bool:
        """Remove the record with this id. Unknown ids are a no-op."""
        remaining = [t for t in self._transactions if t.id != tx_id]
        removed = len(remaining) != len(self._transactions)

        self._transactions = remaining
        self._save()
        logger.debug("Delete %s: %s", tx_id, "removed" if removed else "not found")
        return removed

    # ----------------------------
    # Reads
    # ----------------------------
    def all(self) -> List[Transaction]:
        return list(self._transactions)

    def query(
        self,
        category: str = ALL,
        year: str = ALL,
        month: str = ALL,
        title: str = "",
    ) -> List[Transaction]:
        filters = TransactionFilters(category=category, year=year, month=month, title=title)
        return queries.filter_transactions(self._transactions, filters)

    def summarize(self) -> Summary:
        return queries.summarize(self._transactions)

    def group_by_month(self) -> List[MonthlyTotals]:
        return queries.group_by_month(self._transactions)

    def category_breakdown(self) -> Dict[str, float]:
        return queries.category_breakdown(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def open_store(settings: Settings | None = None) -> TransactionStore:
    """Store backed by the JSON file named in the settings."""
    settings = settings or get_settings()
    return TransactionStore(JsonFileStorage(settings.data_path), key=settings.storage_key)
