import pytest

from expense_tracker.data.storage import MemoryStorage
from expense_tracker.services.ledger import TransactionStore


@pytest.fixture
def store():
    return TransactionStore(MemoryStorage())


@pytest.fixture
def sample_store(store):
    # Salary in January, two Food expenses across January and February
    store.add("income", "Salary", 5000, "Salary", "2024-01-10", "Bank Transfer")
    store.add("expense", "Groceries", 1200, "Food", "2024-01-15", "Card")
    store.add("expense", "Dinner out", 300, "Food", "2024-02-01", "Cash")
    return store


class ReadOnlyStorage(MemoryStorage):
    def set_item(self, key, value):
        raise OSError("disk is read-only")


@pytest.fixture
def read_only_store(sample_store):
    # Loaded ledger whose next write fails
    sample_store.storage = ReadOnlyStorage()
    return sample_store
