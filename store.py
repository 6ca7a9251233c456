import threading
from typing import Dict

from models import Transaction


class TransactionNotFound(KeyError):
    """Raised when no transaction is stored under the requested id."""


class TransactionStore:
    """In-memory transactions keyed by id.

    A single lock guards every access to the mapping. Records are frozen
    models, so callers can hold on to what `get` returns without copying.
    """

    def __init__(self):
        self._transactions: Dict[str, Transaction] = {}
        self._lock = threading.Lock()

    def put(self, transaction: Transaction) -> None:
        """Insert or overwrite the transaction stored under its id"""
        with self._lock:
            self._transactions[transaction.id] = transaction

    def get(self, transaction_id: str) -> Transaction:
        with self._lock:
            try:
                return self._transactions[transaction_id]
            except KeyError:
                raise TransactionNotFound(transaction_id) from None

    def __contains__(self, transaction_id: object) -> bool:
        with self._lock:
            return transaction_id in self._transactions

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
