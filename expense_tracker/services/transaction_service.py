"""
Transaction service: the only mutation surface over the transaction list

Every mutating call persists the whole list before it returns
(write-through). One lock serializes all calls, so readers never
observe a half-applied mutation.
"""
import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from expense_tracker.core.config import Settings
from expense_tracker.core.kv_store import (
    KeyValueStore,
    MemoryKeyValueStore,
    SQLKeyValueStore,
    create_tables,
)
from expense_tracker.crud.transaction import TransactionStore
from expense_tracker.db.session import build_engine, build_session_factory
from expense_tracker.models.transaction import (
    Category,
    CategorySummary,
    Transaction,
    TransactionType,
)
from expense_tracker.services import aggregation

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Owns the in-memory transaction list, newest first

    Usage:
        service = TransactionService(TransactionStore(kv))
        tx = service.add("Lunch", Decimal("120"), TransactionType.EXPENSE,
                         Category.FOOD, datetime.now())
        service.balance()
    """

    def __init__(self, store: TransactionStore):
        self.store = store
        self._lock = threading.Lock()
        self._transactions: List[Transaction] = store.load()
        logger.info(f"Loaded {len(self._transactions)} transactions")

    # === QUERIES ===

    @property
    def transactions(self) -> List[Transaction]:
        """Snapshot of the current list"""
        with self._lock:
            return list(self._transactions)

    def get(self, transaction_id: UUID) -> Optional[Transaction]:
        with self._lock:
            index = self._index_of(transaction_id)
            return None if index is None else self._transactions[index]

    def balance(self) -> Decimal:
        """Income minus expense, recomputed from the current list"""
        with self._lock:
            return aggregation.calculate_balance(self._transactions)

    def monthly_summary(self, month: int, year: int) -> List[CategorySummary]:
        return aggregation.monthly_category_summary(self.transactions, month, year)

    def yearly_summary(self, year: int) -> List[CategorySummary]:
        return aggregation.yearly_category_summary(self.transactions, year)

    # === MUTATIONS ===

    def add(
        self,
        title: str,
        amount: Decimal,
        type: TransactionType,
        category: Category,
        date: datetime,
    ) -> Transaction:
        """Create a transaction with a fresh id at the head of the list"""
        transaction = Transaction(
            title=title,
            amount=amount,
            type=type,
            category=category,
            date=date,
        )
        with self._lock:
            self._transactions.insert(0, transaction)
            self._persist()
        logger.debug(f"Added transaction {transaction.id}")
        return transaction

    def update(
        self,
        transaction_id: UUID,
        title: str,
        amount: Decimal,
        type: TransactionType,
        category: Category,
        date: datetime,
    ) -> Optional[Transaction]:
        """
        Replace the whole record with this id, keeping its position

        Returns:
            The new record, or None if no transaction has this id
        """
        with self._lock:
            index = self._index_of(transaction_id)
            if index is None:
                logger.warning(f"Update ignored, transaction not found: {transaction_id}")
                return None

            updated = Transaction(
                id=transaction_id,
                title=title,
                amount=amount,
                type=type,
                category=category,
                date=date,
            )
            self._transactions[index] = updated
            self._persist()
        logger.debug(f"Updated transaction {transaction_id}")
        return updated

    def delete_at(self, positions: Iterable[int]) -> List[Transaction]:
        """
        Remove the transactions at the given positions of the current list

        Raises:
            IndexError: a position is out of range; nothing is removed
        """
        with self._lock:
            targets = set(positions)
            size = len(self._transactions)
            invalid = sorted(p for p in targets if not 0 <= p < size)
            if invalid:
                raise IndexError(f"Positions out of range for {size} transactions: {invalid}")

            removed = [t for i, t in enumerate(self._transactions) if i in targets]
            self._transactions = [
                t for i, t in enumerate(self._transactions) if i not in targets
            ]
            if removed:
                self._persist()
        logger.debug(f"Deleted {len(removed)} transactions at positions {sorted(targets)}")
        return removed

    def delete(self, transaction_id: UUID) -> Optional[Transaction]:
        """Remove the transaction with this id, None if there is none"""
        with self._lock:
            index = self._index_of(transaction_id)
            if index is None:
                logger.warning(f"Delete ignored, transaction not found: {transaction_id}")
                return None
            removed = self._transactions.pop(index)
            self._persist()
        logger.debug(f"Deleted transaction {transaction_id}")
        return removed

    # === INTERNALS ===

    def _index_of(self, transaction_id: UUID) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                return index
        return None

    def _persist(self) -> None:
        # Best effort: the in-memory list stays authoritative if the write fails
        if not self.store.save(self._transactions):
            logger.error("Changes kept in memory only; they will not survive a restart")


def create_key_value_store(settings: Settings) -> KeyValueStore:
    """Build the key-value backend selected in settings"""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage, data is lost on exit")
        return MemoryKeyValueStore()

    engine = build_engine(settings.database_url, echo=settings.debug)
    create_tables(engine)
    return SQLKeyValueStore(build_session_factory(engine))


def create_transaction_service(settings: Settings) -> TransactionService:
    """Construct the service for one application session"""
    store = TransactionStore(create_key_value_store(settings), key=settings.storage_key)
    return TransactionService(store)
