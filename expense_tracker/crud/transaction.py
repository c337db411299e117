"""
Persistence of the transaction list in the local key-value store
"""
import json
import logging
from decimal import Decimal
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError

from expense_tracker.core.kv_store import KeyValueStore
from expense_tracker.models.transaction import Transaction

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "saved_transactions"

_transaction_list = TypeAdapter(List[Transaction])


class TransactionStore:
    """
    Load and save the whole transaction list under one key

    The payload is a UTF-8 JSON array of transaction objects.
    Both directions recover locally: a bad payload loads as an
    empty list, a failed write is logged and reported as False.
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self.kv = kv
        self.key = key

    def load(self) -> List[Transaction]:
        """Read the persisted list, or an empty list if there is none"""
        try:
            payload = self.kv.get(self.key)
        except Exception as e:
            logger.warning(f"Could not read key {self.key}: {e}")
            return []

        if payload is None:
            logger.info(f"No saved transactions under key: {self.key}")
            return []

        try:
            return self.decode(payload)
        except (UnicodeDecodeError, ValueError, RecursionError, ValidationError) as e:
            logger.warning(f"Discarding unreadable payload under key {self.key}: {e}")
            return []

    def save(self, transactions: Sequence[Transaction]) -> bool:
        """
        Overwrite the persisted list

        Returns:
            True if the list was written, False if the write failed
        """
        try:
            payload = self.encode(transactions)
            self.kv.set(self.key, payload)
        except Exception:
            logger.exception(f"Failed to save {len(transactions)} transactions")
            return False

        logger.debug(f"Saved {len(transactions)} transactions under key: {self.key}")
        return True

    @staticmethod
    def encode(transactions: Sequence[Transaction]) -> bytes:
        records = _transaction_list.dump_python(list(transactions), mode="json")
        return json.dumps(records, ensure_ascii=False).encode("utf-8")

    @staticmethod
    def decode(payload: bytes) -> List[Transaction]:
        # Numbers come back as Decimal so amounts survive the round trip exactly
        records = json.loads(payload.decode("utf-8"), parse_float=Decimal, parse_int=Decimal)
        if not isinstance(records, list):
            raise ValueError(f"expected a JSON array, got {type(records).__name__}")
        return _transaction_list.validate_python(records)
