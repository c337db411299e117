"""
Data models
"""
from expense_tracker.db.base import Base
from expense_tracker.models.preference import Preference
from expense_tracker.models.transaction import (
    Category,
    CategorySummary,
    Transaction,
    TransactionType,
)

__all__ = [
    "Base",
    "Preference",
    "Category",
    "CategorySummary",
    "Transaction",
    "TransactionType",
]
