"""
Services Package

Business logic services for Expense Tracker.

Modules:
- aggregation: balance and category breakdowns (pure functions)
- transaction_service: CRUD surface with write-through persistence
"""

from expense_tracker.services import aggregation
from expense_tracker.services import transaction_service

__all__ = ["aggregation", "transaction_service"]
