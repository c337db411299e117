"""
API v1 endpoint routers
"""
from expense_tracker.api.v1.endpoints import categories, reports, transactions

__all__ = ["categories", "reports", "transactions"]
