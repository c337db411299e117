"""
Expense Tracker

Personal income/expense tracking with a running balance and
monthly/yearly category breakdowns, served over a FastAPI app.
"""

__version__ = "0.1.0"
