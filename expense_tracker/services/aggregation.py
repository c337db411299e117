"""
Balance and category breakdowns over a snapshot of transactions

All functions are pure: they read the sequence they are given
and never mutate it. Totals are exact Decimal sums; rounding is
left to presentation.
"""
from collections import defaultdict
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Sequence

from expense_tracker.models.transaction import (
    Category,
    CategorySummary,
    Transaction,
    TransactionType,
)

ZERO = Decimal("0")


def calculate_balance(transactions: Iterable[Transaction]) -> Decimal:
    """sum(income) - sum(expense) over every transaction"""
    income = ZERO
    expense = ZERO
    for transaction in transactions:
        if transaction.type == TransactionType.INCOME:
            income += transaction.amount
        else:
            expense += transaction.amount
    return income - expense


def summarize_expenses(
    transactions: Iterable[Transaction],
    window: Callable[[Transaction], bool] = lambda t: True,
) -> List[CategorySummary]:
    """
    Group expenses inside window by category

    Returns one summary per category that has at least one expense,
    largest total first. Equal totals keep first-seen order.
    """
    totals: Dict[Category, Decimal] = defaultdict(lambda: ZERO)
    for transaction in transactions:
        if transaction.is_expense and window(transaction):
            totals[transaction.category] += transaction.amount

    summaries = [CategorySummary(category=c, total=t) for c, t in totals.items()]
    return sorted(summaries, key=lambda s: s.total, reverse=True)


def monthly_category_summary(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
) -> List[CategorySummary]:
    """Expense breakdown for one calendar month"""
    return summarize_expenses(
        transactions,
        lambda t: t.date.year == year and t.date.month == month,
    )


def yearly_category_summary(
    transactions: Iterable[Transaction],
    year: int,
) -> List[CategorySummary]:
    """Expense breakdown for one calendar year"""
    return summarize_expenses(transactions, lambda t: t.date.year == year)


def total_expense(summaries: Iterable[CategorySummary]) -> Decimal:
    return sum((s.total for s in summaries), ZERO)


def category_shares(summaries: Sequence[CategorySummary]) -> Dict[Category, float]:
    """
    Percentage of the grand total per category

    An empty or zero-total breakdown has no shares.
    """
    grand_total = total_expense(summaries)
    if grand_total == ZERO:
        return {}
    return {s.category: float(s.total / grand_total * 100) for s in summaries}
