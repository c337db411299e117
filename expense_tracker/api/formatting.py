"""
Display helpers for API responses

Category icons/colors and amount formatting are presentation
concerns, so they live here rather than on the data model.
"""
from decimal import Decimal
from typing import Dict, List, NamedTuple, Optional

from expense_tracker.core.config import settings
from expense_tracker.models.transaction import Category


class CategoryDisplay(NamedTuple):
    label: str
    icon: str
    color: str


CATEGORY_DISPLAY: Dict[Category, CategoryDisplay] = {
    Category.SALARY: CategoryDisplay("Salary", "dollarsign.circle.fill", "#34C759"),
    Category.FOOD: CategoryDisplay("Food", "fork.knife.circle.fill", "#FF9500"),
    Category.TRANSPORT: CategoryDisplay("Transport", "car.circle.fill", "#007AFF"),
    Category.SHOPPING: CategoryDisplay("Shopping", "bag.circle.fill", "#FF2D55"),
    Category.BILLS: CategoryDisplay("Bills", "bolt.circle.fill", "#AF52DE"),
    Category.ENTERTAINMENT: CategoryDisplay("Entertainment", "tv.circle.fill", "#5856D6"),
    Category.OTHER: CategoryDisplay("Other", "questionmark.circle.fill", "#8E8E93"),
}


def category_info(category: Category) -> dict:
    """Category identifier merged with its display metadata"""
    display = CATEGORY_DISPLAY[category]
    return {"value": category, **display._asdict()}


def all_categories() -> List[dict]:
    return [category_info(category) for category in Category]


def format_amount(
    value: Decimal,
    fraction_digits: int = 2,
    currency_symbol: Optional[str] = None,
) -> str:
    """
    Format an amount with thousands separators, e.g. ฿1,234.50

    Negative values keep the sign in front of the symbol: -฿20.00
    """
    if currency_symbol is None:
        currency_symbol = settings.currency_symbol
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol}{abs(value):,.{fraction_digits}f}"


def format_percentage(share: float) -> float:
    """Percentages are shown with one decimal"""
    return round(share, 1)
