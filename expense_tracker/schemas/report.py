"""
Report schemas for category breakdowns
"""
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from expense_tracker.schemas.category import CategoryResponse


class CategorySummaryResponse(BaseModel):
    """One category row of a report"""
    category: CategoryResponse
    total: Decimal
    total_display: str
    percentage: float = Field(..., description="Share of the report total, one decimal")


class ReportResponse(BaseModel):
    """Expense breakdown for a month or a year"""
    period: Literal["monthly", "yearly"]
    year: int
    month: Optional[int] = None
    total_expense: Decimal
    total_display: str
    items: List[CategorySummaryResponse]
