"""
Report API endpoints: expense breakdowns by category
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from expense_tracker.api.deps import get_transaction_service
from expense_tracker.api.formatting import category_info, format_amount, format_percentage
from expense_tracker.models.transaction import CategorySummary
from expense_tracker.schemas.report import CategorySummaryResponse, ReportResponse
from expense_tracker.services import aggregation
from expense_tracker.services.transaction_service import TransactionService

router = APIRouter()


def build_report(
    summaries: List[CategorySummary],
    period: str,
    year: int,
    month: Optional[int] = None,
) -> ReportResponse:
    """Attach totals, percentages and display metadata to a breakdown"""
    total = aggregation.total_expense(summaries)
    shares = aggregation.category_shares(summaries)
    items = [
        CategorySummaryResponse(
            category=category_info(s.category),
            total=s.total,
            total_display=format_amount(s.total),
            percentage=format_percentage(shares.get(s.category, 0.0)),
        )
        for s in summaries
    ]
    return ReportResponse(
        period=period,
        year=year,
        month=month,
        total_expense=total,
        total_display=format_amount(total),
        items=items,
    )


@router.get("/monthly", response_model=ReportResponse)
def get_monthly_report(
    month: Optional[int] = Query(None, ge=1, le=12, description="Calendar month"),
    year: Optional[int] = Query(None, ge=1, le=9999, description="Calendar year"),
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Expenses of one month grouped by category, largest first

    - **month**: 1-12, defaults to the current month
    - **year**: defaults to the current year
    """
    today = date.today()
    month = month or today.month
    year = year or today.year

    summaries = service.monthly_summary(month=month, year=year)
    return build_report(summaries, "monthly", year=year, month=month)


@router.get("/yearly", response_model=ReportResponse)
def get_yearly_report(
    year: Optional[int] = Query(None, ge=1, le=9999, description="Calendar year"),
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Expenses of one year grouped by category, largest first

    An empty item list means there were no expenses that year.
    """
    year = year or date.today().year

    summaries = service.yearly_summary(year=year)
    return build_report(summaries, "yearly", year=year)
