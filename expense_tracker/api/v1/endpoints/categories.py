"""
Category API endpoints
"""
from typing import List

from fastapi import APIRouter, HTTPException, status

from expense_tracker.api.formatting import all_categories, category_info
from expense_tracker.models.transaction import Category
from expense_tracker.schemas.category import CategoryResponse

router = APIRouter()


@router.get("/", response_model=List[CategoryResponse])
def get_categories():
    """
    Get all categories with their icon and color
    """
    return all_categories()


@router.get("/{category}", response_model=CategoryResponse)
def get_category(category: str):
    """
    Get display metadata of one category
    """
    try:
        return category_info(Category(category))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
