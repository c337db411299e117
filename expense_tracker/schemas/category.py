"""
Category Pydantic schemas for API responses
"""
from pydantic import BaseModel, Field

from expense_tracker.models.transaction import Category


class CategoryResponse(BaseModel):
    """Category with its display metadata"""
    value: Category = Field(..., description="Category identifier")
    label: str = Field(..., description="Human readable name")
    icon: str = Field(..., description="Icon name")
    color: str = Field(..., pattern="^#[0-9A-Fa-f]{6}$", description="Color in hex format")
