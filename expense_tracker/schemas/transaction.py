"""
Transaction Pydantic schemas for request/response validation

Request schemas are the entry form: they reject blank titles and
non-positive amounts before anything reaches the service.
"""
from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from expense_tracker.models.transaction import MAX_AMOUNT_DIGITS, Category, TransactionType


class TransactionBase(BaseModel):
    """Base schema with common fields"""
    title: str = Field(..., min_length=1, max_length=200, description="Display text")
    amount: Decimal = Field(
        ..., gt=0, max_digits=MAX_AMOUNT_DIGITS, decimal_places=2, description="Positive amount"
    )
    type: TransactionType = Field(..., description="Transaction type: income or expense")
    category: Category = Field(..., description="Category tag")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Title must contain something besides whitespace"""
        v = v.strip()
        if not v:
            raise ValueError("Title must not be empty")
        return v


class TransactionCreate(TransactionBase):
    """Schema for creating a new transaction"""
    date: datetime = Field(default_factory=datetime.now, description="When it happened")


class TransactionUpdate(TransactionBase):
    """Schema for replacing a transaction (every field is required)"""
    date: datetime = Field(..., description="When it happened")


class TransactionResponse(BaseModel):
    """Schema for API response"""
    id: UUID
    title: str
    amount: Decimal
    type: TransactionType
    category: Category
    date: datetime
    amount_display: str

    model_config = {"from_attributes": True}


class TransactionDelete(BaseModel):
    """Positions in the current list order to remove"""
    positions: List[int] = Field(..., min_length=1, description="Zero-based list positions")


class BalanceResponse(BaseModel):
    """Current balance"""
    balance: Decimal
    balance_display: str
    transaction_count: int
