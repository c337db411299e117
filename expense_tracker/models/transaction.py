"""
Transaction model for recorded income and expense events
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


class TransactionType(str, Enum):
    """Transaction type enum"""
    INCOME = "income"
    EXPENSE = "expense"


class Category(str, Enum):
    """Closed set of categories a transaction can be tagged with"""
    SALARY = "salary"
    FOOD = "food"
    TRANSPORT = "transport"
    SHOPPING = "shopping"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"


# Persisted as a JSON number; the store parses numbers back into Decimal.
# A double holds 15 significant digits, so only amounts up to that many
# digits survive the round trip unchanged.
MAX_AMOUNT_DIGITS = 15

Amount = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


class Transaction(BaseModel):
    """
    Transaction model

    Represents a single income or expense event.
    The amount is always a positive magnitude, the sign comes from type.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    title: str
    amount: Amount
    type: TransactionType
    category: Category
    date: datetime

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, type={self.type.value}, "
            f"amount={self.amount}, date={self.date.isoformat()})>"
        )


class CategorySummary(BaseModel):
    """Derived expense total of one category within a time window"""
    model_config = ConfigDict(frozen=True)

    category: Category
    total: Decimal
