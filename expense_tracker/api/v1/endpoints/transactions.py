"""
Transaction API endpoints
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from expense_tracker.api.deps import get_transaction_service
from expense_tracker.api.formatting import format_amount
from expense_tracker.models.transaction import Transaction
from expense_tracker.schemas.transaction import (
    BalanceResponse,
    TransactionCreate,
    TransactionDelete,
    TransactionResponse,
    TransactionUpdate,
)
from expense_tracker.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)
router = APIRouter()


def to_response(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        **transaction.model_dump(),
        amount_display=format_amount(transaction.amount),
    )


@router.get("/", response_model=List[TransactionResponse])
def get_transactions(service: TransactionService = Depends(get_transaction_service)):
    """
    Get all transactions, newest first
    """
    return [to_response(t) for t in service.transactions]


@router.post("/",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED
    )
def create_transaction(
    transaction_in: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Record a new transaction at the top of the list
    """
    transaction = service.add(**transaction_in.model_dump())
    return to_response(transaction)


@router.get("/balance", response_model=BalanceResponse)
def get_balance(service: TransactionService = Depends(get_transaction_service)):
    """
    Total income minus total expense
    """
    balance = service.balance()
    return BalanceResponse(
        balance=balance,
        balance_display=format_amount(balance),
        transaction_count=len(service.transactions),
    )


@router.post("/delete", status_code=status.HTTP_204_NO_CONTENT)
def delete_transactions_at(
    delete_in: TransactionDelete,
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Delete transactions by their position in the current list

    - **positions**: zero-based positions as returned by the list endpoint
    """
    try:
        service.delete_at(delete_in.positions)
    except IndexError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    return None


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: UUID,
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Get specific transaction by ID
    """
    transaction = service.get(transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return to_response(transaction)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: UUID,
    transaction_in: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Replace every field of a transaction, keeping its id and position
    """
    transaction = service.update(transaction_id, **transaction_in.model_dump())
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return to_response(transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: UUID,
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Delete transaction
    """
    transaction = service.delete(transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return None
