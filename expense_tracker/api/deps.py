"""
FastAPI dependencies
"""
from fastapi import HTTPException, Request, status

from expense_tracker.services.transaction_service import TransactionService


def get_transaction_service(request: Request) -> TransactionService:
    """
    Dependency returning the service created at application startup

    Usage:
        @router.get("/items")
        def items(service: TransactionService = Depends(get_transaction_service)):
            return service.transactions
    """
    service = getattr(request.app.state, "transaction_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Transaction service is not initialized"
        )
    return service
