"""
Transaction API endpoints.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.errors import ValidationError
from app.schemas.transaction import DeleteResponse, TransactionResponse
from app.services import transaction_service
from app.services.validation import validate_transaction_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _validated(method: str, body: Any):
    try:
        return validate_transaction_payload(body)
    except ValidationError as e:
        logger.info("[API] %s - Validation failed: %s", method, e.message)
        raise


@router.get("", response_model=List[TransactionResponse])
def list_transactions(request: Request, db: Session = Depends(get_db)):
    """List all transactions, most recent first"""
    logger.info("[API] GET /transactions - Request received")
    logger.debug("[API] Request headers: %s", dict(request.headers))

    transactions = transaction_service.list_transactions(db)

    logger.info("[API] GET - Found transactions: %d", len(transactions))
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(body: Any = Body(None), db: Session = Depends(get_db)):
    """Create a transaction"""
    logger.info("[API] POST /transactions - Request received")
    data = _validated("POST", body)

    transaction = transaction_service.create_transaction(db, data)
    return TransactionResponse.model_validate(transaction)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    body: Any = Body(None),
    db: Session = Depends(get_db)
):
    """Replace all fields of a transaction"""
    logger.info("[API] PUT /transactions/%s - Request received", transaction_id)
    data = _validated("PUT", body)

    transaction = transaction_service.update_transaction(db, transaction_id, data)
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", response_model=DeleteResponse)
def delete_transaction(transaction_id: str, db: Session = Depends(get_db)):
    """Delete a transaction"""
    logger.info("[API] DELETE /transactions/%s - Request received", transaction_id)
    transaction_service.delete_transaction(db, transaction_id)
    return DeleteResponse(success=True)
