"""
Transaction API endpoints.
Lists an account's transactions and manages per-transaction details.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bank_ledger import storage
from bank_ledger.database import get_db
from bank_ledger.schemas.account import AccountWithTransactions
from bank_ledger.schemas.transaction import TransactionWithDetails
from bank_ledger.schemas.transaction_details import TransactionDetailsRequest, TransactionDetailsResponse

router = APIRouter(prefix="/account/transactions", tags=["Transactions"])


@router.get("/{account_id}", response_model=AccountWithTransactions)
def get_account_transactions(
    account_id: int,
    db: Session = Depends(get_db)
):
    """
    Get an account together with the transaction legs booked against it.
    """
    return storage.get_account_with_transactions(db, account_id)


@router.post(
    "/{transaction_id}/details",
    response_model=TransactionDetailsResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_transaction_details(
    transaction_id: int,
    details_data: TransactionDetailsRequest,
    db: Session = Depends(get_db)
):
    """
    Attach a description and tags to a transaction.

    - **description**: Free-text description
    - **tags**: Ordered list of tags (no commas)
    """
    return storage.create_transaction_details(
        db,
        transaction_id,
        details_data.description,
        details_data.tags,
    )


@router.get("/{transaction_id}/details", response_model=TransactionWithDetails)
def get_transaction_details(
    transaction_id: int,
    db: Session = Depends(get_db)
):
    """
    Get a transaction together with its details.
    """
    return storage.get_transaction_with_details(db, transaction_id)


@router.put("/{transaction_id}/details", response_model=TransactionDetailsResponse)
def update_transaction_details(
    transaction_id: int,
    details_data: TransactionDetailsRequest,
    db: Session = Depends(get_db)
):
    """
    Merge an update into a transaction's details.

    Omitted fields are kept. New tags are appended to the stored ones;
    an empty tag list clears them.
    """
    return storage.update_transaction_details(
        db,
        transaction_id,
        description=details_data.description,
        tags=details_data.tags,
    )
