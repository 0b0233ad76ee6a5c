"""
Account API endpoints.
Handles account creation, retrieval, deletion and transfers.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from bank_ledger import storage
from bank_ledger.core.exceptions import InvalidRequestError
from bank_ledger.database import get_db
from bank_ledger.schemas.account import AccountResponse, CreateAccountRequest
from bank_ledger.schemas.common import MessageResponse
from bank_ledger.schemas.transaction import MakeTransactionRequest, TransactionResponse, TransferResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/account", tags=["Accounts"])


@router.get("", response_model=List[AccountResponse])
def list_accounts(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    """
    List all accounts with pagination.

    - **skip**: Number of records to skip (default: 0)
    - **limit**: Maximum number of records to return (default: 100)
    """
    return storage.list_accounts(db, skip=skip, limit=limit)


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    account_data: CreateAccountRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new account with a zero balance.

    - **first_name**: Account holder first name
    - **last_name**: Account holder last name

    At least one of the two names is required.
    """
    if not account_data.is_valid():
        raise InvalidRequestError("invalid input")

    return storage.create_account(db, account_data.first_name, account_data.last_name)


@router.put("", response_model=TransferResponse)
def transfer(
    transfer_data: MakeTransactionRequest,
    db: Session = Depends(get_db)
):
    """
    Transfer funds between two accounts.

    - **account_id**: Source account
    - **recipient_id**: Recipient account
    - **amount**: Amount in minor units (must be positive)
    """
    legs = storage.do_transfer(
        db,
        transfer_data.account_id,
        transfer_data.recipient_id,
        transfer_data.amount,
    )
    return TransferResponse(
        account_id=transfer_data.account_id,
        recipient_id=transfer_data.recipient_id,
        amount=transfer_data.amount,
        transactions=[TransactionResponse.model_validate(leg) for leg in legs],
    )


@router.get("/number/{number}", response_model=AccountResponse)
def get_account_by_number(
    number: int,
    db: Session = Depends(get_db)
):
    """
    Get an account by its account number.
    """
    return storage.get_account_by_number(db, number)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    db: Session = Depends(get_db)
):
    """
    Get account details by id.
    """
    logger.info("Getting account with id %s", account_id)
    return storage.get_account_by_id(db, account_id)


@router.delete("/{account_id}", response_model=MessageResponse)
def delete_account(
    account_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete an account and the transactions booked against it.
    """
    storage.delete_account(db, account_id)
    return MessageResponse(message=f"Successfully deleted account with id `{account_id}`")
