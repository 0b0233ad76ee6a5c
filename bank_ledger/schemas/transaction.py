"""
Pydantic schemas for transfer requests and transaction responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List

from bank_ledger.schemas.transaction_details import TransactionDetailsResponse


class MakeTransactionRequest(BaseModel):
    """Schema for initiating a transfer."""
    account_id: int = Field(..., gt=0, description="Source account id")
    recipient_id: int = Field(..., gt=0, description="Recipient account id")
    amount: int = Field(..., gt=0, description="Amount in minor units (must be positive)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "account_id": 1,
                "recipient_id": 2,
                "amount": 2500
            }
        }
    )


class TransactionResponse(BaseModel):
    """Schema for a single transaction leg."""
    id: int
    account_id: int
    recipient_id: int
    amount: int
    transaction_date: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionWithDetails(TransactionResponse):
    """Transaction together with its attached details."""
    details: List[TransactionDetailsResponse] = []


class TransferResponse(BaseModel):
    """Echo of the transfer request plus the two legs it created."""
    account_id: int
    recipient_id: int
    amount: int
    transactions: List[TransactionResponse]
