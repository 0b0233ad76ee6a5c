"""
Pydantic schemas package.
"""

from bank_ledger.schemas.account import AccountResponse, AccountWithTransactions, CreateAccountRequest
from bank_ledger.schemas.common import ErrorResponse, MessageResponse
from bank_ledger.schemas.transaction import (
    MakeTransactionRequest,
    TransactionResponse,
    TransactionWithDetails,
    TransferResponse,
)
from bank_ledger.schemas.transaction_details import TransactionDetailsRequest, TransactionDetailsResponse

__all__ = [
    "AccountResponse",
    "AccountWithTransactions",
    "CreateAccountRequest",
    "ErrorResponse",
    "MakeTransactionRequest",
    "MessageResponse",
    "TransactionDetailsRequest",
    "TransactionDetailsResponse",
    "TransactionResponse",
    "TransactionWithDetails",
    "TransferResponse",
]
