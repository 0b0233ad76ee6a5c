"""
Database models package.
"""

from bank_ledger.models.account import Account, generate_account_number
from bank_ledger.models.transaction import Transaction
from bank_ledger.models.transaction_details import TransactionDetails, join_tags, split_tags

__all__ = [
    "Account",
    "Transaction",
    "TransactionDetails",
    "generate_account_number",
    "join_tags",
    "split_tags",
]
