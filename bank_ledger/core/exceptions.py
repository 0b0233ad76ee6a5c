"""
Domain errors raised by the storage layer and request handlers.

Every subclass is answered with HTTP 400 and a flat ``{"error": ...}`` body.
"""


class BankLedgerError(Exception):
    """Base class for all ledger errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(BankLedgerError):
    """Request passed schema validation but cannot be served."""


class AccountNotFoundError(BankLedgerError):
    def __init__(self, value: int, field: str = "id"):
        super().__init__(f"account with {field} `{value}` not found")
        self.value = value
        self.field = field


class TransactionNotFoundError(BankLedgerError):
    def __init__(self, transaction_id: int):
        super().__init__(f"transaction with id `{transaction_id}` not found")
        self.transaction_id = transaction_id


class DetailsNotFoundError(BankLedgerError):
    def __init__(self, transaction_id: int):
        super().__init__(f"no details recorded for transaction `{transaction_id}`")
        self.transaction_id = transaction_id
