"""
Pydantic schemas for Account API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List, Optional

from bank_ledger.schemas.transaction import TransactionResponse


class CreateAccountRequest(BaseModel):
    """Schema for creating a new account."""
    first_name: str = Field(default="", max_length=50, description="Account holder first name")
    last_name: str = Field(default="", max_length=50, description="Account holder last name")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "first_name": "Ada",
                "last_name": "Lovelace"
            }
        }
    )

    def is_valid(self) -> bool:
        """An account needs at least one of the two names."""
        return self.first_name != "" or self.last_name != ""


class AccountResponse(BaseModel):
    """Schema for account response."""
    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    account_number: int
    balance: int
    created_at: datetime = Field(serialization_alias="create_at")

    model_config = ConfigDict(from_attributes=True)


class AccountWithTransactions(AccountResponse):
    """Account together with the transaction legs booked against it."""
    transactions: List[TransactionResponse] = []
