"""
Pydantic schemas for transaction details.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional

from bank_ledger.models.transaction_details import TAG_SEPARATOR


class TransactionDetailsRequest(BaseModel):
    """
    Schema for creating or updating transaction details.

    On update an omitted (or null) field keeps the stored value.
    """
    description: Optional[str] = Field(None, max_length=2000, description="Free-text description")
    tags: Optional[List[str]] = Field(None, description="Ordered list of tags")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "Rent for March",
                "tags": ["rent", "home"]
            }
        }
    )

    @field_validator("tags")
    @classmethod
    def check_tags(cls, tags):
        if tags is None:
            return tags
        cleaned = []
        for tag in tags:
            tag = tag.strip()
            if not tag:
                raise ValueError("tags must not be empty")
            if TAG_SEPARATOR in tag:
                raise ValueError(f"tags must not contain '{TAG_SEPARATOR}'")
            cleaned.append(tag)
        return cleaned


class TransactionDetailsResponse(BaseModel):
    """Schema for transaction details response."""
    id: int
    transaction_id: int
    description: Optional[str]
    tags: List[str]

    model_config = ConfigDict(from_attributes=True)
