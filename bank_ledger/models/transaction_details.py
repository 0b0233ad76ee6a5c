"""
Transaction details database model.
Free-form description and tags attached to a single transaction.
"""

from typing import List, Optional

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from bank_ledger.database import Base

TAG_SEPARATOR = ","


def join_tags(tags: Optional[List[str]]) -> str:
    """Serialize tags into the delimited column value."""
    return TAG_SEPARATOR.join(tags or [])


def split_tags(value: Optional[str]) -> List[str]:
    """Parse the delimited column value back into an ordered list of tags."""
    if not value:
        return []
    return [tag.strip() for tag in value.split(TAG_SEPARATOR)]


class TransactionDetails(Base):
    """
    Transaction details table - at most one row per transaction.
    """
    __tablename__ = "transaction_details"

    id = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(Integer, ForeignKey("transactions.id"), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    tags_value = Column("tags", Text, nullable=True)

    transaction = relationship("Transaction", back_populates="details")

    @property
    def tags(self) -> List[str]:
        return split_tags(self.tags_value)

    @tags.setter
    def tags(self, tags: Optional[List[str]]) -> None:
        self.tags_value = join_tags(tags)

    def __repr__(self):
        return f"<TransactionDetails(transaction={self.transaction_id}, tags={self.tags_value!r})>"
