"""
Transaction database model.
One row per transfer leg.
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from bank_ledger.database import Base
from bank_ledger.models.account import utcnow


class Transaction(Base):
    """
    Transaction table - stores transfer legs.
    """
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), index=True, nullable=False)
    recipient_id = Column(Integer, index=True, nullable=False)
    amount = Column(BigInteger, nullable=False)
    transaction_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    account = relationship(
        "Account",
        foreign_keys=[account_id],
        back_populates="transactions"
    )
    details = relationship(
        "TransactionDetails",
        back_populates="transaction",
        cascade="all, delete",
        order_by="TransactionDetails.id",
    )

    def __repr__(self):
        return f"<Transaction(id={self.id}, account={self.account_id}, recipient={self.recipient_id}, amount={self.amount})>"
