"""
Account database model.
Represents bank accounts in the system.
"""

import random
from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from bank_ledger.database import Base

ACCOUNT_NUMBER_LIMIT = 1_000_000


def generate_account_number() -> int:
    """Pseudo-random account number in [0, 999999]; uniqueness is not enforced."""
    return random.randrange(ACCOUNT_NUMBER_LIMIT)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(Base):
    """
    Account table - stores bank account information.
    """
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    account_number = Column("number", BigInteger, index=True, nullable=False, default=generate_account_number)
    balance = Column(BigInteger, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Legs booked on this account; legs that only name it as recipient stay put
    transactions = relationship(
        "Transaction",
        foreign_keys="Transaction.account_id",
        back_populates="account",
        cascade="all, delete",
        order_by="Transaction.id",
    )

    def __repr__(self):
        return f"<Account(id={self.id}, number={self.account_number}, balance={self.balance})>"
