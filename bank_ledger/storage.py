"""
Data store adapter.

Every SQL statement the service issues goes through the functions in this
module. Functions take an open SQLAlchemy session; write operations commit
it themselves and roll it back on failure.
"""

import logging
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.orm import Session, selectinload

from bank_ledger.core.exceptions import (
    AccountNotFoundError,
    DetailsNotFoundError,
    InvalidRequestError,
    TransactionNotFoundError,
)
from bank_ledger.database import Base
from bank_ledger.models.account import Account, utcnow
from bank_ledger.models.transaction import Transaction
from bank_ledger.models.transaction_details import TransactionDetails

logger = logging.getLogger(__name__)


def init_storage(engine) -> None:
    """Create the accounts, transactions and transaction_details tables if missing."""
    Base.metadata.create_all(bind=engine)


# ==================== ACCOUNTS ====================

def list_accounts(db: Session, skip: int = 0, limit: int = 100) -> List[Account]:
    return db.query(Account).order_by(Account.id).offset(skip).limit(limit).all()


def create_account(db: Session, first_name: str, last_name: str) -> Account:
    """Insert a new account with a zero balance and a generated account number."""
    account = Account(first_name=first_name, last_name=last_name, balance=0)
    db.add(account)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(account)
    logger.info("Created account id=%s number=%s", account.id, account.account_number)
    return account


def get_account_by_id(db: Session, account_id: int) -> Account:
    account = db.get(Account, account_id)
    if account is None:
        raise AccountNotFoundError(account_id)
    return account


def get_account_by_number(db: Session, number: int) -> Account:
    """
    Look an account up by its account number.

    Numbers are not unique; the oldest matching account wins.
    """
    account = db.query(Account).filter(
        Account.account_number == number
    ).order_by(Account.id).first()
    if account is None:
        raise AccountNotFoundError(number, field="number")
    return account


def delete_account(db: Session, account_id: int) -> None:
    """
    Delete an account together with the legs booked on it.

    Legs on other accounts that name it as recipient are kept.
    """
    account = get_account_by_id(db, account_id)
    db.delete(account)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Deleted account id=%s", account_id)


def account_exists(db: Session, account_id: int) -> bool:
    return db.scalar(select(exists().where(Account.id == account_id)))


def get_account_with_transactions(db: Session, account_id: int) -> Account:
    """Load an account and every leg booked against it, oldest first."""
    account = db.query(Account).options(
        selectinload(Account.transactions)
    ).filter(Account.id == account_id).first()
    if account is None:
        raise AccountNotFoundError(account_id)
    return account


# ==================== TRANSACTIONS ====================

def transaction_exists(db: Session, transaction_id: int) -> bool:
    return db.scalar(select(exists().where(Transaction.id == transaction_id)))


def create_transaction(
    db: Session,
    account_id: int,
    recipient_id: int,
    amount: int,
    commit: bool = True,
) -> Transaction:
    """
    Insert a single transaction leg.

    With ``commit=False`` the row is only flushed so that it joins the
    caller's unit of work.
    """
    transaction = Transaction(
        account_id=account_id,
        recipient_id=recipient_id,
        amount=amount,
        transaction_date=utcnow(),
    )
    db.add(transaction)
    if commit:
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(transaction)
    else:
        db.flush()
    return transaction


def do_transfer(db: Session, account_id: int, recipient_id: int, amount: int) -> List[Transaction]:
    """
    Move ``amount`` from ``account_id`` to ``recipient_id``.

    Debits the source, credits the recipient and books two legs: one on the
    source account and one on the recipient account (the latter records the
    recipient on both sides). Everything commits together or not at all.
    Balances are allowed to go negative.
    """
    if account_id == recipient_id:
        raise InvalidRequestError("cannot transfer to the same account")

    try:
        # Lock accounts in consistent order to prevent deadlocks
        locked = {}
        for locked_id in sorted([account_id, recipient_id]):
            account = db.query(Account).filter(
                Account.id == locked_id
            ).with_for_update().first()
            if account is None:
                raise AccountNotFoundError(locked_id)
            locked[locked_id] = account

        source = locked[account_id]
        recipient = locked[recipient_id]

        source.balance -= amount
        recipient.balance += amount

        legs = [
            create_transaction(db, account_id, recipient_id, amount, commit=False),
            create_transaction(db, recipient_id, recipient_id, amount, commit=False),
        ]
        db.commit()
    except Exception:
        db.rollback()
        raise

    for leg in legs:
        db.refresh(leg)
    logger.info(
        "Transferred %s from account %s to account %s (legs %s)",
        amount, account_id, recipient_id, [leg.id for leg in legs],
    )
    return legs


# ==================== TRANSACTION DETAILS ====================

def _get_details(db: Session, transaction_id: int) -> Optional[TransactionDetails]:
    return db.query(TransactionDetails).filter(
        TransactionDetails.transaction_id == transaction_id
    ).first()


def create_transaction_details(
    db: Session,
    transaction_id: int,
    description: Optional[str],
    tags: Optional[List[str]],
) -> TransactionDetails:
    if not transaction_exists(db, transaction_id):
        raise TransactionNotFoundError(transaction_id)
    if _get_details(db, transaction_id) is not None:
        raise InvalidRequestError(f"details for transaction `{transaction_id}` already exist")

    details = TransactionDetails(transaction_id=transaction_id, description=description)
    details.tags = tags
    db.add(details)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(details)
    logger.info("Created details for transaction %s", transaction_id)
    return details


def get_transaction_with_details(db: Session, transaction_id: int) -> Transaction:
    transaction = db.query(Transaction).options(
        selectinload(Transaction.details)
    ).filter(Transaction.id == transaction_id).first()
    if transaction is None:
        raise TransactionNotFoundError(transaction_id)
    return transaction


def update_transaction_details(
    db: Session,
    transaction_id: int,
    description: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> TransactionDetails:
    """
    Merge a partial update into the stored details.

    ``None``, an empty description or an empty tag list keeps the stored
    value. A description replaces the stored one; new tags are appended
    after the stored ones (duplicates skipped).
    """
    details = _get_details(db, transaction_id)
    if details is None:
        raise DetailsNotFoundError(transaction_id)

    if description:
        details.description = description

    if tags:
        merged = details.tags
        for tag in tags:
            if tag not in merged:
                merged.append(tag)
        details.tags = merged

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(details)
    logger.info("Updated details for transaction %s", transaction_id)
    return details
