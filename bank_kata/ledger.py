"""
Account Ledger Module

Single-account ledger holding the running balance and an append-only
history of immutable transactions. Every balance change goes through
Ledger.apply; over-withdrawals and non-positive amounts are never rejected,
they are only annotated on the statement.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional
import threading

from .logging_config import get_logger, log_action


STATEMENT_HEADER = "Date Amount Balance"
STATEMENT_DATE_FORMAT = "%d-%m-%Y"

INSUFFICIENT_FUNDS = "Failed: Insufficient Funds"
NEGATIVE_TRANSACTION = "Failed: Negative Transaction"


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Transaction:
    """
    One balance-affecting event.

    ``amount`` is the magnitude of the change; deposits and withdrawals of
    the same size record the same value. Direction is only recoverable by
    comparing consecutive balances.
    """
    balance: int
    amount: int
    timestamp: datetime

    @property
    def date(self) -> date:
        """Calendar date of the transaction, ignoring time of day"""
        return self.timestamp.date()

    @property
    def status(self) -> str:
        """Statement annotation for this transaction ("" when clean)"""
        if self.balance < 0:
            return INSUFFICIENT_FUNDS
        if self.amount <= 0:
            return NEGATIVE_TRANSACTION
        return ""

    @property
    def is_flagged(self) -> bool:
        return bool(self.status)

    def statement_line(self) -> str:
        """Render ``[status] DD-MM-YYYY amount balance``"""
        # Flagged lines carry a multi-word status prefix, so only clean lines
        # split into exactly (date, amount, balance).
        parts = [
            self.status,
            self.timestamp.strftime(STATEMENT_DATE_FORMAT),
            str(self.amount),
            str(self.balance),
        ]
        return " ".join(part for part in parts if part)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "balance": self.balance,
            "amount": self.amount,
            "date": self.timestamp.isoformat(),
        }


class Ledger:
    """
    In-memory ledger for a single account.

    The ledger starts with a zero transaction as ``current`` and an empty
    history. ``apply`` is the only mutator; reads return copies so callers
    cannot alter the internal sequence.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or local_now
        self._lock = threading.RLock()
        self._current = Transaction(balance=0, amount=0, timestamp=self._clock())
        self._transactions: List[Transaction] = []
        self.logger = get_logger("bank_kata.ledger")

    @property
    def current(self) -> Transaction:
        """Most recent transaction (the zero transaction before any activity)"""
        with self._lock:
            return self._current

    @property
    def balance(self) -> int:
        with self._lock:
            return self._current.balance

    def apply(self, delta: int, action: str = "apply") -> int:
        """
        Apply a signed change to the balance and record it.

        Args:
            delta: Signed change; no bounds are enforced
            action: Label used in the structured log record

        Returns:
            The balance after the change
        """
        with self._lock:
            transaction = Transaction(
                balance=self._current.balance + delta,
                amount=abs(delta),
                timestamp=self._clock()
            )
            self._transactions.append(transaction)
            self._current = transaction

        log_action(
            self.logger, "info", f"Transaction applied: {action}",
            action=action, resource="account",
            extra=transaction.to_dict()
        )
        if transaction.is_flagged:
            log_action(
                self.logger, "warning", transaction.status,
                action=action, resource="account",
                extra=transaction.to_dict()
            )

        return transaction.balance

    def deposit(self, amount: int) -> int:
        """Increase the balance by ``amount``"""
        return self.apply(amount, action="deposit")

    def withdraw(self, amount: int) -> int:
        """Decrease the balance by ``amount`` (not validated)"""
        return self.apply(-amount, action="withdraw")

    def statement(self) -> str:
        """Header line plus the detail line of the most recent transaction"""
        return "\n".join([STATEMENT_HEADER, self.current.statement_line()])

    def history(self) -> List[Transaction]:
        """All transactions in creation order"""
        with self._lock:
            return list(self._transactions)

    def history_by_date(self, day: date) -> List[Transaction]:
        """Transactions created on ``day``, in creation order"""
        return [txn for txn in self.history() if txn.date == day]

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
