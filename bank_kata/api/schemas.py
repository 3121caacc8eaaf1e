"""
Pydantic schemas for API responses
"""

from datetime import datetime
from pydantic import BaseModel, Field

from ..ledger import Transaction


class TransactionModel(BaseModel):
    balance: int = Field(..., description="Balance after the transaction")
    amount: int = Field(..., description="Magnitude of the change")
    date: datetime = Field(..., description="Timestamp the transaction was recorded")
    
    @classmethod
    def from_transaction(cls, transaction: Transaction) -> 'TransactionModel':
        return cls(
            balance=transaction.balance,
            amount=transaction.amount,
            date=transaction.timestamp
        )


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
