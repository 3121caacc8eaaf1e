"""
Account endpoints
"""

from datetime import date, datetime
from typing import List

from fastapi import APIRouter, HTTPException, Depends, Query
from fastapi.responses import PlainTextResponse

from .dependencies import get_ledger
from .schemas import TransactionModel
from ..ledger import Ledger
from ..logging_config import get_logger


router = APIRouter()
logger = get_logger("bank_kata.api")

QUERY_DATE_FORMAT = "%Y-%m-%d"


def parse_query_date(value: str) -> date:
    """Parse a strict zero-padded YYYY-MM-DD calendar date"""
    day = datetime.strptime(value, QUERY_DATE_FORMAT).date()
    # strptime also takes unpadded fields such as 2024-1-7
    if day.isoformat() != value:
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return day


@router.post("/deposit", response_class=PlainTextResponse)
async def deposit(
    amount: int = Query(..., description="Amount to add to the balance"),
    ledger: Ledger = Depends(get_ledger)
):
    """Make a deposit"""
    balance = ledger.deposit(amount)
    return f"Deposit successful. Current balance: {balance}"


@router.post("/withdraw", response_class=PlainTextResponse)
async def withdraw(
    amount: int = Query(..., description="Amount to take from the balance"),
    ledger: Ledger = Depends(get_ledger)
):
    """Make a withdrawal"""
    balance = ledger.withdraw(amount)
    return f"Withdrawal successful. Current balance: {balance}"


@router.get("/statement", response_class=PlainTextResponse)
async def statement(ledger: Ledger = Depends(get_ledger)):
    """Statement for the most recent transaction"""
    return ledger.statement()


@router.get("/history", response_model=List[TransactionModel])
async def history(ledger: Ledger = Depends(get_ledger)):
    """All transactions in the order they were made"""
    return [TransactionModel.from_transaction(txn) for txn in ledger.history()]


@router.get("/historyByDate", response_model=List[TransactionModel])
async def history_by_date(
    date_param: str = Query(..., alias="date", description="Calendar date (YYYY-MM-DD)"),
    ledger: Ledger = Depends(get_ledger)
):
    """Transactions made on the given calendar date"""
    try:
        day = parse_query_date(date_param)
    except ValueError as e:
        logger.warning(f"Rejected history date {date_param!r}: {e}")
        raise HTTPException(status_code=400, detail=f"Invalid date: {date_param}")
    
    return [TransactionModel.from_transaction(txn) for txn in ledger.history_by_date(day)]
