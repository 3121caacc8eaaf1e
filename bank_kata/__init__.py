"""
Bank Kata Account Service

A single in-memory bank account with deposits, withdrawals, a one-line
statement and transaction history, served over HTTP.
"""

__version__ = "1.0.0"
