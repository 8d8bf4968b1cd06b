"""
Shared building blocks for the EchoPay ledger services.

This package provides:
- Environment-driven settings and logging setup
- A reader/writer lock for in-memory stores
- The append-only record store used by the flat ledgers
- Domain errors and their HTTP mapping
"""

from .errors import LedgerError, InvalidUserError, InvalidAmountError
from .locking import ReadWriteLock
from .store import RecordStore

__all__ = [
    "LedgerError",
    "InvalidUserError",
    "InvalidAmountError",
    "ReadWriteLock",
    "RecordStore",
]
