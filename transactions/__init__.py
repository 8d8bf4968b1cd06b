"""
Transactions ledger

Provides:
- A flat history of sent and received transactions
- A two-party channel ledger whose transfers update both users at once
"""

from .models import (
    TransactionType,
    Direction,
    UserID,
    Transaction,
    LedgerEntry,
)
from .service import TransactionStore
from .channels import ChannelLedgerStore, channel_name

__all__ = [
    "TransactionType",
    "Direction",
    "UserID",
    "Transaction",
    "LedgerEntry",
    "TransactionStore",
    "ChannelLedgerStore",
    "channel_name",
]
