"""
Two-party channel ledger.

Each recognized user owns a newest-first list of ledger entries. A
transfer writes one entry into each owner's list while holding a single
write lock, so readers see both halves of a transfer or neither.
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional, Union

from shared.errors import InvalidAmountError, InvalidUserError
from shared.locking import ReadWriteLock

from .models import INVALID_USERS_MESSAGE, Direction, LedgerEntry, UserID

logger = logging.getLogger(__name__)

UNSUPPORTED_CHANNEL = "unsupported"

UserLike = Union[UserID, str]


def _raw(user: UserLike) -> str:
    return user.value if isinstance(user, UserID) else user


def channel_name(a: UserLike, b: UserLike) -> str:
    """Label for the unordered pair ``{a, b}``."""
    if {_raw(a), _raw(b)} == {UserID.USER_A.value, UserID.USER_B.value}:
        return f"{UserID.USER_A.value}<->{UserID.USER_B.value}"
    return UNSUPPORTED_CHANNEL


def seed_ledgers(now: Optional[datetime] = None) -> dict[UserID, list[LedgerEntry]]:
    now = now or datetime.now(timezone.utc)
    created_at = now - timedelta(minutes=40)
    channel = channel_name(UserID.USER_A, UserID.USER_B)
    return {
        UserID.USER_A: [
            LedgerEntry(
                id="1", channel=channel, user=UserID.USER_A, counterparty=UserID.USER_B,
                direction=Direction.SENT, amount=Decimal("120"), created_at=created_at,
            ),
        ],
        UserID.USER_B: [
            LedgerEntry(
                id="2", channel=channel, user=UserID.USER_B, counterparty=UserID.USER_A,
                direction=Direction.RECEIVED, amount=Decimal("120"), created_at=created_at,
            ),
        ],
    }


class ChannelLedgerStore:
    def __init__(self, seed: Optional[dict[UserID, list[LedgerEntry]]] = None):
        seed = seed_ledgers() if seed is None else seed
        self._lock = ReadWriteLock()
        self._logs: dict[UserID, list[LedgerEntry]] = {user: list(seed.get(user, [])) for user in UserID}
        self._next_id = max(
            (int(entry.id) for entries in self._logs.values() for entry in entries),
            default=0,
        ) + 1

    def list_by_user(self, user: UserLike) -> list[LedgerEntry]:
        user = UserID.parse(user)
        with self._lock.read():
            return list(self._logs[user])

    def snapshot(self) -> dict[UserID, list[LedgerEntry]]:
        """Every user's ledger, taken under one read lock."""
        with self._lock.read():
            return {user: list(entries) for user, entries in self._logs.items()}

    def transfer(
        self, from_user: UserLike, to_user: UserLike, amount: Decimal
    ) -> tuple[LedgerEntry, LedgerEntry]:
        sender = UserID.parse(from_user)
        receiver = UserID.parse(to_user)
        if sender == receiver:
            raise InvalidUserError(INVALID_USERS_MESSAGE)
        if amount <= 0:
            raise InvalidAmountError("amount must be greater than 0")

        channel = channel_name(sender, receiver)
        with self._lock.write():
            now = datetime.now(timezone.utc)
            from_entry = LedgerEntry(
                id=str(self._next_id), channel=channel, user=sender, counterparty=receiver,
                direction=Direction.SENT, amount=amount, created_at=now,
            )
            to_entry = LedgerEntry(
                id=str(self._next_id + 1), channel=channel, user=receiver, counterparty=sender,
                direction=Direction.RECEIVED, amount=amount, created_at=now,
            )
            self._next_id += 2
            self._logs[sender].insert(0, from_entry)
            self._logs[receiver].insert(0, to_entry)

        logger.debug("Transfer %s -> %s of %s (entries %s, %s)", sender.value, receiver.value, amount, from_entry.id, to_entry.id)
        return from_entry, to_entry
