from datetime import datetime
from enum import Enum
from typing import Union

from pydantic import ConfigDict, Field

from shared.errors import InvalidUserError
from shared.schema import CamelModel, Money, PositiveMoney, RecordModel


INVALID_USERS_MESSAGE = "only user-a and user-b are supported"


class TransactionType(str, Enum):
    SENT = "sent"
    RECEIVED = "received"


class Direction(str, Enum):
    SENT = "sent"
    RECEIVED = "received"


class UserID(str, Enum):
    USER_A = "user-a"
    USER_B = "user-b"

    @classmethod
    def parse(cls, value: Union["UserID", str]) -> "UserID":
        try:
            return cls(value)
        except ValueError:
            raise InvalidUserError(INVALID_USERS_MESSAGE) from None


class Transaction(RecordModel):
    id: str
    amount: Money
    counterparty: str
    type: TransactionType
    created_at: datetime


class LedgerEntry(RecordModel):
    """One side of a channel transfer, seen from ``user``."""

    id: str
    channel: str
    user: UserID
    counterparty: UserID
    direction: Direction
    amount: Money
    created_at: datetime


class CreateTransactionRequest(CamelModel):
    amount: PositiveMoney
    counterparty: str = Field(..., min_length=1)

    model_config = ConfigDict(json_schema_extra={
        "example": {"amount": 99.5, "counterparty": "Kabir"}
    })


class TransferRequest(CamelModel):
    # Users and amount are checked by the ledger store, not here.
    from_user: str
    to_user: str
    amount: Money

    model_config = ConfigDict(json_schema_extra={
        "example": {"fromUser": "user-a", "toUser": "user-b", "amount": 99.5}
    })


class TransferResponse(CamelModel):
    from_user_log: LedgerEntry
    to_user_log: LedgerEntry
