from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, Optional

from shared.store import RecordStore

from .models import Transaction, TransactionType


def seed_transactions(now: Optional[datetime] = None) -> list[Transaction]:
    now = now or datetime.now(timezone.utc)
    return [
        Transaction(
            id="3", amount=Decimal("89.99"), counterparty="Arjun",
            type=TransactionType.SENT, created_at=now - timedelta(minutes=15),
        ),
        Transaction(
            id="2", amount=Decimal("1500.00"), counterparty="Divya",
            type=TransactionType.RECEIVED, created_at=now - timedelta(minutes=70),
        ),
        Transaction(
            id="1", amount=Decimal("450.00"), counterparty="Kabir",
            type=TransactionType.SENT, created_at=now - timedelta(hours=2),
        ),
    ]


class TransactionStore(RecordStore[Transaction]):
    def __init__(self, seed: Optional[Iterable[Transaction]] = None):
        super().__init__(seed_transactions() if seed is None else seed)

    def add(
        self,
        amount: Decimal,
        counterparty: str,
        type: TransactionType,
        created_at: Optional[datetime] = None,
    ) -> Transaction:
        created_at = created_at or datetime.now(timezone.utc)
        return self._prepend(
            lambda transaction_id: Transaction(
                id=transaction_id,
                amount=amount,
                counterparty=counterparty,
                type=type,
                created_at=created_at,
            )
        )
