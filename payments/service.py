from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, Optional

from shared.store import RecordStore

from .models import Payment


def seed_payments(now: Optional[datetime] = None) -> list[Payment]:
    now = now or datetime.now(timezone.utc)
    return [
        Payment(id="3", amount=Decimal("75.00"), payer_name="Meera", paid_at=now - timedelta(minutes=28)),
        Payment(id="2", amount=Decimal("1200.50"), payer_name="Rohit", paid_at=now - timedelta(minutes=95)),
        Payment(id="1", amount=Decimal("249.00"), payer_name="Asha", paid_at=now - timedelta(hours=3)),
    ]


class PaymentStore(RecordStore[Payment]):
    def __init__(self, seed: Optional[Iterable[Payment]] = None):
        super().__init__(seed_payments() if seed is None else seed)

    def add(self, amount: Decimal, payer_name: str, paid_at: Optional[datetime] = None) -> Payment:
        paid_at = paid_at or datetime.now(timezone.utc)
        return self._prepend(
            lambda payment_id: Payment(id=payment_id, amount=amount, payer_name=payer_name, paid_at=paid_at)
        )
