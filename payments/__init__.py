"""
Payments ledger

An in-memory, append-only list of received payments served over HTTP.
"""

from .models import Payment, CreatePaymentRequest
from .service import PaymentStore

__all__ = [
    "Payment",
    "CreatePaymentRequest",
    "PaymentStore",
]
