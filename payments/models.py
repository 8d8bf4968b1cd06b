from datetime import datetime

from pydantic import ConfigDict, Field

from shared.schema import CamelModel, Money, PositiveMoney, RecordModel


class Payment(RecordModel):
    id: str
    amount: Money
    payer_name: str
    paid_at: datetime


class CreatePaymentRequest(CamelModel):
    amount: PositiveMoney
    payer_name: str = Field(..., min_length=1, description="Name of the payer")

    model_config = ConfigDict(json_schema_extra={
        "example": {"amount": 321.99, "payerName": "Ishita"}
    })
