from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


def _require_number(value: Any) -> Any:
    # JSON strings and booleans are not amounts, even when pydantic could coerce them.
    if isinstance(value, (str, bytes, bool)):
        raise ValueError("amount must be a number")
    return value


# Decimal in Python, plain number on the wire.
Money = Annotated[
    Decimal,
    BeforeValidator(_require_number),
    PlainSerializer(float, return_type=float, when_used="json"),
]
PositiveMoney = Annotated[Money, Field(gt=0)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    model_config = ConfigDict(frozen=True)
