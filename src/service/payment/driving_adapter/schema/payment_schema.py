from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessPaymentRequest(_CamelModel):
    # Range and currency rules belong to Money; the schema only checks shape
    ticket_id: str = Field(min_length=1)
    amount: Decimal
    currency: str
    payment_method: str = Field(min_length=1)


class IssueRefundRequest(_CamelModel):
    payment_id: str = Field(min_length=1)
    reason: str = Field(min_length=1)
