from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReserveTicketRequest(_CamelModel):
    flight_id: str = Field(min_length=1)
    passenger_id: str = Field(min_length=1)
    seat_number: str = Field(min_length=1)
    departure_time: str = Field(min_length=1)
    arrival_time: str = Field(min_length=1)


class TicketIdRequest(_CamelModel):
    """Body of check-in and cancel"""

    ticket_id: str = Field(min_length=1)
