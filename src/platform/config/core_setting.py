from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Travier Ticketing'
    VERSION: str = '0.1.0'
    DEBUG: bool = False
    LOG_FILE_ENABLED: bool = False  # Lambda filesystem is read-only outside /tmp

    # AWS
    AWS_REGION: str = 'us-east-1'
    DYNAMODB_ENDPOINT_URL: Optional[str] = None  # e.g. http://localhost:4566 for LocalStack
    EVENTBRIDGE_ENDPOINT_URL: Optional[str] = None

    # DynamoDB tables and indexes
    TICKETS_TABLE_NAME: str = 'Tickets'
    TICKETS_FLIGHT_ID_INDEX: str = 'FlightIdIndex'
    TICKETS_PASSENGER_ID_INDEX: str = 'PassengerIdIndex'
    PAYMENTS_TABLE_NAME: str = 'Payments'
    PAYMENTS_TICKET_ID_INDEX: str = 'TicketIdIndex'

    # EventBridge
    EVENT_BUS_NAME: str = 'default'
    BOOKING_EVENT_SOURCE: str = 'com.travier.booking'
    PAYMENT_EVENT_SOURCE: str = 'com.travier.payment'

    @field_validator('DYNAMODB_ENDPOINT_URL', 'EVENTBRIDGE_ENDPOINT_URL', mode='before')
    @classmethod
    def blank_endpoint_to_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v


settings = Settings()  # type: ignore
