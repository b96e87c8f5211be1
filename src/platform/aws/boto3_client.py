"""
boto3 factories

Resources and clients are created once per execution environment and reused
across warm Lambda invocations.
"""

from functools import lru_cache
from typing import Any, Optional

import boto3

from src.platform.config.core_setting import settings


@lru_cache(maxsize=None)
def get_dynamodb_resource(
    *, region_name: Optional[str] = None, endpoint_url: Optional[str] = None
) -> Any:
    return boto3.resource(
        'dynamodb',
        region_name=region_name or settings.AWS_REGION,
        endpoint_url=endpoint_url or settings.DYNAMODB_ENDPOINT_URL,
    )


def get_dynamodb_table(
    *, table_name: str, region_name: Optional[str] = None, endpoint_url: Optional[str] = None
) -> Any:
    return get_dynamodb_resource(region_name=region_name, endpoint_url=endpoint_url).Table(
        table_name
    )


@lru_cache(maxsize=None)
def get_eventbridge_client(
    *, region_name: Optional[str] = None, endpoint_url: Optional[str] = None
) -> Any:
    return boto3.client(
        'events',
        region_name=region_name or settings.AWS_REGION,
        endpoint_url=endpoint_url or settings.EVENTBRIDGE_ENDPOINT_URL,
    )
