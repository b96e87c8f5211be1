#!/usr/bin/env python3
"""
Local AWS Reset Script
Recreate the DynamoDB tables and the EventBridge bus on LocalStack

Features:
1. Drop & Recreate Tables - Tickets and Payments with their lookup indexes
2. Ensure Event Bus - create EVENT_BUS_NAME when it does not exist

Notes:
- Point DYNAMODB_ENDPOINT_URL / EVENTBRIDGE_ENDPOINT_URL at LocalStack first;
  the script refuses to run against real AWS endpoints
- Table layout mirrors deployment/cdk/stacks/*_service_stack.py
"""

from functools import partial
from typing import Any, Dict, List, Tuple

import anyio
from botocore.exceptions import ClientError

from src.platform.aws.boto3_client import get_dynamodb_resource, get_eventbridge_client
from src.platform.config.core_setting import settings


TABLES: Dict[str, Tuple[str, List[Tuple[str, str]]]] = {
    settings.TICKETS_TABLE_NAME: (
        'ticketId',
        [
            (settings.TICKETS_FLIGHT_ID_INDEX, 'flightId'),
            (settings.TICKETS_PASSENGER_ID_INDEX, 'passengerId'),
        ],
    ),
    settings.PAYMENTS_TABLE_NAME: (
        'paymentId',
        [(settings.PAYMENTS_TICKET_ID_INDEX, 'ticketId')],
    ),
}


def _table_definition(table_name: str, key: str, indexes: List[Tuple[str, str]]) -> Dict[str, Any]:
    attributes = {key} | {index_key for _, index_key in indexes}
    return {
        'TableName': table_name,
        'KeySchema': [{'AttributeName': key, 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': name, 'AttributeType': 'S'} for name in sorted(attributes)
        ],
        'GlobalSecondaryIndexes': [
            {
                'IndexName': index_name,
                'KeySchema': [{'AttributeName': index_key, 'KeyType': 'HASH'}],
                'Projection': {'ProjectionType': 'ALL'},
            }
            for index_name, index_key in indexes
        ],
        'BillingMode': 'PAY_PER_REQUEST',
    }


def _drop_and_create_table(table_name: str, key: str, indexes: List[Tuple[str, str]]) -> None:
    dynamodb = get_dynamodb_resource()
    table = dynamodb.Table(table_name)
    try:
        table.delete()
        table.wait_until_not_exists()
        print(f"   ✅ Table '{table_name}' dropped")
    except ClientError as e:
        if e.response['Error']['Code'] != 'ResourceNotFoundException':
            raise

    dynamodb.create_table(**_table_definition(table_name, key, indexes)).wait_until_exists()
    print(f"   ✅ Table '{table_name}' created")


def _ensure_event_bus() -> None:
    client = get_eventbridge_client()
    try:
        client.describe_event_bus(Name=settings.EVENT_BUS_NAME)
        print(f"   ✅ Event bus '{settings.EVENT_BUS_NAME}' already exists")
    except ClientError as e:
        if e.response['Error']['Code'] != 'ResourceNotFoundException':
            raise
        client.create_event_bus(Name=settings.EVENT_BUS_NAME)
        print(f"   ✅ Event bus '{settings.EVENT_BUS_NAME}' created")


async def main() -> None:
    if not (settings.DYNAMODB_ENDPOINT_URL and settings.EVENTBRIDGE_ENDPOINT_URL):
        print('❌ DYNAMODB_ENDPOINT_URL and EVENTBRIDGE_ENDPOINT_URL must point at LocalStack')
        exit(1)

    print('🔄 Starting local AWS reset...')
    print('=' * 50)

    try:
        print('🗑️ Recreating DynamoDB tables...')
        for table_name, (key, indexes) in TABLES.items():
            await anyio.to_thread.run_sync(partial(_drop_and_create_table, table_name, key, indexes))
        print()

        print('🚌 Checking event bus...')
        if settings.EVENT_BUS_NAME != 'default':
            await anyio.to_thread.run_sync(_ensure_event_bus)
        print()

        print('=' * 50)
        print('✅ Local AWS reset completed!')

    except ClientError as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    anyio.run(main)
