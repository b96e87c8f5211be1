from functools import partial
from typing import Any, Dict, List

import anyio
from boto3.dynamodb.conditions import Key


async def query_index(
    *, table: Any, index_name: str, key_name: str, key_value: str
) -> List[Dict[str, Any]]:
    """Equality Query on a GSI, following LastEvaluatedKey until exhausted."""
    items: List[Dict[str, Any]] = []
    query_kwargs: Dict[str, Any] = {
        'IndexName': index_name,
        'KeyConditionExpression': Key(key_name).eq(key_value),
    }
    while True:
        response = await anyio.to_thread.run_sync(partial(table.query, **query_kwargs))
        items.extend(response.get('Items', []))
        last_key = response.get('LastEvaluatedKey')
        if not last_key:
            return items
        query_kwargs['ExclusiveStartKey'] = last_key
