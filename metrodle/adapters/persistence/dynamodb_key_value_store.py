from __future__ import annotations

import os
import time
from dataclasses import dataclass

from metrodle.adapters.aws import dynamodb_client
from metrodle.app.ports.output import IKeyValueStore


@dataclass(slots=True)
class DynamoDbKeyValueStore(IKeyValueStore):
    """Stores string values in a DynamoDB table keyed by `key` (S).

    Env vars:
      - DDB_TABLE (default: metrodle-state)
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    table_name: str | None = None

    def _table(self) -> str:
        return self.table_name or os.getenv("DDB_TABLE") or "metrodle-state"

    def get(self, key: str) -> str | None:
        ddb = dynamodb_client()
        resp = ddb.get_item(
            TableName=self._table(),
            Key={"key": {"S": key}},
            ConsistentRead=True,
        )
        item = resp.get("Item")
        if not item or "S" not in item.get("value", {}):
            return None
        return item["value"]["S"]

    def set(self, key: str, value: str) -> None:
        now_ms = int(time.time() * 1000)
        ddb = dynamodb_client()
        ddb.put_item(
            TableName=self._table(),
            Item={
                "key": {"S": key},
                "value": {"S": value},
                "updated_at_ms": {"N": str(now_ms)},
            },
        )
