from __future__ import annotations

import os

import httpx
import pytest


def _localstack_healthy(endpoint_url: str) -> bool:
    try:
        resp = httpx.get(endpoint_url.rstrip("/") + "/_localstack/health", timeout=1.5)
    except httpx.HTTPError:
        return False
    return resp.is_success


@pytest.fixture(scope="session", autouse=True)
def localstack_env() -> None:
    """Point boto3 at LocalStack unless the caller already configured AWS."""

    os.environ.setdefault("USE_LOCALSTACK", "true")
    os.environ.setdefault("ENDPOINT_URL", "http://localhost:4566")
    os.environ.setdefault("AWS_REGION", "sa-east-1")

    # boto3 refuses to sign requests without credentials, even fake ones.
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")


@pytest.fixture(scope="session")
def require_localstack(localstack_env: None) -> str:
    endpoint_url = os.environ["ENDPOINT_URL"]
    if not _localstack_healthy(endpoint_url):
        msg = f"LocalStack not reachable at {endpoint_url}"
        # CI starts LocalStack itself, so a missing one there is a real failure.
        if os.getenv("CI") or os.getenv("REQUIRE_LOCALSTACK"):
            pytest.fail(msg, pytrace=False)
        pytest.skip(f"{msg}; skipping integration tests")
    return endpoint_url


@pytest.fixture(scope="session")
def state_table(require_localstack: str) -> str:
    from metrodle.adapters.aws import dynamodb_client

    table = "metrodle-test-state"
    ddb = dynamodb_client()
    if table not in ddb.list_tables().get("TableNames", []):
        ddb.create_table(
            TableName=table,
            BillingMode="PAY_PER_REQUEST",
            AttributeDefinitions=[{"AttributeName": "key", "AttributeType": "S"}],
            KeySchema=[{"AttributeName": "key", "KeyType": "HASH"}],
        )
        ddb.get_waiter("table_exists").wait(TableName=table)
    return table
