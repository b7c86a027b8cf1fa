"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import boto3
import falcon.testing
import pytest
from botocore.stub import Stubber

from kudos.api.app import AppDependencies, create_app
from kudos.store.client import KudosStore
from tests.helpers.fake_dynamodb import TABLE_NAME, FakeDynamoDBClient
from tests.helpers.github_webhooks import WEBHOOK_SECRET


@pytest.fixture
def dynamodb_client() -> typ.Any:  # noqa: ANN401 - boto3 clients are untyped
    """Return a real boto3 DynamoDB client that never leaves the process."""
    return boto3.client(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",  # noqa: S106 - dummy credentials
    )


@pytest.fixture
def dynamodb_stubber(dynamodb_client: typ.Any) -> typ.Iterator[Stubber]:  # noqa: ANN401
    """Activate a botocore ``Stubber`` and check every stub was consumed."""
    with Stubber(dynamodb_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def stubbed_store(dynamodb_client: typ.Any, dynamodb_stubber: Stubber) -> KudosStore:  # noqa: ANN401
    """Return a store backed by the stubbed boto3 client."""
    return KudosStore(dynamodb_client, TABLE_NAME)


@pytest.fixture
def fake_dynamodb() -> FakeDynamoDBClient:
    """Return an empty in-memory DynamoDB client."""
    return FakeDynamoDBClient()


@pytest.fixture
def memory_store(fake_dynamodb: FakeDynamoDBClient) -> KudosStore:
    """Return a store backed by the in-memory client."""
    return KudosStore(fake_dynamodb, TABLE_NAME)


@pytest.fixture
def api_client(memory_store: KudosStore) -> falcon.testing.TestClient:
    """Build a test client wired to the in-memory store."""
    deps = AppDependencies(store=memory_store, webhook_secret=WEBHOOK_SECRET)
    return falcon.testing.TestClient(create_app(deps))
