"""DynamoDB access layer for contribution records.

The store wraps a single boto3 DynamoDB client and exposes the two
operations the service needs: an unconditional write and a partition-key
query. One ``KudosStore`` is built at start-up and shared by every request;
boto3 low-level clients are safe to share between threads.

Usage
-----
Build a store from environment configuration and use it::

    from kudos.config import KudosConfig
    from kudos.store import KudosStore

    store = KudosStore.from_config(KudosConfig.from_env())
    store.create(record)
    records = store.list_by_user("alice")

"""

from __future__ import annotations

import decimal
import typing as typ

import boto3
import msgspec
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from kudos.store.errors import StoreError
from kudos.store.models import ContributionRecord

if typ.TYPE_CHECKING:
    from kudos.config import KudosConfig

__all__ = ["PARTITION_KEY", "KudosStore", "item_to_record", "record_to_item"]

PARTITION_KEY = "user"

AttributeValue: typ.TypeAlias = dict[str, typ.Any]
Item: typ.TypeAlias = dict[str, AttributeValue]

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def record_to_item(record: ContributionRecord) -> Item:
    """Serialize a record into DynamoDB attribute values.

    Raises
    ------
    StoreError
        If a field does not match the record schema or the partition key is
        empty.

    """
    try:
        plain = msgspec.to_builtins(record)
        msgspec.convert(plain, type=ContributionRecord)
        item = {name: _serializer.serialize(value) for name, value in plain.items()}
    except (TypeError, msgspec.EncodeError, msgspec.ValidationError) as exc:
        raise StoreError.serialization(exc) from exc

    if not record.user:
        raise StoreError.serialization(f"{PARTITION_KEY} must be non-empty")
    return item


def _from_dynamodb_number(value: object) -> object:
    # TypeDeserializer yields Decimal for every N attribute.
    if isinstance(value, decimal.Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    return value


def item_to_record(item: Item) -> ContributionRecord:
    """Deserialize a DynamoDB item into a record.

    Attributes outside the record schema are ignored.

    Raises
    ------
    StoreError
        If the item is missing fields or holds values of the wrong type.

    """
    try:
        plain = {
            name: _from_dynamodb_number(_deserializer.deserialize(value))
            for name, value in item.items()
        }
        return msgspec.convert(plain, type=ContributionRecord)
    except (TypeError, ValueError, msgspec.ValidationError) as exc:
        raise StoreError.deserialization(exc) from exc


class KudosStore:
    """Create and query contribution records in one DynamoDB table.

    Parameters
    ----------
    client
        boto3 DynamoDB low-level client.
    table_name
        Name of the table partitioned by ``user``.

    """

    def __init__(self, client: typ.Any, table_name: str) -> None:  # noqa: ANN401 - boto3 clients are untyped
        """Store the DynamoDB client and target table name."""
        self._client = client
        self._table_name = table_name

    @classmethod
    def from_config(cls, config: KudosConfig) -> KudosStore:
        """Build a store whose client is resolved by the boto3 provider chain.

        Credentials and, unless ``config.aws_region`` is set, the region come
        from the standard chain: environment variables, shared config files,
        or an instance/task role.
        """
        client = boto3.client(
            "dynamodb",
            region_name=config.aws_region,
            endpoint_url=config.dynamodb_endpoint_url,
        )
        return cls(client, config.table_name)

    @property
    def table_name(self) -> str:
        """Return the DynamoDB table this store writes to."""
        return self._table_name

    def create(self, record: ContributionRecord) -> None:
        """Write ``record`` with an unconditional ``PutItem``.

        No existence check is made, so repeated deliveries of the same
        webhook each produce a write. Nothing is retried here.

        Raises
        ------
        StoreError
            If serialization fails or DynamoDB rejects the write.

        """
        item = record_to_item(record)
        try:
            self._client.put_item(TableName=self._table_name, Item=item)
        except (BotoCoreError, ClientError) as exc:
            raise StoreError.request("PutItem", exc) from exc

    def list_by_user(self, user: str) -> list[ContributionRecord]:
        """Return every record whose partition key equals ``user``.

        Follows ``LastEvaluatedKey`` pagination and returns records in the
        order DynamoDB yields them. An unknown user yields an empty list.

        Raises
        ------
        StoreError
            If the query fails or any returned item cannot be deserialized;
            no partial result is returned.

        """
        paginator = self._client.get_paginator("query")
        pages = paginator.paginate(
            TableName=self._table_name,
            KeyConditionExpression="#pk = :pk",
            # "user" is a DynamoDB reserved word
            ExpressionAttributeNames={"#pk": PARTITION_KEY},
            ExpressionAttributeValues={":pk": {"S": user}},
        )

        records: list[ContributionRecord] = []
        try:
            for page in pages:
                records.extend(item_to_record(item) for item in page.get("Items", []))
        except (BotoCoreError, ClientError) as exc:
            raise StoreError.request("Query", exc) from exc
        return records
