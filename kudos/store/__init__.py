"""DynamoDB persistence for contribution records."""

from __future__ import annotations

from .client import PARTITION_KEY, KudosStore, item_to_record, record_to_item
from .errors import StoreError
from .models import ContributionRecord, ContributionType

__all__ = [
    "PARTITION_KEY",
    "ContributionRecord",
    "ContributionType",
    "KudosStore",
    "StoreError",
    "item_to_record",
    "record_to_item",
]
