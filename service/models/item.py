"""
Item models for request/response validation.
"""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds")


class Item(BaseModel):
    """A stored tweet, keyed by (partition_key, item_id)."""

    partition_key: str = Field(..., min_length=1, description="Author name, the table partition key")
    item_id: str = Field(default_factory=lambda: str(uuid.uuid4()), min_length=1, description="Sort key")
    payload: str = Field(..., min_length=1, description="Message content")
    created_at: str = Field(default_factory=lambda: _utc_timestamp(), description="Time of the most recent write")


class CreateItemRequest(BaseModel):
    """Request model for creating an item."""

    partition_key: str = Field(..., min_length=1)
    payload: str = Field(..., min_length=1)


class UpdateItemRequest(BaseModel):
    """Request model for replacing an item. `item_id` may come from the path instead."""

    partition_key: str = Field(..., min_length=1)
    payload: str = Field(..., min_length=1)
    item_id: str | None = None
