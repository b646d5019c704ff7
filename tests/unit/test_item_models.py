import uuid
from datetime import datetime

import pytest
from pydantic import ValidationError

from service.models.item import CreateItemRequest, Item, UpdateItemRequest


class TestItem:
    def test_generates_item_id_and_timestamp(self):
        item = Item(partition_key="alice", payload="hello")

        assert uuid.UUID(item.item_id).version == 4
        assert datetime.fromisoformat(item.created_at).tzinfo is not None

    def test_item_ids_are_unique(self):
        first = Item(partition_key="alice", payload="hello")
        second = Item(partition_key="alice", payload="hello")
        assert first.item_id != second.item_id

    def test_keeps_supplied_item_id(self):
        item = Item(partition_key="alice", item_id="fixed-id", payload="hello")
        assert item.item_id == "fixed-id"

    @pytest.mark.parametrize("field", ["partition_key", "payload"])
    def test_rejects_empty_required_field(self, field):
        values = {"partition_key": "alice", "payload": "hello", field: ""}
        with pytest.raises(ValidationError):
            Item(**values)


class TestRequests:
    def test_create_request_requires_both_fields(self):
        with pytest.raises(ValidationError):
            CreateItemRequest(partition_key="alice")

    def test_create_request_rejects_non_string_payload(self):
        with pytest.raises(ValidationError):
            CreateItemRequest(partition_key="alice", payload=42)

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            CreateItemRequest(partition_key="", payload="hello")

    def test_update_request_item_id_is_optional(self):
        request = UpdateItemRequest(partition_key="alice", payload="edited")
        assert request.item_id is None
