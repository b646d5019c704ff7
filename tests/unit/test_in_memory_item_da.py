from unittest.mock import patch

import pytest

from service.dal.in_memory import ItemDataAccessInMemory
from service.models.errors import NotFoundError, RequestValidationError

FIRST_WRITE = "2024-01-01T00:00:00.000+00:00"
SECOND_WRITE = "2024-01-01T00:00:05.000+00:00"


@pytest.fixture
def item_data_access():
    return ItemDataAccessInMemory()


class TestItemDataAccessInMemory:
    def test_create_and_read_one(self, item_data_access):
        created = item_data_access.create(partition_key="alice", payload="hello")
        retrieved = item_data_access.read_one(partition_key="alice", item_id=created.item_id)
        assert retrieved == created

    def test_read_one_not_found(self, item_data_access):
        with pytest.raises(NotFoundError, match="Tweet not found"):
            item_data_access.read_one(partition_key="alice", item_id="nonexistent")

    def test_same_item_id_in_another_partition_is_a_different_item(self, item_data_access):
        created = item_data_access.create(partition_key="alice", payload="hello")
        with pytest.raises(NotFoundError):
            item_data_access.read_one(partition_key="bob", item_id=created.item_id)

    def test_read_all_empty(self, item_data_access):
        assert item_data_access.read_all() == []

    def test_read_all(self, item_data_access):
        item_data_access.create(partition_key="alice", payload="one")
        item_data_access.create(partition_key="bob", payload="two")
        assert {item.payload for item in item_data_access.read_all()} == {"one", "two"}

    def test_create_missing_payload_persists_nothing(self, item_data_access):
        with pytest.raises(RequestValidationError, match="payload"):
            item_data_access.create(partition_key="alice", payload="")
        assert item_data_access.read_all() == []

    def test_update_creates_missing_item(self, item_data_access):
        item_data_access.update(partition_key="alice", item_id="fresh", payload="edited")
        assert item_data_access.read_one(partition_key="alice", item_id="fresh").payload == "edited"

    def test_update_replaces_and_refreshes_timestamp(self, item_data_access):
        with patch("service.models.item._utc_timestamp", side_effect=[FIRST_WRITE, SECOND_WRITE]):
            created = item_data_access.create(partition_key="alice", payload="hello")
            updated = item_data_access.update(partition_key="alice", item_id=created.item_id, payload="edited")

        assert created.created_at == FIRST_WRITE
        assert updated.item_id == created.item_id
        assert updated.created_at == SECOND_WRITE
        stored = item_data_access.read_one(partition_key="alice", item_id=created.item_id)
        assert stored.payload == "edited"
        assert stored.created_at == SECOND_WRITE
        assert len(item_data_access.read_all()) == 1

    @pytest.mark.parametrize("existed", [True, False])
    def test_delete_then_read_is_not_found(self, item_data_access, existed):
        item_id = "missing"
        if existed:
            item_id = item_data_access.create(partition_key="alice", payload="hello").item_id

        item_data_access.delete(partition_key="alice", item_id=item_id)

        with pytest.raises(NotFoundError):
            item_data_access.read_one(partition_key="alice", item_id=item_id)
