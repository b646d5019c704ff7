from service.dal.interface import IItemDataAccess, require_fields
from service.models.errors import NotFoundError
from service.models.item import Item


class ItemDataAccessInMemory(IItemDataAccess):
    def __init__(self):
        self._items: dict[tuple[str, str], Item] = {}

    def create(self, partition_key: str, payload: str) -> Item:
        require_fields(partition_key=partition_key, payload=payload)
        item = Item(partition_key=partition_key, payload=payload)
        self._items[(item.partition_key, item.item_id)] = item
        return item

    def read_one(self, partition_key: str, item_id: str) -> Item:
        require_fields(partition_key=partition_key, item_id=item_id)
        try:
            return self._items[(partition_key, item_id)]
        except KeyError:
            raise NotFoundError("Tweet not found") from None

    def read_all(self) -> list[Item]:
        return list(self._items.values())

    def update(self, partition_key: str, item_id: str, payload: str) -> Item:
        require_fields(partition_key=partition_key, item_id=item_id, payload=payload)
        item = Item(partition_key=partition_key, item_id=item_id, payload=payload)
        self._items[(partition_key, item_id)] = item
        return item

    def delete(self, partition_key: str, item_id: str) -> None:
        require_fields(partition_key=partition_key, item_id=item_id)
        self._items.pop((partition_key, item_id), None)
