"""
Item store backed by DynamoDB.

Each operation issues exactly one logical store call; writes are
unconditional puts, so update doubles as create-or-replace.
"""

from typing import Any

from aws_lambda_powertools import Logger, Tracer
from pydantic import ValidationError

from service.dal.dynamodb import DynamoDBHandler
from service.dal.interface import IItemDataAccess, require_fields
from service.models.errors import NotFoundError
from service.models.item import Item

logger = Logger()
tracer = Tracer()


class MalformedItemError(RuntimeError):
    """A stored record could not be read back as an Item."""


def _to_item(raw: dict[str, Any]) -> Item:
    try:
        return Item.model_validate(raw)
    except ValidationError as e:
        raise MalformedItemError(f"Stored item is malformed: {e}") from e


class ItemDynamoDBDataAccess(IItemDataAccess):
    def __init__(self, table_name: str, db_handler: DynamoDBHandler | None = None) -> None:
        self.table_name = table_name
        self.db_handler = db_handler or DynamoDBHandler(table_name)

    @tracer.capture_method
    def create(self, partition_key: str, payload: str) -> Item:
        require_fields(partition_key=partition_key, payload=payload)
        item = Item(partition_key=partition_key, payload=payload)
        logger.info("Creating item", extra={"table": self.table_name, "item": item.model_dump()})
        self.db_handler.put_item(item.model_dump())
        return item

    @tracer.capture_method
    def read_one(self, partition_key: str, item_id: str) -> Item:
        require_fields(partition_key=partition_key, item_id=item_id)
        raw = self.db_handler.get_item(partition_key=partition_key, item_id=item_id)
        if raw is None:
            raise NotFoundError("Tweet not found")
        return _to_item(raw)

    @tracer.capture_method
    def read_all(self) -> list[Item]:
        """List every item; records that fail validation are logged and left out."""
        items: list[Item] = []
        for raw in self.db_handler.scan():
            try:
                items.append(_to_item(raw))
            except MalformedItemError:
                logger.warning(
                    "Skipping malformed item",
                    extra={"partition_key": raw.get("partition_key"), "item_id": raw.get("item_id")},
                )
        return items

    @tracer.capture_method
    def update(self, partition_key: str, item_id: str, payload: str) -> Item:
        require_fields(partition_key=partition_key, item_id=item_id, payload=payload)
        item = Item(partition_key=partition_key, item_id=item_id, payload=payload)
        self.db_handler.put_item(item.model_dump())
        return item

    @tracer.capture_method
    def delete(self, partition_key: str, item_id: str) -> None:
        require_fields(partition_key=partition_key, item_id=item_id)
        self.db_handler.delete_item(partition_key=partition_key, item_id=item_id)
