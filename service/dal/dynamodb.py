"""
DynamoDB data access handler for tweet items.
"""

from typing import Any

import boto3
from aws_lambda_powertools import Logger, Tracer
from botocore.exceptions import ClientError

logger = Logger()
tracer = Tracer()

PARTITION_KEY = "partition_key"
SORT_KEY = "item_id"


class DynamoDBHandler:
    """Handler for single-item DynamoDB operations on a partition/sort key table."""

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(table_name)

    @staticmethod
    def _key(partition_key: str, item_id: str) -> dict[str, str]:
        return {PARTITION_KEY: partition_key, SORT_KEY: item_id}

    @tracer.capture_method
    def get_item(self, partition_key: str, item_id: str) -> dict[str, Any] | None:
        """
        Get an item by primary key.

        Args:
            partition_key: Partition key value
            item_id: Sort key value

        Returns:
            Item data or None if not found
        """
        try:
            response = self.table.get_item(Key=self._key(partition_key, item_id))
        except ClientError as e:
            logger.error(f"Error reading from DynamoDB: {e}", extra={"table": self.table_name})
            raise
        item: dict[str, Any] | None = response.get("Item")
        if item:
            logger.debug("Retrieved item from DynamoDB", extra={"partition_key": partition_key, "item_id": item_id})
        else:
            logger.debug("Item not found in DynamoDB", extra={"partition_key": partition_key, "item_id": item_id})
        return item

    @tracer.capture_method
    def put_item(self, item: dict[str, Any]) -> None:
        """
        Put an item into the table, replacing any item with the same key.

        Args:
            item: Item to store (must include partition_key and item_id)
        """
        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            logger.error(f"Error writing to DynamoDB: {e}", extra={"table": self.table_name})
            raise
        logger.debug(
            "Stored item in DynamoDB",
            extra={"partition_key": item.get(PARTITION_KEY), "item_id": item.get(SORT_KEY)},
        )

    @tracer.capture_method
    def delete_item(self, partition_key: str, item_id: str) -> None:
        """
        Delete an item from the table. Succeeds whether or not the item exists.

        Args:
            partition_key: Partition key value
            item_id: Sort key value
        """
        try:
            self.table.delete_item(Key=self._key(partition_key, item_id))
        except ClientError as e:
            logger.error(f"Error deleting from DynamoDB: {e}", extra={"table": self.table_name})
            raise
        logger.debug("Deleted item from DynamoDB", extra={"partition_key": partition_key, "item_id": item_id})

    @tracer.capture_method
    def scan(self) -> list[dict[str, Any]]:
        """
        Read every item in the table, following scan pagination.

        Returns:
            List of items in no particular order
        """
        items: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}
        while True:
            try:
                response = self.table.scan(**kwargs)
            except ClientError as e:
                logger.error(f"Error scanning DynamoDB: {e}", extra={"table": self.table_name})
                raise
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        logger.debug("Scanned DynamoDB", extra={"table": self.table_name, "count": len(items)})
        return items
