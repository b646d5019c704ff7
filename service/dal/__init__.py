"""
Data access layer for service.
"""

from service.dal.dynamodb import DynamoDBHandler
from service.dal.in_memory import ItemDataAccessInMemory
from service.dal.interface import IItemDataAccess
from service.dal.items import ItemDynamoDBDataAccess

__all__ = ["DynamoDBHandler", "IItemDataAccess", "ItemDataAccessInMemory", "ItemDynamoDBDataAccess"]
