import os
from functools import lru_cache

from aws_lambda_powertools import Logger

from service.dal.interface import IItemDataAccess
from service.dal.items import ItemDynamoDBDataAccess

logger = Logger()

TABLE_NAME_ENV_VAR = "TABLE_NAME"


@lru_cache(maxsize=1)
def get_item_store() -> IItemDataAccess:
    """Build the store on first use and share it across warm invocations."""
    table_name = os.environ[TABLE_NAME_ENV_VAR]
    logger.info(
        "DynamoDB client initialized",
        extra={"table": table_name, "region": os.environ.get("AWS_REGION", "default")},
    )
    return ItemDynamoDBDataAccess(table_name=table_name)
