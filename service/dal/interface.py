from abc import ABC, abstractmethod

from service.models.errors import RequestValidationError
from service.models.item import Item


class IItemDataAccess(ABC):
    @abstractmethod
    def create(self, partition_key: str, payload: str) -> Item:
        pass

    @abstractmethod
    def read_one(self, partition_key: str, item_id: str) -> Item:
        pass

    @abstractmethod
    def read_all(self) -> list[Item]:
        pass

    @abstractmethod
    def update(self, partition_key: str, item_id: str, payload: str) -> Item:
        pass

    @abstractmethod
    def delete(self, partition_key: str, item_id: str) -> None:
        pass


def require_fields(**fields: str | None) -> None:
    """Raise RequestValidationError naming every missing or empty field."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise RequestValidationError(f"{', '.join(missing)} required")
