from database.models import Resource
from database.repositories.keyed import KeyedItemRepository
from core.exceptions import ValidationException


class ResourceRepository(KeyedItemRepository):
    model = Resource

    def add(self, record: Resource) -> None:
        self.check_quantity(record)
        super().add(record)

    @staticmethod
    def check_quantity(record: Resource) -> None:
        """A resource with nothing left is deleted, never stored."""
        if record.quantity is None or record.quantity <= 0:
            raise ValidationException(
                f"Resource {record.category}/{record.name} must have a positive quantity, got {record.quantity}"
            )
