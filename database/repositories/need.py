from database.models import Need
from database.repositories.keyed import KeyedItemRepository


class NeedRepository(KeyedItemRepository):
    model = Need
