#!/usr/bin/env python3
"""
Store Facade - the persistence boundary used by the matcher and the provide flow.

Wraps the per-model repositories behind one object bound to a Session.
Writes are flushed immediately so ids and constraint violations surface
inside the turn; committing is left to the unit of work (see database.uow).

Failure semantics:
- SQLAlchemy errors become StoreException (fatal to the turn).
- A missing record on update/delete is a no-op that returns False.
- A record or kind the store does not know is a ConfigurationException.
"""
import contextlib
import logging
from typing import Any, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import ConfigurationException, RecordNotFoundException, StoreException
from core.geo import GeoPoint, haversine_m
from database.models import RecordKind, User, Need
from database.repositories import (
    BaseRepository, KeyedItemRepository, UserRepository,
    ResourceRepository, NeedRepository, FeedbackRepository
)

logger = logging.getLogger(__name__)

OwnerRef = Union[User, Any]


class Store:
    """
    Create/update/delete records and run the lookups the core needs.

    Args:
        db: Session owned by the caller's unit of work
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.resources = ResourceRepository(db)
        self.needs = NeedRepository(db)
        self.feedback = FeedbackRepository(db)
        self._repositories = {
            RecordKind.USER: self.users,
            RecordKind.RESOURCE: self.resources,
            RecordKind.NEED: self.needs,
            RecordKind.FEEDBACK: self.feedback,
        }

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, record) -> Any:
        """Persist a new record and return its id."""
        kind = self._kind_of(record)
        repo = self._repository_for(kind)

        with self._guard(f"create {kind.value}"):
            repo.add(record)

        logger.info(f"Created {kind.value} record {record.id}")
        return record.id

    def update(self, record) -> bool:
        """
        Save changes to an existing record.

        Returns:
            True if saved, False if the record does not exist
        """
        kind = self._kind_of(record)
        repo = self._repository_for(kind)

        if kind is RecordKind.RESOURCE:
            self.resources.check_quantity(record)

        with self._guard(f"update {kind.value}"):
            if record not in self.db:
                if repo.get_by_id(record.id) is None:
                    logger.warning(f"Update skipped, {kind.value} record {record.id} not found")
                    return False
                self.db.merge(record)
            self.db.flush()

        logger.info(f"Updated {kind.value} record {record.id}")
        return True

    def delete(self, record) -> bool:
        """
        Delete a record.

        Returns:
            True if deleted, False if there was nothing to delete
        """
        kind = self._kind_of(record)
        repo = self._repository_for(kind)

        try:
            with self._guard(f"delete {kind.value}"):
                persistent = self._load_persistent(repo, kind, record)
                repo.remove(persistent)
        except RecordNotFoundException as e:
            logger.info(f"Nothing to delete: {e}")
            return False

        logger.info(f"Deleted {kind.value} record {record.id}")
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query_by_owner_and_key(
        self,
        kind: RecordKind,
        owner: OwnerRef,
        category: str,
        name: str
    ):
        """The owner's record for (category, name), or None."""
        repo = self._keyed_repository_for(kind)
        with self._guard(f"query {kind.value} by owner"):
            return repo.get_for_owner(self._owner_id(owner), category, name)

    def query_by_category_and_name(self, kind: RecordKind, category: str, name: str) -> List[Any]:
        """All records for (category, name), oldest first."""
        repo = self._keyed_repository_for(kind)
        with self._guard(f"query {kind.value} by category/name"):
            return repo.list_by_category_and_name(category, name)

    def query_owners_within_radius(self, coordinates: GeoPoint, radius_meters: float) -> List[User]:
        """
        Users with coordinates set and within radius_meters (inclusive).

        Returns:
            Users sorted by ascending distance, ties broken by id
        """
        with self._guard("query users within radius"):
            candidates = self.users.list_in_bounding_box(coordinates, radius_meters)

        within = []
        for user in candidates:
            distance = haversine_m(coordinates, user.coordinates)
            if distance <= radius_meters:
                within.append((distance, str(user.id), user))

        within.sort(key=lambda item: (item[0], item[1]))
        logger.debug(
            f"{len(within)} of {len(candidates)} boxed users within {radius_meters:.0f}m"
        )
        return [user for _, _, user in within]

    def get_user(self, user_id: Any) -> Optional[User]:
        with self._guard("get user"):
            return self.users.get_by_id(user_id)

    def get_user_by_phone(self, phone_number: str) -> Optional[User]:
        with self._guard("get user by phone"):
            return self.users.get_by_phone_number(phone_number)

    def get_users(self, user_ids: List[Any]) -> List[User]:
        with self._guard("get users"):
            return self.users.get_by_ids(user_ids)

    def get_need_by_id(self, need_id: Any) -> Optional[Need]:
        with self._guard("get need"):
            return self.needs.get_by_id(need_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def _guard(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Store failure during {operation}: {e}")
            raise StoreException(f"Store failure during {operation}") from e

    @staticmethod
    def _kind_of(record) -> RecordKind:
        kind = getattr(record, 'kind', None)
        if not isinstance(kind, RecordKind):
            raise ConfigurationException(
                f"Record type {type(record).__name__} has no known collection"
            )
        return kind

    def _repository_for(self, kind: RecordKind) -> BaseRepository:
        repo = self._repositories.get(kind)
        if repo is None:
            raise ConfigurationException(f"No repository for record kind {kind!r}")
        return repo

    def _keyed_repository_for(self, kind: RecordKind) -> KeyedItemRepository:
        repo = self._repository_for(kind)
        if not isinstance(repo, KeyedItemRepository):
            raise ConfigurationException(f"Record kind {kind.value} is not keyed by category/name")
        return repo

    def _load_persistent(self, repo: BaseRepository, kind: RecordKind, record):
        if record in self.db:
            return record

        persistent = repo.get_by_id(record.id) if record.id is not None else None
        if persistent is None:
            raise RecordNotFoundException(f"{kind.value} record {record.id} does not exist")
        return persistent

    @staticmethod
    def _owner_id(owner: OwnerRef) -> Any:
        return owner.id if isinstance(owner, User) else owner
