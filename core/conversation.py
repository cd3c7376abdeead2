#!/usr/bin/env python3
"""
Conversation runner - the seam between a transport and the provide flow.

Each incoming message is handled in its own unit of work: the flow's
writes for that turn commit together, or roll back together if the store
fails. Only plain-data state and message strings cross the turn boundary.
"""
import logging
from typing import List, Optional

from core.app_context import AppContext
from core.exceptions import ValidationException
from core.geo import GeoPoint
from core.preferences import PreferencePhrases, update_contact_days
from core.provide import CollectionState, TurnResult
from database.models import User
from database.store import Store
from database.uow import store_uow

logger = logging.getLogger(__name__)


class ConversationRunner:
    """Drives ProvideFlow across turns for one deployment."""

    def __init__(self, context: AppContext):
        self.context = context

    def start(self, phone_number: str, coordinates: Optional[GeoPoint] = None) -> TurnResult:
        """
        Begin a provide conversation for the user behind phone_number.

        The user is created on first contact. When coordinates are given
        they replace the stored ones.
        """
        with store_uow(self.context.session_factory) as store:
            user = self._get_or_create_user(store, phone_number)
            if coordinates is not None and user.coordinates != coordinates:
                user.coordinates = coordinates
                store.update(user)

            return self.context.provide_flow(store).start(user)

    def handle(self, state: CollectionState, text: str) -> TurnResult:
        """Process one reply. StoreException propagates after rollback."""
        with store_uow(self.context.session_factory) as store:
            result = self.context.provide_flow(store).advance(state, text)

        if result.finished:
            logger.info(f"Conversation for user {state.user_id} finished: {result.outcome.value}")
        return result

    def update_days(self, phone_number: str, text: str) -> List[str]:
        """
        Set the days the user behind phone_number may be contacted.

        Returns the reply to send: a confirmation, or the retry prompt when
        text names no valid days (nothing is written then).
        """
        with store_uow(self.context.session_factory) as store:
            user = self._get_or_create_user(store, phone_number)
            try:
                days = update_contact_days(store, user, text)
            except ValidationException as e:
                logger.debug(f"Invalid contact days from user {user.id}: {e}")
                return [PreferencePhrases.GET_UPDATE_DAYS_RETRY]

        return [PreferencePhrases.update_days_updated(days)]

    @staticmethod
    def _get_or_create_user(store: Store, phone_number: str) -> User:
        user = store.get_user_by_phone(phone_number)
        if user is None:
            user = User(phone_number=phone_number)
            store.create(user)
            logger.info(f"Registered new user {user.id}")
        return user
