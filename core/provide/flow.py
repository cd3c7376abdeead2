#!/usr/bin/env python3
"""
Provide Flow - collects a resource offer one reply at a time.

Stages run in a fixed order, one reply each:

    CATEGORY -> RESOURCE -> QUANTITY -> CONDITION -> MATCH_CONTINUE* -> ANOTHER

CATEGORY is skipped when the catalog has a single category. The branch
taken at QUANTITY and CONDITION decides what is written:

    quantity 0, no record     -> NO_CHANGE, nothing written
    quantity 0, record        -> DELETED
    quantity > 0, no record   -> create, run matching, present matches
    quantity > 0, record      -> UPDATED, matching is not re-run

Invalid replies re-prompt the same stage. StoreException propagates.
"""
import logging
from dataclasses import replace
from typing import List, Sequence

from core.catalog import Catalog
from core.config_loader import ConversationConfig
from core.exceptions import RecordNotFoundException, ValidationException
from core.matcher import MatcherService, MatchDTO
from core.provide import parsing
from core.provide.phrases import ProvidePhrases, MatchPhrases
from core.provide.state import CollectionState, Outcome, Stage, TurnResult
from database.models import RecordKind, Resource, User
from database.store import Store

logger = logging.getLogger(__name__)


class ProvideFlow:
    """
    Explicit state machine behind the "offer an item" conversation.

    Holds no per-conversation data itself; everything lives in the
    CollectionState passed to and returned from advance().
    """

    def __init__(
        self,
        store: Store,
        catalog: Catalog,
        matcher: MatcherService,
        config: ConversationConfig
    ):
        self.store = store
        self.catalog = catalog
        self.matcher = matcher
        self.config = config
        self._handlers = {
            Stage.CATEGORY: self._on_category,
            Stage.RESOURCE: self._on_resource,
            Stage.QUANTITY: self._on_quantity,
            Stage.CONDITION: self._on_condition,
            Stage.MATCH_CONTINUE: self._on_match_continue,
            Stage.ANOTHER: self._on_another,
        }

    def start(self, user: User) -> TurnResult:
        """First prompt of a new conversation for user."""
        return self._begin(CollectionState(user_id=user.id, stage=Stage.CATEGORY))

    def advance(self, state: CollectionState, text: str) -> TurnResult:
        """
        Consume one reply and move to the next stage.

        Args:
            state: State returned by the previous turn
            text: The user's reply

        Returns:
            TurnResult with the next state, or with the terminal outcome
        """
        handler = self._handlers[state.stage]
        try:
            return handler(state, text)
        except ValidationException as e:
            logger.debug(f"Invalid reply at {state.stage.value} for user {state.user_id}: {e}")
            return TurnResult(state=state, messages=[self._retry_prompt(state)])

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _begin(self, state: CollectionState) -> TurnResult:
        if self.catalog.has_single_category():
            category = self.catalog.categories[0].name
            next_state = replace(
                state, stage=Stage.RESOURCE, category=category,
                resource=None, quantity=None, pending_matches=()
            )
            return TurnResult(state=next_state, messages=[self._resource_prompt(category)])

        next_state = replace(
            state, stage=Stage.CATEGORY, category=None,
            resource=None, quantity=None, pending_matches=()
        )
        return TurnResult(
            state=next_state,
            messages=[ProvidePhrases.get_category(self.catalog.category_names())]
        )

    def _on_category(self, state: CollectionState, text: str) -> TurnResult:
        category = parsing.resolve_choice(text, self.catalog.category_names())
        next_state = replace(state, stage=Stage.RESOURCE, category=category)
        return TurnResult(state=next_state, messages=[self._resource_prompt(category)])

    def _on_resource(self, state: CollectionState, text: str) -> TurnResult:
        if parsing.is_token(text, self.config.none_token):
            logger.info(f"User {state.user_id} has nothing to offer in {state.category}")
            return TurnResult(outcome=Outcome.CANCELLED)

        resource = parsing.resolve_choice(text, self.catalog.resource_names(state.category))
        next_state = replace(state, stage=Stage.QUANTITY, resource=resource)
        return TurnResult(state=next_state, messages=[ProvidePhrases.get_quantity(resource)])

    def _on_quantity(self, state: CollectionState, text: str) -> TurnResult:
        quantity = parsing.parse_quantity(text)

        if quantity > 0:
            next_state = replace(state, stage=Stage.CONDITION, quantity=quantity)
            return TurnResult(state=next_state, messages=[ProvidePhrases.GET_IS_UNOPENED])

        existing = self._existing_resource(state)
        if existing is None:
            return TurnResult(outcome=Outcome.NO_CHANGE, messages=[ProvidePhrases.COMPLETE_UPDATE])

        self.store.delete(existing)
        return TurnResult(outcome=Outcome.DELETED, messages=[ProvidePhrases.COMPLETE_DELETE])

    def _on_condition(self, state: CollectionState, text: str) -> TurnResult:
        is_unopened = parsing.parse_bool(text)

        existing = self._existing_resource(state)
        if existing is not None:
            existing.quantity = state.quantity
            existing.is_unopened = is_unopened
            self.store.update(existing)
            return TurnResult(outcome=Outcome.UPDATED, messages=[ProvidePhrases.COMPLETE_UPDATE])

        user = self._require_user(state)
        resource = Resource(
            created_by_id=user.id,
            category=state.category,
            name=state.resource,
            quantity=state.quantity,
            is_unopened=is_unopened
        )
        self.store.create(resource)

        matches = self.matcher.find_matches(resource, user)
        pending = tuple(self.matcher.to_dto(m) for m in matches)

        created = replace(state, outcome=Outcome.CREATED)
        return self._present(created, pending, [ProvidePhrases.complete_create(user)])

    def _on_match_continue(self, state: CollectionState, text: str) -> TurnResult:
        if parsing.parse_bool(text):
            return self._present(state, state.pending_matches, [])

        logger.debug(f"User {state.user_id} declined {len(state.pending_matches)} remaining matches")
        next_state = replace(state, stage=Stage.ANOTHER, pending_matches=())
        return TurnResult(state=next_state, messages=[ProvidePhrases.ANOTHER])

    def _on_another(self, state: CollectionState, text: str) -> TurnResult:
        if parsing.parse_bool(text):
            return self._begin(state)

        return TurnResult(
            outcome=state.outcome or Outcome.CREATED,
            messages=[ProvidePhrases.GOODBYE]
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _present(
        self,
        state: CollectionState,
        pending: Sequence[MatchDTO],
        messages: List[str]
    ) -> TurnResult:
        """Show the next match, then ask to continue or move on."""
        messages = list(messages)

        if not pending:
            next_state = replace(state, stage=Stage.ANOTHER, pending_matches=())
            return TurnResult(state=next_state, messages=messages + [ProvidePhrases.ANOTHER])

        current, rest = pending[0], tuple(pending[1:])
        messages.append(MatchPhrases.message(current))

        if rest:
            next_state = replace(state, stage=Stage.MATCH_CONTINUE, pending_matches=rest)
            messages.append(MatchPhrases.another(len(rest)))
        else:
            next_state = replace(state, stage=Stage.ANOTHER, pending_matches=())
            messages.append(ProvidePhrases.ANOTHER)

        return TurnResult(state=next_state, messages=messages)

    def _existing_resource(self, state: CollectionState):
        return self.store.query_by_owner_and_key(
            RecordKind.RESOURCE, state.user_id, state.category, state.resource
        )

    def _require_user(self, state: CollectionState) -> User:
        user = self.store.get_user(state.user_id)
        if user is None:
            raise RecordNotFoundException(f"User {state.user_id} does not exist")
        return user

    def _resource_prompt(self, category: str) -> str:
        return ProvidePhrases.get_resource(
            category, self.catalog.resource_names(category), self.config.none_token
        )

    def _retry_prompt(self, state: CollectionState) -> str:
        if state.stage is Stage.CATEGORY:
            return ProvidePhrases.get_category_retry(self.catalog.category_names())
        if state.stage is Stage.RESOURCE:
            return ProvidePhrases.get_resource_retry(
                state.category, self.catalog.resource_names(state.category), self.config.none_token
            )
        if state.stage is Stage.QUANTITY:
            return ProvidePhrases.GET_QUANTITY_RETRY
        if state.stage is Stage.CONDITION:
            return ProvidePhrases.GET_IS_UNOPENED_RETRY
        if state.stage is Stage.MATCH_CONTINUE:
            return MatchPhrases.ANOTHER_RETRY
        return ProvidePhrases.ANOTHER_RETRY
