#!/usr/bin/env python3
"""
Provide flow state - discriminated stage values carried between turns.

Everything here is plain data: no ORM objects, so a state can outlive the
unit of work of the turn that produced it.
"""
import enum
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from core.matcher.dto import MatchDTO


class Stage(str, enum.Enum):
    """The single reply the flow is waiting for."""
    CATEGORY = 'category'
    RESOURCE = 'resource'
    QUANTITY = 'quantity'
    CONDITION = 'condition'
    MATCH_CONTINUE = 'match_continue'
    ANOTHER = 'another'


class Outcome(str, enum.Enum):
    """How the flow ended."""
    CANCELLED = 'cancelled'    # "none" at resource selection
    NO_CHANGE = 'no_change'    # quantity 0 for an item the user never offered
    DELETED = 'deleted'
    UPDATED = 'updated'
    CREATED = 'created'


@dataclass(frozen=True)
class CollectionState:
    user_id: Any
    stage: Stage
    category: Optional[str] = None
    resource: Optional[str] = None
    quantity: Optional[int] = None
    # Matches not yet shown, in presentation order
    pending_matches: Tuple[MatchDTO, ...] = ()
    # Outcome of the last commit in this conversation
    outcome: Optional[Outcome] = None


@dataclass
class TurnResult:
    """
    Result of one turn: either the next state or a terminal outcome,
    plus the messages to send back.
    """
    state: Optional[CollectionState] = None
    outcome: Optional[Outcome] = None
    messages: List[str] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.state is None
