"""Provide Module - collecting resource offers turn by turn."""
from core.provide.state import CollectionState, Outcome, Stage, TurnResult
from core.provide.flow import ProvideFlow

__all__ = [
    'ProvideFlow',
    'CollectionState',
    'Outcome',
    'Stage',
    'TurnResult',
]
