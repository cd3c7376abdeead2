"""Matcher Module - resource/need matching."""
from core.matcher.models import Match
from core.matcher.dto import MatchDTO
from core.matcher.service import MatcherService

__all__ = [
    'MatcherService',
    'Match',
    'MatchDTO',
]
