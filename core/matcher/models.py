#!/usr/bin/env python3
"""
Matcher Models - Data structures for matching.
"""

from dataclasses import dataclass

from database.models import Resource, Need, User


@dataclass
class Match:
    """
    Transient pairing of a resource and a need. Never persisted.

    Holds ORM objects, so it is only valid inside the unit of work that
    produced it; convert with to_dto() before the session closes.
    """
    resource: Resource
    need: Need
    need_owner: User
    distance_meters: float
