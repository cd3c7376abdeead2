"""Data Transfer Objects for matcher service.

DTOs are used to transfer data outside of the Unit of Work context,
allowing ORM objects to be converted to plain Python objects that
can be safely carried in conversation state between turns.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MatchDTO:
    """Everything needed to present one match to the donor."""
    need_id: Any
    organization: str
    need_name: str
    quantity: int
    instructions: str
    distance_meters: float
