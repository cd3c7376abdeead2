#!/usr/bin/env python3
"""
Contact preferences - which days a user agrees to be contacted.
"""
import enum
import logging
from typing import List

from core.exceptions import ValidationException
from database.models import User
from database.store import Store

logger = logging.getLogger(__name__)


class DayFlags(enum.IntFlag):
    NONE = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 4
    THURSDAY = 8
    FRIDAY = 16
    SATURDAY = 32
    SUNDAY = 64
    EVERYDAY = 127

    @classmethod
    def days(cls) -> List["DayFlags"]:
        return [
            cls.MONDAY, cls.TUESDAY, cls.WEDNESDAY, cls.THURSDAY,
            cls.FRIDAY, cls.SATURDAY, cls.SUNDAY,
        ]

    @classmethod
    def from_string(cls, text: str, separator: str = ",") -> "DayFlags":
        """
        Parse a separated list of day names, e.g. "monday, wed, Fri".

        Full names and three-letter abbreviations are accepted in any case,
        as are "everyday" and "none".

        Raises:
            ValidationException: on an empty list or an unknown day
        """
        tokens = [t.strip().lower() for t in (text or "").split(separator)]
        tokens = [t for t in tokens if t]
        if not tokens:
            raise ValidationException("No days given")

        flags = cls.NONE
        for token in tokens:
            flags |= cls._parse_token(token)
        return flags

    @classmethod
    def _parse_token(cls, token: str) -> "DayFlags":
        if token in ("everyday", "every day", "all"):
            return cls.EVERYDAY
        if token == "none":
            return cls.NONE
        for day in cls.days():
            name = day.name.lower()
            if token == name or token == name[:3]:
                return day
        raise ValidationException(f"{token!r} is not a day of the week")

    def to_string(self, separator: str = ", ") -> str:
        if self == DayFlags.NONE:
            return "none"
        if self == DayFlags.EVERYDAY:
            return "every day"
        return separator.join(day.name.capitalize() for day in DayFlags.days() if day in self)


def update_contact_days(store: Store, user: User, text: str) -> DayFlags:
    """
    Store the days a user may be contacted.

    Raises:
        ValidationException: if text does not parse; nothing is written
    """
    days = DayFlags.from_string(text)
    user.reminder_frequency = int(days)
    store.update(user)
    logger.info(f"User {user.id} contact days set to {days.to_string()}")
    return days


class PreferencePhrases:
    GET_UPDATE_DAYS_RETRY = (
        "Sorry, I didn't recognize those days. Please reply with day names separated "
        "by commas, \"everyday\", or \"none\"."
    )

    @staticmethod
    def update_days_updated(days: DayFlags) -> str:
        if days == DayFlags.NONE:
            return "Thank you! We won't contact you about new needs."
        return f"Thank you! We'll contact you on {days.to_string()}."
