#!/usr/bin/env python3
"""
Reply parsing for the provide flow.

Every parser either returns a validated value or raises
ValidationException; the flow turns the exception into a retry prompt.
"""
from typing import List

from core.exceptions import ValidationException

TRUE_WORDS = frozenset({'true', 'yes', 'y'})
FALSE_WORDS = frozenset({'false', 'no', 'n'})

# Largest value a quantity column holds (signed 32-bit INTEGER)
MAX_QUANTITY = 2**31 - 1


def normalize(text: str) -> str:
    return " ".join((text or "").split())


def is_token(text: str, token: str) -> bool:
    return normalize(text).lower() == normalize(token).lower()


def resolve_choice(text: str, options: List[str]) -> str:
    """
    Resolve a reply to one of the options, returning the canonical spelling.

    Tried in order: exact match, unique case-insensitive match, 1-based
    position in the option list.
    """
    reply = normalize(text)
    if not reply:
        raise ValidationException("Empty reply")

    if reply in options:
        return reply

    folded = [o for o in options if o.lower() == reply.lower()]
    if len(folded) == 1:
        return folded[0]

    if reply.isascii() and reply.isdigit():
        index = int(reply)
        if 1 <= index <= len(options):
            return options[index - 1]

    raise ValidationException(f"{reply!r} is not one of {options}")


def parse_quantity(text: str) -> int:
    """Parse a whole number from 0 to MAX_QUANTITY."""
    reply = normalize(text)
    if not (reply.isascii() and reply.isdigit()):
        raise ValidationException(f"{reply!r} is not a non-negative whole number")
    quantity = int(reply)
    if quantity > MAX_QUANTITY:
        raise ValidationException(f"{quantity} is more than {MAX_QUANTITY}")
    return quantity


def parse_bool(text: str) -> bool:
    reply = normalize(text).lower()
    if reply in TRUE_WORDS:
        return True
    if reply in FALSE_WORDS:
        return False
    raise ValidationException(f"{reply!r} is not yes or no")
