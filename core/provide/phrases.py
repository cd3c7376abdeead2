"""Text sent back to the user by the provide flow."""
from typing import List

from core.matcher.dto import MatchDTO
from core.preferences import DayFlags
from database.models import User


def _options(names: List[str]) -> str:
    return ", ".join(f"{i}. {name}" for i, name in enumerate(names, start=1))


class ProvidePhrases:
    GET_IS_UNOPENED = "Are these items unopened? (yes/no)"
    GET_IS_UNOPENED_RETRY = "Please reply yes if the items are unopened, or no if they have been opened."
    GET_QUANTITY_RETRY = "Please reply with a whole number, 0 or more."
    COMPLETE_UPDATE = "Thank you! Your offer is up to date."
    COMPLETE_DELETE = "Thank you! Your offer has been removed."
    ANOTHER = "Would you like to offer another item? (yes/no)"
    ANOTHER_RETRY = "Please reply yes to offer another item, or no if you are done."
    GOODBYE = "Thanks for helping your community!"

    @staticmethod
    def get_category(categories: List[str]) -> str:
        return f"What kind of item would you like to offer? {_options(categories)}"

    @staticmethod
    def get_category_retry(categories: List[str]) -> str:
        return f"Sorry, I didn't recognize that. Please choose one of: {_options(categories)}"

    @staticmethod
    def get_resource(category: str, resources: List[str], none_token: str) -> str:
        return (
            f"Which {category} item do you have? {_options(resources)} "
            f"(or reply \"{none_token}\")"
        )

    @staticmethod
    def get_resource_retry(category: str, resources: List[str], none_token: str) -> str:
        return (
            f"Sorry, that isn't one of the {category} items. Please choose one of: "
            f"{_options(resources)} (or reply \"{none_token}\")"
        )

    @staticmethod
    def get_quantity(resource: str) -> str:
        return f"How many {resource} do you have to give? Reply 0 if you no longer have any."

    @staticmethod
    def complete_create(user: User) -> str:
        days = DayFlags(user.reminder_frequency or 0)
        if days == DayFlags.NONE:
            return "Thank you! Your offer has been saved. We'll let you know when a nearby organization needs it."
        return (
            "Thank you! Your offer has been saved. We'll let you know on "
            f"{days.to_string()} when a nearby organization needs it."
        )


class MatchPhrases:
    ANOTHER_RETRY = "Please reply yes to see the next organization, or no to stop."

    @staticmethod
    def message(match: MatchDTO) -> str:
        text = f"{match.organization} needs {match.quantity} {match.need_name}."
        if match.instructions:
            text = f"{text} {match.instructions}"
        return text

    @staticmethod
    def another(remaining: int) -> str:
        if remaining == 1:
            return "There is 1 more organization that needs this. Would you like to see it? (yes/no)"
        return f"There are {remaining} more organizations that need this. Would you like to see the next one? (yes/no)"
