#!/usr/bin/env python3
"""
Tests for contact-day preferences.
"""
import unittest

import pytest

from core.exceptions import ValidationException
from core.preferences import DayFlags, update_contact_days
from core.provide.phrases import ProvidePhrases
from database.models import User


class TestDayFlagsParsing(unittest.TestCase):

    def test_full_names(self):
        self.assertEqual(
            DayFlags.from_string("Monday,Wednesday,Friday"),
            DayFlags.MONDAY | DayFlags.WEDNESDAY | DayFlags.FRIDAY
        )

    def test_abbreviations_and_spacing(self):
        self.assertEqual(DayFlags.from_string(" sat , SUN "), DayFlags.SATURDAY | DayFlags.SUNDAY)

    def test_everyday_and_none(self):
        self.assertEqual(DayFlags.from_string("everyday"), DayFlags.EVERYDAY)
        self.assertEqual(DayFlags.from_string("Every Day"), DayFlags.EVERYDAY)
        self.assertEqual(DayFlags.from_string("none"), DayFlags.NONE)

    def test_duplicates_collapse(self):
        self.assertEqual(DayFlags.from_string("mon,monday"), DayFlags.MONDAY)

    def test_custom_separator(self):
        self.assertEqual(DayFlags.from_string("tue tHu", separator=" "), DayFlags.TUESDAY | DayFlags.THURSDAY)

    def test_empty_rejected(self):
        for text in ("", "  ", ", ,", None):
            with self.assertRaises(ValidationException):
                DayFlags.from_string(text)

    def test_unknown_day_rejected(self):
        with self.assertRaises(ValidationException):
            DayFlags.from_string("monday,someday")

    def test_seven_days_are_everyday(self):
        everyday = DayFlags.NONE
        for day in DayFlags.days():
            everyday |= day
        self.assertEqual(everyday, DayFlags.EVERYDAY)


class TestDayFlagsToString(unittest.TestCase):

    def test_named_days_in_week_order(self):
        days = DayFlags.FRIDAY | DayFlags.MONDAY
        self.assertEqual(days.to_string(), "Monday, Friday")

    def test_none_and_everyday(self):
        self.assertEqual(DayFlags.NONE.to_string(), "none")
        self.assertEqual(DayFlags.EVERYDAY.to_string(), "every day")

    def test_parse_of_rendered_value(self):
        days = DayFlags.TUESDAY | DayFlags.SATURDAY
        self.assertEqual(DayFlags.from_string(days.to_string()), days)


class TestUpdateContactDays:

    def test_persists_flags(self, store, make_user):
        user = make_user()

        days = update_contact_days(store, user, "mon, wed")

        store.db.expire_all()
        assert days == DayFlags.MONDAY | DayFlags.WEDNESDAY
        assert store.get_user(user.id).reminder_frequency == int(days)

    def test_invalid_text_writes_nothing(self, store, make_user):
        user = make_user()

        with pytest.raises(ValidationException):
            update_contact_days(store, user, "whenever")

        store.db.expire_all()
        assert store.get_user(user.id).reminder_frequency == 0


class TestCompleteCreateWording(unittest.TestCase):

    def test_without_contact_days(self):
        message = ProvidePhrases.complete_create(User(phone_number="+1", reminder_frequency=0))
        self.assertIn("Your offer has been saved", message)
        self.assertNotIn(" on ", message)

    def test_with_contact_days(self):
        user = User(phone_number="+1", reminder_frequency=int(DayFlags.MONDAY | DayFlags.THURSDAY))
        self.assertIn("on Monday, Thursday when", ProvidePhrases.complete_create(user))
