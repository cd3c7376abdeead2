#!/usr/bin/env python3
"""
Unit tests for provide-flow reply parsing.
"""
import pytest

from core.exceptions import ValidationException
from core.provide.parsing import resolve_choice, parse_quantity, parse_bool, is_token, MAX_QUANTITY

OPTIONS = ["Canned Beans", "Rice"]


class TestResolveChoice:

    def test_exact_match(self):
        assert resolve_choice("Rice", OPTIONS) == "Rice"

    def test_case_insensitive_match_returns_canonical_spelling(self):
        assert resolve_choice("canned beans", OPTIONS) == "Canned Beans"

    def test_surrounding_and_repeated_whitespace_ignored(self):
        assert resolve_choice("  Canned   Beans ", OPTIONS) == "Canned Beans"

    def test_choice_number(self):
        assert resolve_choice("2", OPTIONS) == "Rice"

    @pytest.mark.parametrize("reply", ["", "   ", "Beans", "0", "3", "-1"])
    def test_invalid(self, reply):
        with pytest.raises(ValidationException):
            resolve_choice(reply, OPTIONS)

    def test_ambiguous_case_insensitive_match_rejected(self):
        with pytest.raises(ValidationException):
            resolve_choice("soap", ["Soap", "SOAP"])


class TestParseQuantity:

    @pytest.mark.parametrize("reply,expected", [("0", 0), ("3", 3), (" 12 ", 12), ("007", 7)])
    def test_valid(self, reply, expected):
        assert parse_quantity(reply) == expected

    @pytest.mark.parametrize("reply", ["", "-1", "+2", "1.5", "three", "²", "1 000"])
    def test_invalid(self, reply):
        with pytest.raises(ValidationException):
            parse_quantity(reply)

    def test_largest_storable_quantity(self):
        assert parse_quantity(str(MAX_QUANTITY)) == MAX_QUANTITY

    @pytest.mark.parametrize("reply", [str(MAX_QUANTITY + 1), "99999999999999999999"])
    def test_beyond_column_range(self, reply):
        with pytest.raises(ValidationException):
            parse_quantity(reply)


class TestParseBool:

    @pytest.mark.parametrize("reply", ["true", "True", "YES", "y", " yes "])
    def test_true(self, reply):
        assert parse_bool(reply) is True

    @pytest.mark.parametrize("reply", ["false", "False", "no", "N"])
    def test_false(self, reply):
        assert parse_bool(reply) is False

    @pytest.mark.parametrize("reply", ["", "maybe", "1", "yep"])
    def test_invalid(self, reply):
        with pytest.raises(ValidationException):
            parse_bool(reply)


def test_is_token():
    assert is_token(" None ", "none")
    assert not is_token("no", "none")
