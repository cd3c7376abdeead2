#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against an in-memory SQLite database and need no external
services:

    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""

from core.geo import GeoPoint

# Reference locations shared across tests
SEATTLE = GeoPoint(lat=47.6062, lon=-122.3321)
BELLEVUE = GeoPoint(lat=47.6101, lon=-122.2015)
NEW_YORK = GeoPoint(lat=40.7128, lon=-74.0060)

DEFAULT_QUANTITY = 3
DEFAULT_INSTRUCTIONS = "Drop off at the side door, weekdays 9-5."

CATALOG_DATA = {
    "categories": [
        {
            "name": "Food",
            "resources": [{"name": "Canned Beans"}, {"name": "Rice"}],
        },
        {
            "name": "Hygiene",
            "resources": [{"name": "Soap"}, {"name": "Diapers"}],
        },
    ],
    "verified_organizations": [
        {"name": "Northwest Food Bank", "phone_numbers": ["+12065550100"]},
        {"name": "Rainier Family Shelter", "phone_numbers": ["+12065550111"]},
    ],
}

SINGLE_CATEGORY_DATA = {
    "categories": [
        {
            "name": "Food",
            "resources": [{"name": "Canned Beans"}, {"name": "Rice"}],
        },
    ],
    "verified_organizations": CATALOG_DATA["verified_organizations"],
}
