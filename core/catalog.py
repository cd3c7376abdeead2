#!/usr/bin/env python3
"""
Catalog - the fixed set of categories, resources and verified organizations.

Loaded once from YAML and treated as immutable for the life of the process.
Category and resource names are canonical: records store them exactly as
spelled here and queries compare them case-sensitively.
"""
import logging
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


class CatalogResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class CatalogCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    resources: List[CatalogResource] = Field(default_factory=list)

    @property
    def resource_names(self) -> List[str]:
        return [r.name for r in self.resources]


class VerifiedOrganization(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    phone_numbers: List[str] = Field(default_factory=list)


class Catalog(BaseModel):
    """Categories, their resources, and the organizations allowed to post needs."""
    model_config = ConfigDict(frozen=True)

    categories: List[CatalogCategory]
    verified_organizations: List[VerifiedOrganization] = Field(default_factory=list)

    def category_names(self) -> List[str]:
        return [c.name for c in self.categories]

    def has_single_category(self) -> bool:
        return len(self.categories) == 1

    def get_category(self, name: str) -> CatalogCategory:
        for category in self.categories:
            if category.name == name:
                return category
        raise ConfigurationException(f"Unknown category: {name!r}")

    def resource_names(self, category: str) -> List[str]:
        return self.get_category(category).resource_names

    def organization_for_phone(self, phone_number: Optional[str]) -> Optional[VerifiedOrganization]:
        if not phone_number:
            return None
        return self._organizations_by_phone().get(phone_number)

    def _organizations_by_phone(self) -> Dict[str, VerifiedOrganization]:
        index = {}
        for org in self.verified_organizations:
            for phone in org.phone_numbers:
                index[phone] = org
        return index


def parse_catalog(data: dict) -> Catalog:
    """
    Validate raw catalog data.

    Raises:
        ConfigurationException: if the data is malformed, has no categories,
            or has a category without resources
    """
    try:
        catalog = Catalog(**(data or {}))
    except ValidationError as e:
        raise ConfigurationException(f"Invalid catalog: {e}") from e

    if not catalog.categories:
        raise ConfigurationException("Catalog defines no categories")

    for category in catalog.categories:
        if not category.resources:
            raise ConfigurationException(f"Category {category.name!r} defines no resources")

    return catalog


def load_catalog(path: str) -> Catalog:
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    catalog = parse_catalog(data)
    logger.info(
        f"Loaded catalog from {path}: {len(catalog.categories)} categories, "
        f"{len(catalog.verified_organizations)} verified organizations"
    )
    return catalog
