#!/usr/bin/env python3
"""
Matcher Service - connects offered resources to nearby unmet needs.

A need matches a resource when all of these hold:
1. Same category and name (exact, case-sensitive)
2. Both owners have coordinates and are within the search radius (inclusive)
3. The need accepts opened items, or the resource is unopened
4. The need still has outstanding quantity

Matches come back in the discovery order of the need query, which the
store orders by (created_at, id) so the sequence is stable between runs.
"""
from typing import Any, Dict, List, Optional
import logging

from core.catalog import Catalog
from core.config_loader import MatchingConfig
from core.geo import haversine_m
from core.matcher.dto import MatchDTO
from core.matcher.models import Match
from database.models import RecordKind, Resource, Need, User
from database.store import Store

logger = logging.getLogger(__name__)

UNKNOWN_ORGANIZATION = "An organization"


class MatcherService:
    """
    Service for resource/need matching.

    Read-only against the store; safe to call any number of times for the
    same resource.
    """

    def __init__(
        self,
        store: Store,
        catalog: Catalog,
        config: MatchingConfig
    ):
        """
        Initialize matcher service with dependencies.

        Args:
            store: Store facade bound to the current unit of work
            catalog: Catalog used to name the organizations behind needs
            config: MatchingConfig with the search radius
        """
        self.store = store
        self.catalog = catalog
        self.config = config

    @property
    def radius_meters(self) -> float:
        return self.config.search_radius_meters

    def find_matches(self, resource: Resource, owner: User) -> List[Match]:
        """
        Find every unmet need the resource can satisfy.

        Args:
            resource: The newly committed resource
            owner: The resource's owner (supplies the origin coordinates)

        Returns:
            Matches in discovery order; empty if the owner has no coordinates
        """
        origin = owner.coordinates
        if origin is None:
            logger.info(f"User {owner.id} has no coordinates, skipping matching")
            return []

        candidates = self.store.query_by_category_and_name(
            RecordKind.NEED, resource.category, resource.name
        )
        logger.debug(f"{len(candidates)} candidate needs for {resource.category}/{resource.name}")

        owners: Dict[Any, Optional[User]] = {}
        matches = []

        for need in candidates:
            if need.created_by_id not in owners:
                owners[need.created_by_id] = self.store.get_user(need.created_by_id)
            need_owner = owners[need.created_by_id]

            if need_owner is None or need_owner.coordinates is None:
                logger.debug(f"Need {need.id}: owner coordinates unset")
                continue

            distance = haversine_m(origin, need_owner.coordinates)
            if distance > self.radius_meters:
                logger.debug(f"Need {need.id}: {distance:.0f}m exceeds radius")
                continue

            if not self._condition_allows(need, resource):
                logger.debug(f"Need {need.id}: requires unopened items")
                continue

            if need.quantity is None or need.quantity <= 0:
                logger.debug(f"Need {need.id}: already satisfied")
                continue

            matches.append(Match(
                resource=resource,
                need=need,
                need_owner=need_owner,
                distance_meters=distance
            ))

        logger.info(
            f"Found {len(matches)} matches for resource {resource.category}/{resource.name} "
            f"of user {owner.id}"
        )
        return matches

    def find_resources_for_need(self, need: Need, owner: User) -> List[Match]:
        """
        Find offered resources near an organization that satisfy its need.

        Args:
            need: The need to fill
            owner: The organization user that owns the need

        Returns:
            Matches sorted by ascending distance, ties by resource owner id
        """
        origin = owner.coordinates
        if origin is None:
            logger.info(f"User {owner.id} has no coordinates, skipping matching")
            return []

        if need.quantity is None or need.quantity <= 0:
            return []

        nearby_users = self.store.query_owners_within_radius(origin, self.radius_meters)

        matches = []
        for user in nearby_users:
            if user.id == owner.id:
                continue

            resource = self.store.query_by_owner_and_key(
                RecordKind.RESOURCE, user, need.category, need.name
            )
            if resource is None or resource.quantity <= 0:
                continue

            if not self._condition_allows(need, resource):
                continue

            matches.append(Match(
                resource=resource,
                need=need,
                need_owner=owner,
                distance_meters=haversine_m(origin, user.coordinates)
            ))

        logger.info(f"Found {len(matches)} resources for need {need.category}/{need.name}")
        return matches

    def to_dto(self, match: Match) -> MatchDTO:
        """Detach a match from the session for presentation."""
        need = match.need
        return MatchDTO(
            need_id=need.id,
            organization=self.organization_name(match.need_owner),
            need_name=need.name,
            quantity=need.quantity,
            instructions=need.instructions or "",
            distance_meters=match.distance_meters
        )

    def organization_name(self, user: User) -> str:
        org = self.catalog.organization_for_phone(user.phone_number)
        if org is not None:
            return org.name
        return user.name or UNKNOWN_ORGANIZATION

    @staticmethod
    def _condition_allows(need: Need, resource: Resource) -> bool:
        return not need.unopened_only or bool(resource.is_unopened)
