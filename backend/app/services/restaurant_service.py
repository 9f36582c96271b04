"""
Zomato Backend — Restaurant Service
=====================================

What:  Provides the restaurant catalogue served by GET /restaurants.
Why:   Keeps the data out of the route handler so it can be tested without HTTP.
How:   Returns a fixed, immutable tuple of Restaurant records. Nothing is
       read from MongoDB; the list is demo data.
"""

import logging
from typing import Tuple

from app.schemas.restaurant import Restaurant

logger = logging.getLogger(__name__)


RESTAURANTS: Tuple[Restaurant, ...] = (
    Restaurant(name="Burger King", location="Mumbai", rating=4.3),
    Restaurant(name="Pizza Hut", location="Delhi", rating=4.1),
)


class RestaurantService:
    """Read-only access to the restaurant catalogue."""

    def __init__(self, restaurants: Tuple[Restaurant, ...] = RESTAURANTS):
        self._restaurants = restaurants

    def list_restaurants(self) -> Tuple[Restaurant, ...]:
        """
        Return every restaurant, in catalogue order.

        The same tuple is returned on every call; callers cannot mutate it
        or its (frozen) items.
        """
        logger.debug("Listing %d restaurants", len(self._restaurants))
        return self._restaurants


# ── Singleton Instance ────────────────────────────────────────────────────
restaurant_service = RestaurantService()
