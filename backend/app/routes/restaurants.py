"""
Zomato Backend — Restaurant Route Handlers
============================================

What:  Handles GET /restaurants (full catalogue).
How:   Delegates to RestaurantService and lets FastAPI serialize the
       Restaurant models, keeping key order name, location, rating.
"""

import logging
from typing import List

from fastapi import APIRouter

from app.schemas.restaurant import Restaurant
from app.services.restaurant_service import restaurant_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Restaurants"])


@router.get(
    "/restaurants",
    response_model=List[Restaurant],
    summary="List restaurants",
    description="Returns every restaurant in the catalogue. Takes no parameters.",
)
async def list_restaurants() -> List[Restaurant]:
    """
    Return the restaurant catalogue.

    Deterministic: identical body on every call, independent of database state.
    """
    return list(restaurant_service.list_restaurants())
