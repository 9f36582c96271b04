"""
Zomato Backend — Pydantic Response Schemas
============================================

What:  The Restaurant record returned by GET /restaurants.
Why:   Field declaration order fixes the JSON key order (name, location,
       rating), and frozen models keep the catalogue immutable.
"""

from pydantic import BaseModel, Field


class Restaurant(BaseModel):
    """
    What:  A restaurant listing. Never persisted; no identity.
    Who:   Returned as array items by GET /restaurants.
    """
    name: str = Field(description="Restaurant name")
    location: str = Field(description="City the restaurant is in")
    rating: float = Field(ge=0.0, le=5.0, description="Average rating, 0.0 to 5.0")

    model_config = {"frozen": True}
