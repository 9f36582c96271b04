"""
Zomato Backend — Root Route
=============================

What:  GET / returns a fixed plain-text greeting.
Why:   Quick "is the process up" probe for humans and compose health checks.
       It does not look at the database: the answer is the same whether or
       not MongoDB is reachable.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

GREETING = "Zomato Backend Running 🚀"


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Service greeting",
)
async def root() -> str:
    return GREETING
