"""
Zomato Backend — Application Package Initializer
==================================================

Architecture Note:

    ┌─────────────────────────────────────┐
    │     Routes (API Layer)              │  ← GET /, GET /restaurants
    ├─────────────────────────────────────┤
    │     Services                        │  ← restaurant catalogue
    ├─────────────────────────────────────┤
    │     Schemas                         │  ← Pydantic response models
    ├─────────────────────────────────────┤
    │     Database                        │  ← one-shot MongoDB connector
    └─────────────────────────────────────┘

    The database layer is not consulted by any route.
"""

__version__ = "1.0.0"
