# Routes package init
"""
Zomato Backend — API Routes Package
=====================================

Route Inventory:
    - root.py:         GET /             (plain-text greeting)
    - restaurants.py:  GET /restaurants  (restaurant catalogue)

Every other path falls through to FastAPI's default 404, and a wrong
method on a known path to its default 405.
"""
