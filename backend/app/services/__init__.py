# Services package init
"""
Zomato Backend — Services Layer
=================================

What:  Business logic sitting between routes (HTTP) and data.

Service Inventory:
    - RestaurantService: serves the fixed restaurant catalogue
"""
