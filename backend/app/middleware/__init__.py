# Middleware package init
"""
Zomato Backend — Middleware Package
=====================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line carries the ID.
"""
