"""Services Layer - table creation and self-test use-cases.

Invariants:
    - Services return HTTP-ready outcomes; routes only serialize them
"""
