"""Core Layer - pure domain logic: errors, field types, schema builder, activity log.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No network IO
"""
