"""Airtable Table Creator Agent - creates the Team Task List table on request.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
