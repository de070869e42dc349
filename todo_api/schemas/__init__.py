"""Pydantic Schemas — wire format for tasks at the API boundary.

Invariants:
    - Schemas decode/encode only; business rules live in core/task.py
"""
