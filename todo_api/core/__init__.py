"""Core Layer — task entity, validation rules, error taxonomy, lock primitive.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - No IO, no async
"""
