"""Todo API Package — in-memory task tracking service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
