"""Infrastructure Layer — icon library loading and cross-cutting concerns.

Invariants:
    - File and parse failures mapped to core/errors.py types, never raw OSError

Design Decisions:
    - Process-wide singletons via lru_cache factories, overridable in tests
"""
