"""Services Layer — stateful editing sessions around the pure core.

Invariants:
    - Services hold state and timers; every state transition is a core function
"""
