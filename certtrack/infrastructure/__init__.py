"""Infrastructure Layer — database wiring and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
"""
