"""Services Layer — store access and multi-step operations.

Invariants:
    - services/ talks to the database only through CertificationStore
    - Services raise tagged errors (core/errors.py) or pydantic ValidationError
"""
