"""Pydantic Schemas — request/response validation at the HTTP boundary.

Invariants:
    - JSON field names are camelCase; Python attributes are snake_case
    - Create schemas normalize every date to UTC before it reaches the store
    - Invalid input raises pydantic.ValidationError (classified as 400)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
