"""Pydantic Schemas — response shaping and documented request contracts.

Invariants:
    - Response schemas are built from ORM rows (from_attributes)
    - Request schemas document the body for OpenAPI; enforcement is done by
      core/validation.py rules so every violation is reported, not just the first

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
