"""Pydantic Schemas — response models for API endpoints.

Invariants:
    - Schemas shape data at the system boundary only
    - Wire field names are camelCase (profileType, createdAt) via aliases

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Submissions are NOT parsed by Pydantic: the core validator reports every
      missing field at once, which a Pydantic model would split into per-field errors
"""
