"""Infrastructure Layer — persistence backends and cross-cutting concerns.

Invariants:
    - Infrastructure never imports validation logic from core/ (only types and errors)
    - Every persistence failure mapped to StoreUnavailableError

Design Decisions:
    - Two interchangeable PledgeStore backends (SQL, local) behind one Protocol
"""
