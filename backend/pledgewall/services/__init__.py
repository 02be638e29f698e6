"""Services Layer — orchestrates validator, stores and stats for the routes.

Invariants:
    - Services are thin: validate (pure) → persist (IO) → derive (pure)
    - Services never catch store errors; they propagate to the global handler
"""
