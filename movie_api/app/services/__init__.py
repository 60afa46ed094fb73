"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
depend on the abstract service interface only, so the in‑memory
implementation used here can be swapped for a fake in tests or for a
database‑backed one without touching the handlers.
"""
