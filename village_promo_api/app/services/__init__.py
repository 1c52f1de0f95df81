"""
Service layer abstraction.

Each service encapsulates the business rules for a domain and talks to
whichever storage backend is active, so API handlers never depend on
how records are persisted.
"""
