"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Endpoints
depend only on the service interface, so the storage behind it can
change without touching the API handlers.
"""
