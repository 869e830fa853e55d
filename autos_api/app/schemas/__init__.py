"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the database layer so the API
representation does not depend on how autos are stored.
"""
