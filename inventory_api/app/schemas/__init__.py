"""
Pydantic schema definitions for customer records and API payloads.

Schemas are separated from the persistence code so that the API
representation does not depend on how rows are stored.
"""
