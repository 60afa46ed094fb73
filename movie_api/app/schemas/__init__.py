"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the stored records so that the API
representation is decoupled from storage.
"""
