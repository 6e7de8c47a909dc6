"""
Pydantic schema definitions for API payloads.

Request and response bodies are separated from the service's storage
so the wire format (camelCase, envelopes) can evolve independently.
"""
