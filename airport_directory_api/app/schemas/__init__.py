"""
Pydantic schema definitions for API payloads.

Schemas describe the airport records exchanged over HTTP and stored in
the in‑memory directory.
"""
