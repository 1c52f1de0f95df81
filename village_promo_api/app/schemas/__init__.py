"""
Pydantic schema definitions for API payloads.

Each domain (categories, businesses, the village profile) defines its
own models for request and response bodies.  Field names are
snake_case in Python and camelCase on the wire, matching what the web
client sends.
"""
