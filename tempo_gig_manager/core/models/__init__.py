"""
Model definitions.

- domain: Enumerations and constants of the marketplace domain
- io: Pydantic request and response schemas of the API
"""
