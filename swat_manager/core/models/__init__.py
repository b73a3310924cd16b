"""
Domain enums and API I/O schemas.

- domain: Enumerations shared by entities, services and schemas
- io: Pydantic request/response models used by the HTTP layer
"""
