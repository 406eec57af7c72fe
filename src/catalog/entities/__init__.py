"""Entities module with entity-centric structure.

Each entity has its own package containing:
- payload.py: Fields shared by every record shape of the entity
- entity.py: Persistent model (SQLModel table)
- schemas.py: Inbound and outbound record shapes
"""

from .service.product import (
    ProductEntity,
    ProductPayload,
    ProductRequest,
    ProductResponse,
)

__all__ = [
    "ProductPayload",
    "ProductRequest",
    "ProductEntity",
    "ProductResponse",
]
