"""Inbound and outbound product records."""

from sqlmodel import Field

from src.catalog.entities.service.product.payload import ProductPayload


class ProductRequest(ProductPayload):
    """Product data as received from a client. Carries no identity."""


class ProductResponse(ProductPayload):
    """Product data as returned to a client, always with its identifier."""

    id: int = Field(description="Identifier assigned by the store")
