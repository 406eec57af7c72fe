"""Entity package: Product."""

from .entity import ProductEntity
from .payload import PAYLOAD_FIELDS, ProductPayload
from .schemas import ProductRequest, ProductResponse

__all__ = [
    "PAYLOAD_FIELDS",
    "ProductEntity",
    "ProductPayload",
    "ProductRequest",
    "ProductResponse",
]
