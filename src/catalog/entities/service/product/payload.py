"""Business payload shared by every product record."""

from decimal import Decimal

from sqlmodel import Field, SQLModel

from src.catalog.entities._types import ExactDecimal


class ProductPayload(SQLModel, table=False):
    """Payload fields common to requests, entities and responses.

    ``price`` is a ``Decimal`` so monetary amounts never pass through binary
    floating point. No business constraints are declared here; validating
    requests is the job of the layer that decodes them.
    """

    name: str = Field(description="Product name")
    ncm: str = Field(description="Mercosur Common Nomenclature code")
    ncm_description: str = Field(description="Description of the NCM code")
    price: Decimal = Field(sa_type=ExactDecimal, description="Unit price")
    quantity: int = Field(description="Units in stock")


PAYLOAD_FIELDS: tuple[str, ...] = tuple(ProductPayload.model_fields)
