"""Product database table model."""

from sqlmodel import Field

from src.catalog.entities.service.product.payload import ProductPayload


class ProductEntity(ProductPayload, table=True):
    """Persistence model for products.

    ``id`` stays ``None`` until the store persists the row and assigns it.
    """

    __tablename__ = "product"

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identifier assigned by the store",
    )
