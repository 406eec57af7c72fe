"""Mapper between product requests, entities and responses."""

from src.catalog.core.errors import InvalidInput
from src.catalog.entities.service.product import (
    ProductEntity,
    ProductRequest,
    ProductResponse,
)


class ProductMapper:
    """Stateless translator between the three product records.

    Both operations copy fields verbatim into a freshly built record without
    re-validating them; checking field values belongs to the layers that
    decode requests and load entities. The mapper holds no state and performs
    no I/O, so one instance may be shared freely.
    """

    def to_entity(self, request: ProductRequest | None) -> ProductEntity:
        """Build an unpersisted entity from a request.

        Raises:
            InvalidInput: If ``request`` is ``None``.
        """
        if request is None:
            raise InvalidInput("to_entity", "a product request is required")

        return ProductEntity(
            name=request.name,
            ncm=request.ncm,
            ncm_description=request.ncm_description,
            price=request.price,
            quantity=request.quantity,
        )

    def to_response(self, entity: ProductEntity | None) -> ProductResponse:
        """Build a response from a persisted entity.

        Raises:
            InvalidInput: If ``entity`` is ``None`` or has no identifier yet.
        """
        if entity is None:
            raise InvalidInput("to_response", "a product entity is required")
        if entity.id is None:
            raise InvalidInput(
                "to_response", "the product entity has not been persisted"
            )

        return ProductResponse.model_construct(
            id=entity.id,
            name=entity.name,
            ncm=entity.ncm,
            ncm_description=entity.ncm_description,
            price=entity.price,
            quantity=entity.quantity,
        )
