"""Product service composing the mapper with an entity store."""

from collections.abc import Iterable

from loguru import logger

from src.catalog.core.mappers import ProductMapper
from src.catalog.core.ports import EntityStore
from src.catalog.entities.service.product import (
    ProductEntity,
    ProductRequest,
    ProductResponse,
)


class ProductService:
    """Runs product records through the mapper and the store.

    The service owns no persistence. It hands entities to the injected
    ``EntityStore`` and returns responses to its caller.
    """

    def __init__(self, store: EntityStore, mapper: ProductMapper | None = None) -> None:
        self._store = store
        self._mapper = mapper if mapper is not None else ProductMapper()

    @property
    def mapper(self) -> ProductMapper:
        return self._mapper

    def create(self, request: ProductRequest | None) -> ProductResponse:
        """Persist a new product and return its response record."""
        entity = self._mapper.to_entity(request)

        logger.debug("Persisting product '{}'", entity.name)
        try:
            persisted = self._store.persist(entity)
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Failed to persist product '{}'", entity.name
            )
            raise

        response = self._mapper.to_response(persisted)
        logger.info("Product created", product_id=response.id, ncm=response.ncm)
        return response

    def present(self, entity: ProductEntity | None) -> ProductResponse:
        """Map an already persisted entity for the response sink."""
        return self._mapper.to_response(entity)

    def present_all(self, entities: Iterable[ProductEntity]) -> list[ProductResponse]:
        """Map persisted entities in order."""
        return [self._mapper.to_response(entity) for entity in entities]
