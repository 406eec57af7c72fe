"""Collaborator contracts the product components depend on."""

from typing import Protocol, runtime_checkable

from src.catalog.entities.service.product import ProductEntity


@runtime_checkable
class EntityStore(Protocol):
    """Persists product entities and owns identifier assignment.

    Implementations assign ``id`` on first persistence and return the
    persisted entity. Durability and transactions are theirs to guarantee.
    """

    def persist(self, entity: ProductEntity) -> ProductEntity: ...
