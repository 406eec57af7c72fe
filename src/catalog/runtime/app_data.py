from dataclasses import dataclass

from src.catalog.core.mappers import ProductMapper


@dataclass(frozen=True)
class ApplicationDependencies:
    product_mapper: ProductMapper
