"""Unit tests for the product mapper."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from src.catalog.core.errors import InvalidInput
from src.catalog.core.mappers import ProductMapper
from src.catalog.entities.service.product import (
    PAYLOAD_FIELDS,
    ProductEntity,
    ProductRequest,
    ProductResponse,
)


def _payload(record) -> dict:
    return {field: getattr(record, field) for field in PAYLOAD_FIELDS}


class TestToEntity:
    """Test mapping requests into unpersisted entities."""

    def test_stove_request_becomes_entity(self, mapper: ProductMapper, product_request):
        entity = mapper.to_entity(product_request)

        assert isinstance(entity, ProductEntity)
        assert entity.id is None
        assert entity.name == "Fogão 4 bocas"
        assert entity.ncm == "73211100"
        assert entity.ncm_description == "Aparelhos de cocção, a gás"
        assert entity.price == Decimal("1299.90")
        assert entity.quantity == 12

    def test_payload_fields_preserved(self, mapper: ProductMapper, product_request):
        entity = mapper.to_entity(product_request)

        assert _payload(entity) == _payload(product_request)

    def test_identity_left_unset(self, mapper: ProductMapper, product_request):
        assert mapper.to_entity(product_request).id is None

    def test_none_request_rejected(self, mapper: ProductMapper):
        with pytest.raises(InvalidInput) as exc_info:
            mapper.to_entity(None)

        assert exc_info.value.operation == "to_entity"

    def test_invalid_input_is_a_value_error(self, mapper: ProductMapper):
        with pytest.raises(ValueError):
            mapper.to_entity(None)

    def test_request_not_modified(self, mapper: ProductMapper, product_request):
        before = product_request.model_dump()

        mapper.to_entity(product_request)

        assert product_request.model_dump() == before


class TestToResponse:
    """Test mapping persisted entities into responses."""

    def test_refrigerator_entity_becomes_response(
        self, mapper: ProductMapper, persisted_entity
    ):
        response = mapper.to_response(persisted_entity)

        assert response == ProductResponse(
            id=42,
            name="Geladeira Frost Free",
            ncm="84182100",
            ncm_description="Refrigeradores domésticos",
            price=Decimal("3499.00"),
            quantity=3,
        )

    def test_identity_and_payload_preserved(
        self, mapper: ProductMapper, persisted_entity
    ):
        response = mapper.to_response(persisted_entity)

        assert response.id == persisted_entity.id
        assert _payload(response) == _payload(persisted_entity)

    def test_none_entity_rejected(self, mapper: ProductMapper):
        with pytest.raises(InvalidInput) as exc_info:
            mapper.to_response(None)

        assert exc_info.value.operation == "to_response"

    def test_unpersisted_entity_rejected(self, mapper: ProductMapper, product_request):
        entity = mapper.to_entity(product_request)

        with pytest.raises(InvalidInput, match="has not been persisted"):
            mapper.to_response(entity)

    def test_fields_copied_without_revalidation(self, mapper: ProductMapper):
        entity = ProductEntity(
            id=1,
            name=None,
            ncm="73211100",
            ncm_description="Aparelhos de cocção",
            price=Decimal("10.00"),
            quantity=1,
        )

        response = mapper.to_response(entity)

        assert response.id == 1
        assert response.name is None
        assert response.price == Decimal("10.00")

    def test_entity_not_modified(self, mapper: ProductMapper, persisted_entity):
        before = persisted_entity.model_dump()

        mapper.to_response(persisted_entity)

        assert persisted_entity.model_dump() == before


class TestRoundTrip:
    """Request to entity to response keeps the payload intact."""

    def test_assigned_id_extends_request(self, mapper: ProductMapper, product_request):
        entity = mapper.to_entity(product_request)
        entity.id = 7

        response = mapper.to_response(entity)

        assert response.model_dump() == {**product_request.model_dump(), "id": 7}

    def test_store_assigned_id_preserved(
        self, mapper: ProductMapper, product_request, memory_store
    ):
        persisted = memory_store.persist(mapper.to_entity(product_request))

        response = mapper.to_response(persisted)

        assert response.id == persisted.id == 1

    @pytest.mark.parametrize(
        ("price", "quantity"),
        [
            (Decimal("0.01"), 0),
            (Decimal("9999999.99"), 1),
            (Decimal("3499.00"), 3),
        ],
    )
    def test_price_is_exact(self, mapper: ProductMapper, price: Decimal, quantity: int):
        request = ProductRequest(
            name="Item",
            ncm="00000000",
            ncm_description="Diversos",
            price=price,
            quantity=quantity,
        )
        entity = mapper.to_entity(request)
        entity.id = 1

        response = mapper.to_response(entity)

        assert response.price == price
        assert response.price.as_tuple() == price.as_tuple()
        assert response.quantity == quantity


class TestPurityAndIndependence:
    """Mapping is pure and its outputs are fresh objects."""

    def test_equal_inputs_give_equal_outputs(
        self, mapper: ProductMapper, product_request, persisted_entity
    ):
        assert mapper.to_entity(product_request).model_dump() == (
            mapper.to_entity(product_request).model_dump()
        )
        assert mapper.to_response(persisted_entity) == mapper.to_response(
            persisted_entity
        )

    def test_outputs_are_fresh(self, mapper: ProductMapper, product_request):
        first = mapper.to_entity(product_request)
        second = mapper.to_entity(product_request)

        assert first is not second

    def test_mutating_entity_leaves_request_untouched(
        self, mapper: ProductMapper, product_request
    ):
        entity = mapper.to_entity(product_request)
        entity.name = "Outro"
        entity.quantity = 99

        assert product_request.name == "Fogão 4 bocas"
        assert product_request.quantity == 12

    def test_mutating_entity_leaves_response_untouched(
        self, mapper: ProductMapper, persisted_entity
    ):
        response = mapper.to_response(persisted_entity)
        persisted_entity.price = Decimal("1.00")
        persisted_entity.id = 43

        assert response.price == Decimal("3499.00")
        assert response.id == 42

    def test_mutating_response_leaves_entity_untouched(
        self, mapper: ProductMapper, persisted_entity
    ):
        response = mapper.to_response(persisted_entity)
        response.ncm = "99999999"

        assert persisted_entity.ncm == "84182100"

    def test_shared_instance_across_threads(self, mapper: ProductMapper):
        requests = [
            ProductRequest(
                name=f"Produto {i}",
                ncm=f"{i:08d}",
                ncm_description="Diversos",
                price=Decimal(i) / 100,
                quantity=i,
            )
            for i in range(50)
        ]

        def round_trip(item: tuple[int, ProductRequest]) -> ProductResponse:
            index, request = item
            entity = mapper.to_entity(request)
            entity.id = index
            return mapper.to_response(entity)

        with ThreadPoolExecutor(max_workers=8) as executor:
            responses = list(executor.map(round_trip, enumerate(requests)))

        for index, (request, response) in enumerate(zip(requests, responses, strict=True)):
            assert response.model_dump() == {**request.model_dump(), "id": index}
