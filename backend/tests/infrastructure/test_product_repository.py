"""SQL Product Repository — one committed unit of work per call."""

import pytest

from product_api.infrastructure.product_repository import SqlProductRepository


@pytest.fixture
def repo(test_db):
    return SqlProductRepository(test_db)


async def test_create_assigns_id_and_defaults_availability(repo):
    product = await repo.create({"name": "Mouse", "price": 25.0})
    assert product.id is not None
    assert product.availability is True
    assert product.created_at is not None


async def test_get_returns_none_for_unknown_or_out_of_range_ids(repo):
    assert await repo.get(1) is None
    assert await repo.get(0) is None
    assert await repo.get(-5) is None
    assert await repo.get(2**31) is None


async def test_update_overwrites_fields(repo):
    product = await repo.create({"name": "Mouse", "price": 25.0})
    updated = await repo.update(
        product, {"name": "Trackball", "price": 40.0, "availability": False},
    )
    assert (updated.name, updated.price, updated.availability) == (
        "Trackball", 40.0, False,
    )


async def test_toggle_and_delete(repo):
    product = await repo.create({"name": "Mouse", "price": 25.0})
    toggled = await repo.toggle_availability(product)
    assert toggled.availability is False

    await repo.delete(toggled)
    assert await repo.get(product.id) is None
    assert await repo.list_all() == []
