"""
Unit tests for FastAPI dependency injection functions.

The catalog store is shared through ``app.state``; use cases are built per
request around it.
"""

from __future__ import annotations

from typing import get_type_hints
from unittest.mock import Mock

import pytest

from car_catalog.adapters.in_memory_catalog_store import InMemoryCatalogStore
from car_catalog.entrypoints.http.dependencies import (
    get_add_car_use_case,
    get_catalog_store,
    get_get_car_by_id_use_case,
    get_list_all_cars_use_case,
    get_list_brand_cars_use_case,
    get_search_catalog_use_case,
)
from car_catalog.use_cases.add_car import AddCar
from car_catalog.use_cases.get_car_by_id import GetCarById
from car_catalog.use_cases.list_all_cars import ListAllCars
from car_catalog.use_cases.list_brand_cars import ListBrandCars
from car_catalog.use_cases.search_car_catalog import SearchCarCatalog

FACTORIES = [
    (get_list_all_cars_use_case, ListAllCars),
    (get_list_brand_cars_use_case, ListBrandCars),
    (get_get_car_by_id_use_case, GetCarById),
    (get_search_catalog_use_case, SearchCarCatalog),
    (get_add_car_use_case, AddCar),
]


@pytest.fixture
def store() -> InMemoryCatalogStore:
    return InMemoryCatalogStore()


# ==============================================================================
# get_catalog_store()
# ==============================================================================


def test_get_catalog_store_reads_app_state(store: InMemoryCatalogStore) -> None:
    request = Mock()
    request.app.state.catalog_store = store

    assert get_catalog_store(request) is store


# ==============================================================================
# Use Case Factories
# ==============================================================================


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_wires_store_into_use_case(
    factory, use_case_type, store: InMemoryCatalogStore
) -> None:
    use_case = factory(store=store)

    assert isinstance(use_case, use_case_type)
    assert use_case._store is store


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_creates_fresh_instance_each_call(
    factory, use_case_type, store: InMemoryCatalogStore
) -> None:
    assert factory(store=store) is not factory(store=store)


@pytest.mark.parametrize(("factory", "use_case_type"), FACTORIES)
def test_factory_return_type_annotation(factory, use_case_type) -> None:
    assert get_type_hints(factory)["return"] is use_case_type


def test_dependencies_are_not_cached() -> None:
    """Dependencies are not decorated with lru_cache (per-request instances)."""
    for factory, _ in FACTORIES:
        assert not hasattr(factory, "__wrapped__")
