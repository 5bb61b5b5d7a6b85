"""
Dependency injection for FastAPI routes.

The catalog store is owned by the application (``app.state.catalog_store``)
and shared by every request. Use cases are cheap and built per request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from car_catalog.ports.catalog_store import CatalogStore
from car_catalog.use_cases.add_car import AddCar
from car_catalog.use_cases.get_car_by_id import GetCarById
from car_catalog.use_cases.list_all_cars import ListAllCars
from car_catalog.use_cases.list_brand_cars import ListBrandCars
from car_catalog.use_cases.search_car_catalog import SearchCarCatalog


def get_catalog_store(request: Request) -> CatalogStore:
    """
    Provides the application's catalog store.

    Returns:
        CatalogStore: The store attached to the app at build time
    """
    return request.app.state.catalog_store


def get_list_all_cars_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> ListAllCars:
    return ListAllCars(catalog_store=store)


def get_list_brand_cars_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> ListBrandCars:
    return ListBrandCars(catalog_store=store)


def get_get_car_by_id_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> GetCarById:
    return GetCarById(catalog_store=store)


def get_search_catalog_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> SearchCarCatalog:
    return SearchCarCatalog(catalog_store=store)


def get_add_car_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> AddCar:
    return AddCar(catalog_store=store)
