"""Conversions between stored products and API bodies."""

from __future__ import annotations

from collections.abc import Iterable

from .entities import Product
from .models import ProductRequest, ProductResponse


def to_entity(request: ProductRequest) -> Product:
    return Product(
        name=request.name,
        description=request.description,
        price=request.price,
    )


def to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
    )


def to_response_list(products: Iterable[Product]) -> list[ProductResponse]:
    return [to_response(product) for product in products]