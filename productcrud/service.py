"""Business rules of the product API."""

from __future__ import annotations

import logging

from .errors import AppError, not_found_error, parse_validation_errors, unexpected_error
from .mapper import to_entity, to_response, to_response_list
from .models import ProductRequest, ProductResponse
from .repository import ProductRepository, RecordNotFoundError

logger = logging.getLogger(__name__)


def _storage_error(exc: Exception, *, detect_missing: bool = True) -> AppError:
    logger.error(str(exc))
    if detect_missing and isinstance(exc, RecordNotFoundError):
        return not_found_error("product not found")
    return unexpected_error("unexpected error")


def _validate(request: ProductRequest) -> None:
    failures = request.validate()
    if failures:
        raise parse_validation_errors(failures)


class ProductService:
    """Validates requests and turns storage failures into AppError."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def get_product(self, product_id: int) -> ProductResponse:
        try:
            product = self._repository.find_by_id(product_id)
        except Exception as exc:
            raise _storage_error(exc) from exc
        return to_response(product)

    def get_products(self) -> list[ProductResponse]:
        try:
            products = self._repository.find_all()
        except Exception as exc:
            raise _storage_error(exc, detect_missing=False) from exc
        return to_response_list(products)

    def create_product(self, request: ProductRequest) -> ProductResponse:
        _validate(request)
        try:
            product = self._repository.insert(to_entity(request))
        except Exception as exc:
            raise _storage_error(exc, detect_missing=False) from exc
        return to_response(product)

    def update_product(self, product_id: int, request: ProductRequest) -> ProductResponse:
        _validate(request)
        try:
            product = self._repository.update_by_id(product_id, to_entity(request))
        except Exception as exc:
            raise _storage_error(exc) from exc
        return to_response(product)

    def delete_product(self, product_id: int) -> None:
        try:
            self._repository.delete_by_id(product_id)
        except Exception as exc:
            raise _storage_error(exc) from exc