"""HTTP routes of the product API."""

from __future__ import annotations

import re

from flask import Flask, jsonify, request

from .errors import AppError, handle_error
from .models import ProductRequest
from .service import ProductService

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1
_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
_STRING_FIELDS = ("name", "description")


def _error_response(err: BaseException):
    status, body = handle_error(err)
    return jsonify(body), status


def _parse_product_id(raw: str) -> int:
    if _INT_PATTERN.fullmatch(raw):
        value = int(raw)
        if _INT_MIN <= value <= _INT_MAX:
            return value
    raise AppError("invalid product id", 400)


def _request_from_form(form) -> ProductRequest:
    values = {}
    for key in form:
        name = key.lower()
        value = form.get(key, "")
        if name in _STRING_FIELDS:
            values[name] = value
        elif name == "price" and value != "":
            values[name] = float(value)
    return ProductRequest(**values)


def _parse_body() -> ProductRequest:
    mimetype = request.mimetype
    try:
        if mimetype == "application/json" or mimetype.endswith("+json"):
            return ProductRequest.from_json(request.get_data())
        if mimetype in _FORM_TYPES:
            return _request_from_form(request.form)
    except ValueError as exc:
        raise AppError(str(exc), 400) from exc
    raise AppError("Unprocessable Entity", 400)


class ProductHandler:
    """Request handlers answering with JSON bodies."""

    def __init__(self, service: ProductService) -> None:
        self._service = service

    def list_products(self):
        try:
            products = self._service.get_products()
        except Exception as exc:
            return _error_response(exc)
        return jsonify([product.to_dict() for product in products]), 200

    def get_product(self, product_id: str):
        try:
            product = self._service.get_product(_parse_product_id(product_id))
        except Exception as exc:
            return _error_response(exc)
        return jsonify(product.to_dict()), 200

    def create_product(self):
        try:
            product = self._service.create_product(_parse_body())
        except Exception as exc:
            return _error_response(exc)
        return jsonify({"message": "product created", "data": product.to_dict()}), 201

    def update_product(self, product_id: str):
        try:
            key = _parse_product_id(product_id)
            product = self._service.update_product(key, _parse_body())
        except Exception as exc:
            return _error_response(exc)
        return jsonify({"message": "product updated", "data": product.to_dict()}), 200

    def delete_product(self, product_id: str):
        try:
            self._service.delete_product(_parse_product_id(product_id))
        except Exception as exc:
            return _error_response(exc)
        return jsonify({"message": "product deleted"}), 200


def register_product_routes(app: Flask, handler: ProductHandler) -> None:
    """Mount the product handlers under ``/products``."""
    app.add_url_rule(
        "/products", "list_products", handler.list_products,
        methods=["GET"], strict_slashes=False,
    )
    app.add_url_rule(
        "/products", "create_product", handler.create_product,
        methods=["POST"], strict_slashes=False,
    )
    app.add_url_rule(
        "/products/<product_id>", "get_product", handler.get_product, methods=["GET"]
    )
    app.add_url_rule(
        "/products/<product_id>", "update_product", handler.update_product, methods=["PUT"]
    )
    app.add_url_rule(
        "/products/<product_id>", "delete_product", handler.delete_product,
        methods=["DELETE"],
    )


def create_app(service: ProductService) -> Flask:
    """Build the web application serving ``service``."""
    app = Flask(__name__)
    register_product_routes(app, ProductHandler(service))
    return app