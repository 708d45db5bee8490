"""Request and response bodies of the product API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass

from .errors import FieldError

_FIELD_TYPES = {"name": str, "description": str, "price": (int, float)}


@dataclass
class ProductRequest:
    """Body of a create or update request."""

    name: str = ""
    description: str = ""
    price: float = 0.0

    @classmethod
    def from_json(cls, data) -> ProductRequest:
        """Build a request from JSON text or a parsed object; raise ValueError on a bad shape."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        if not isinstance(data, Mapping):
            raise ValueError("cannot unmarshal into a product request")
        values = {}
        for raw_key, value in data.items():
            key = str(raw_key).lower()
            if value is None or key not in _FIELD_TYPES:
                continue
            if isinstance(value, bool) or not isinstance(value, _FIELD_TYPES[key]):
                raise ValueError(f"cannot unmarshal value into field {key}")
            values[key] = float(value) if key == "price" else value
        return cls(**values)

    def validate(self) -> list[FieldError]:
        """Return the failed field checks; an empty list means valid."""
        failures = [
            FieldError(field, "required", "", f"ProductRequest.{field}")
            for field, value in (("Name", self.name), ("Description", self.description))
            if not value
        ]
        if self.price == 0:
            failures.append(FieldError("Price", "required", "", "ProductRequest.Price"))
        elif not self.price > 0:
            failures.append(FieldError("Price", "gt", "0", "ProductRequest.Price"))
        return failures


@dataclass
class ProductResponse:
    """A product as returned to the client."""

    id: int = 0
    name: str = ""
    description: str = ""
    price: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)