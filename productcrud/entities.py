"""Stored records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """A row of the products table."""

    id: int = 0
    name: str = ""
    description: str = ""
    price: float = 0.0