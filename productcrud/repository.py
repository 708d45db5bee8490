"""Storage of products."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from .entities import Product


class RecordNotFoundError(LookupError):
    """No row matched the query."""


class ProductRepository(ABC):
    """Where products are kept."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product:
        """Return one product; raise RecordNotFoundError if absent."""

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Store a new product and return it with its assigned id."""

    @abstractmethod
    def update_by_id(self, product_id: int, product: Product) -> Product:
        """Overwrite a product and return it as stored."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove a product."""


def _to_product(row: Mapping) -> Product:
    return Product(
        id=int(row["id"]),
        name=row["name"],
        description=row["description"],
        price=float(row["price"]),
    )


class MySQLProductRepository(ProductRepository):
    """Products in a ``products`` table, through a connection returning dict rows."""

    def __init__(self, connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    @contextmanager
    def _cursor(self) -> Iterator:
        with self._lock, self._connection.cursor() as cursor:
            yield cursor

    def find_all(self) -> list[Product]:
        with self._cursor() as cursor:
            cursor.execute("select * from products")
            return [_to_product(row) for row in cursor.fetchall()]

    def find_by_id(self, product_id: int) -> Product:
        with self._cursor() as cursor:
            cursor.execute("select * from products where id = %s", (product_id,))
            row = cursor.fetchone()
        if row is None:
            raise RecordNotFoundError(f"no product with id {product_id}")
        return _to_product(row)

    def insert(self, product: Product) -> Product:
        with self._cursor() as cursor:
            cursor.execute(
                "insert into products (name, description, price) values (%s,%s,%s)",
                (product.name, product.description, product.price),
            )
            new_id = cursor.lastrowid
        return Product(
            id=int(new_id),
            name=product.name,
            description=product.description,
            price=product.price,
        )

    def update_by_id(self, product_id: int, product: Product) -> Product:
        with self._cursor() as cursor:
            cursor.execute(
                "update products set name = %s, description = %s, price = %s where id = %s",
                (product.name, product.description, product.price, product_id),
            )
        return Product(
            id=product_id,
            name=product.name,
            description=product.description,
            price=product.price,
        )

    def delete_by_id(self, product_id: int) -> None:
        with self._cursor() as cursor:
            cursor.execute("delete from products where id = %s", (product_id,))