import sqlite3

import pytest

from productcrud.entities import Product
from productcrud.repository import (
    MySQLProductRepository,
    ProductRepository,
    RecordNotFoundError,
)


class _Cursor:
    def __init__(self, conn):
        self._cur = conn.cursor()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._cur.close()

    def execute(self, query, params=()):
        self._cur.execute(query.replace("%s", "?"), tuple(params))
        return self._cur.rowcount

    def _row(self, row):
        names = [d[0] for d in self._cur.description]
        return dict(zip(names, row))

    def fetchall(self):
        return [self._row(r) for r in self._cur.fetchall()]

    def fetchone(self):
        row = self._cur.fetchone()
        return None if row is None else self._row(row)

    @property
    def lastrowid(self):
        return self._cur.lastrowid


class _Connection:
    def __init__(self):
        self.raw = sqlite3.connect(":memory:", isolation_level=None)
        self.raw.execute(
            "create table products (id integer primary key autoincrement,"
            " name text, description text, price real)"
        )

    def cursor(self):
        return _Cursor(self.raw)


@pytest.fixture
def repo():
    return MySQLProductRepository(_Connection())


def test_is_a_product_repository(repo):
    assert isinstance(repo, ProductRepository)
    with pytest.raises(TypeError):
        ProductRepository()


def test_find_all_empty(repo):
    assert repo.find_all() == []


def test_insert_assigns_id_and_round_trips(repo):
    stored = repo.insert(Product(name="pen", description="blue", price=1.5))
    assert stored == Product(id=1, name="pen", description="blue", price=1.5)
    assert repo.find_by_id(stored.id) == stored


def test_find_all_returns_inserted(repo):
    first = repo.insert(Product(name="a", description="x", price=1.0))
    second = repo.insert(Product(name="b", description="y", price=2.0))
    assert repo.find_all() == [first, second]


def test_find_by_id_missing_raises(repo):
    with pytest.raises(RecordNotFoundError):
        repo.find_by_id(42)


def test_update_by_id(repo):
    stored = repo.insert(Product(name="pen", description="blue", price=1.5))
    updated = repo.update_by_id(
        stored.id, Product(name="pencil", description="grey", price=0.5)
    )
    assert updated == Product(id=stored.id, name="pencil", description="grey", price=0.5)
    assert repo.find_by_id(stored.id) == updated


def test_update_missing_returns_product_without_error(repo):
    updated = repo.update_by_id(9, Product(name="pen", description="blue", price=1.0))
    assert updated.id == 9
    assert repo.find_all() == []


def test_delete_by_id(repo):
    keep = repo.insert(Product(name="a", description="x", price=1.0))
    gone = repo.insert(Product(name="b", description="y", price=2.0))
    repo.delete_by_id(gone.id)
    assert repo.find_all() == [keep]
    with pytest.raises(RecordNotFoundError):
        repo.find_by_id(gone.id)


def test_delete_missing_is_silent(repo):
    stored = repo.insert(Product(name="a", description="x", price=1.0))
    repo.delete_by_id(stored.id + 100)
    assert repo.find_all() == [stored]