# productcrud

A small JSON HTTP service that manages a catalogue of products kept in a
MySQL table. It serves create, read, update and delete endpoints under
`/products`, validates incoming data and answers errors with one consistent
JSON shape.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Database

The service works against an existing `products` table; it does not create
the table or the database. The table needs these columns:

| column        | type                          |
|---------------|-------------------------------|
| `id`          | integer, auto-increment, key  |
| `name`        | text                          |
| `description` | text                          |
| `price`       | floating point number         |

## Configuration

Settings are read from `config.yaml` (or, failing that, `config.yml`) in the
current working directory. If neither exists, the service stops with
`FileNotFoundError`; a file whose top level is not a mapping is rejected
with `ValueError`.

```yaml
server:
  port: 8080

db:
  user: user
  password: password
  host: localhost
  port: 3306
  database: shop
```

Keys are case-insensitive. Any key may be overridden by a non-empty
environment variable named after the key in upper case with dots replaced by
underscores, for example `SERVER_PORT`, `DB_HOST` or `DB_PASSWORD`. When
`db.port` is not set, 3306 is used.

## Running

```
productcrud
```

This reads the configuration, opens the MySQL connection and starts Flask's
built-in server on all interfaces at `server.port`. Log lines at INFO and
above go to standard error, tab-separated, with ISO 8601 timestamps and
coloured level names.

## Endpoints

| method   | path                  | success status | body on success                                       |
|----------|-----------------------|----------------|-------------------------------------------------------|
| `GET`    | `/products`           | 200            | list of products                                      |
| `GET`    | `/products/<id>`      | 200            | one product                                           |
| `POST`   | `/products`           | 201            | `{"message": "product created", "data": <product>}`   |
| `PUT`    | `/products/<id>`      | 200            | `{"message": "product updated", "data": <product>}`   |
| `DELETE` | `/products/<id>`      | 200            | `{"message": "product deleted"}`                      |

`/products` and `/products/` are both accepted. A product looks like this:

```json
{"id": 1, "name": "Lamp", "description": "Desk lamp", "price": 19.5}
```

`POST` and `PUT` take `name`, `description` and `price`, either as a JSON
body or as a URL-encoded or multipart form. Field names are matched without
regard to case, and unknown fields are ignored. All three fields are
required and `price` must be greater than zero.

`PUT` and `DELETE` do not check that the product exists: updating a missing
id answers 200 with the data sent, and deleting a missing id answers 200.

### Errors

Errors are returned as JSON with the HTTP status repeated in the body:

```json
{"status": 404, "message": "product not found"}
```

- `400` for an id that is not an integer, a body that cannot be parsed, or a
  body of any other content type.
- `404` when `GET /products/<id>` finds no such product.
- `422` when validation fails; the body then carries an `errors` list of
  `{"field": ..., "message": ...}` entries, e.g.
  `{"field": "Name", "message": "Name is required"}`.
- `500` for anything unexpected, including database failures (these are
  logged, and answered with `"unexpected error"`).

## Using it as a library

The pieces can be assembled by hand, which is handy for tests or for
plugging in another storage backend by subclassing
`productcrud.repository.ProductRepository`:

```python
from productcrud.repository import ProductRepository
from productcrud.service import ProductService
from productcrud.web import create_app

repository: ProductRepository = ...  # any implementation
app = create_app(ProductService(repository))
```

`productcrud.app.build_app(config)` does the same wiring against MySQL
(`productcrud.repository.MySQLProductRepository` over
`productcrud.database.connect`) from a `productcrud.config.Config`, which
`productcrud.config.load_config` reads.