"""MySQL connection set-up from configuration."""

from __future__ import annotations

import pymysql
import pymysql.cursors

from .config import Config


def connection_params(config: Config) -> dict:
    """Return MySQL connection keyword arguments from the ``db.*`` settings."""
    params = {
        name: str(config.get(f"db.{name}", ""))
        for name in ("user", "password", "host", "port", "database")
    }
    params["port"] = int(params["port"]) if params["port"] else 3306
    return params


def connect(config: Config):
    """Open a MySQL connection that returns rows as dictionaries."""
    return pymysql.connect(
        **connection_params(config),
        cursorclass=pymysql.cursors.DictCursor,
        autocommit=True,
    )