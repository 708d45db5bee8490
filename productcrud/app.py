"""Entry point: logging, configuration, database and the web server."""

from __future__ import annotations

import argparse
import logging
import sys

from flask import Flask

from .config import Config, load_config
from .database import connect
from .repository import MySQLProductRepository
from .service import ProductService
from .web import create_app

_COLORS = {logging.DEBUG: 35, logging.INFO: 34, logging.WARNING: 33}


class _ConsoleFormatter(logging.Formatter):
    """Tab-separated lines with ISO 8601 times and coloured level names."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s\t%(colored_level)s\t%(filename)s:%(lineno)d\t%(message)s",
            "%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record):
        color = _COLORS.get(record.levelno, 31)
        record.colored_level = f"\x1b[{color}m{record.levelname}\x1b[0m"
        return super().format(record)


def configure_logging() -> logging.Logger:
    """Send INFO and above to standard error in console format."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, _ConsoleFormatter):
            root.removeHandler(existing)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ConsoleFormatter())
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    return root


def build_app(config: Config) -> Flask:
    """Connect to the database and assemble the web application."""
    return create_app(ProductService(MySQLProductRepository(connect(config))))


def main(argv=None) -> None:
    argparse.ArgumentParser(prog="productcrud", description="Product CRUD server.").parse_args(argv)
    configure_logging()
    config = load_config()
    app = build_app(config)
    port = config.get("server.port")
    app.run(host="0.0.0.0", port=int(port) if port else 0)