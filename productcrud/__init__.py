"""JSON HTTP service for managing products stored in MySQL."""

__version__ = "0.1.0"