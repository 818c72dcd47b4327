"""Minimal FastAPI service demonstrating generated OpenAPI documentation."""

__version__ = "0.1.0"
