"""Shared helpers: logging setup and bundled resource access."""
