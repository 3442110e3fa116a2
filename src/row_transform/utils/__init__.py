"""Shared utilities: logging, text coercion and value-format providers."""
