"""
curlite - a small command-line HTTP client.

- core/: Configuration, logging, exceptions
- schemas/: Typed request models (RequestSpec, KeyValue)
- services/: Pure transforms (request building)
- cli/: Typer application, HTTP client, response rendering (Typer + Rich)
"""

__version__ = "0.1.0"
