"""A JSON HTTP API for storing and managing cooking recipes."""

__version__ = "0.1.0"