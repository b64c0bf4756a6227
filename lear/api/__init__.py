"""HTTP API for the limerick service."""

from lear.api.server import create_app

__all__ = ["create_app"]
