"""HTTP layer: app factory, routers, payload models and auth dependencies."""

from jobly_backend.api.app import create_api

__all__ = ["create_api"]
