"""Background jobs that run alongside the API."""

from .expiration import ExpirationJob

__all__ = ["ExpirationJob"]
