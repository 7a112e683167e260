"""Resource serializers for JSON:API."""

from .base import ResourceSerializer

__all__ = ["ResourceSerializer"]
