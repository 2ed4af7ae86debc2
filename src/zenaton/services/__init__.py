"""Collaborators the client talks through: HTTP transport and payload serializer."""

from .http import HttpTransport, get_http
from .serializer import Serializer, get_serializer

__all__ = [
    "HttpTransport",
    "get_http",
    "Serializer",
    "get_serializer",
]
