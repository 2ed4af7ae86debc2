"""Errors raised by the Zenaton client."""

from __future__ import annotations


class ZenatonError(Exception):
    """Base class for all Zenaton client errors."""


class InvalidArgumentError(ZenatonError):
    """A caller passed something the client cannot work with.

    Raised locally, before anything is sent over the wire.
    """


class ExternalZenatonError(ZenatonError):
    """A value violates what the Zenaton service accepts."""


__all__ = [
    "ZenatonError",
    "InvalidArgumentError",
    "ExternalZenatonError",
]
