"""Error taxonomy shared by every layer of the dispatch service."""

from __future__ import annotations


class PushDispatchError(Exception):
    """Base class for errors raised by the dispatch core."""


class ValidationError(PushDispatchError):
    """Malformed or missing input, rejected before any work starts."""


class NotFoundError(PushDispatchError):
    """A selector resolved to no targets or a referenced record is absent."""


class ChannelFailure(PushDispatchError):
    """The delivery channel could not be reached or rejected the whole call."""


class ChannelConfigurationError(PushDispatchError):
    """The delivery channel cannot be built from the current settings."""


class PersistenceError(PushDispatchError):
    """A read or write against the persistent store failed."""


__all__ = [
    "ChannelConfigurationError",
    "ChannelFailure",
    "NotFoundError",
    "PersistenceError",
    "PushDispatchError",
    "ValidationError",
]
