"""Exceptions raised while building a transmission message."""

from __future__ import annotations


class MessageError(Exception):
    """Base class for every error raised by :mod:`sparkpost_mail`."""


class UnsupportedOperationError(MessageError, NotImplementedError):
    """The transmission format cannot express the requested feature."""


class InvalidArgumentError(MessageError, ValueError):
    """An address or content argument was rejected."""


class AttachmentReadError(MessageError, OSError):
    """An attachment or embedded file could not be read."""
