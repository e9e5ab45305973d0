"""
Error kinds raised by the bot core.

Adapters map these to HTTP statuses; nothing in the core swallows them.
"""

from __future__ import annotations


class BotError(Exception):
    """Base class for every failure the core reports upward."""


class MalformedPayload(BotError):
    """Inbound webhook body is not a usable GroupMe message."""


class ConfigurationError(BotError):
    pass


class DeliveryError(BotError):
    pass


class MissingCredential(ConfigurationError, DeliveryError):
    """Bot id is empty or unset; raised before any network call."""


class MissingDestination(ConfigurationError):
    """No group id configured for scheduled sends."""


class EncodingError(DeliveryError):
    pass


class TransportError(DeliveryError):
    """DNS, connection or timeout failure talking to GroupMe."""


class UnexpectedStatus(DeliveryError):
    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(f"GroupMe API returned status: {status}")
        self.status = status
        self.body = body


def http_status(err: BotError) -> int:
    """Status code a host adapter should answer with for `err`."""
    return 400 if isinstance(err, MalformedPayload) else 500
