"""Custom exception hierarchy for pyprovider."""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for all pyprovider errors."""


class ProviderConfigError(ProviderError):
    """Invalid or missing provider configuration."""


class MalformedUrnError(ProviderError, ValueError):
    """A resource URN could not be decoded."""

    def __init__(self, message: str, *, urn: str = "") -> None:
        self.urn = urn
        super().__init__(message)


class UnknownResourceTypeError(ProviderError, LookupError):
    """No handler is registered for the resource type named by a URN.

    Also raised when a handler is registered but cannot create the
    resource, so the engine sees a single not-found style rejection.
    """

    def __init__(
        self,
        message: str,
        *,
        urn: str = "",
        resource_type: str = "",
    ) -> None:
        self.urn = urn
        self.resource_type = resource_type
        super().__init__(message)


class UnsupportedOperationError(ProviderError):
    """Function-style ``invoke``/``call`` requests are always rejected."""

    def __init__(self, message: str, *, token: str = "", operation: str = "") -> None:
        self.token = token
        self.operation = operation
        super().__init__(message)


class ImportNotSupportedError(ProviderError):
    """A read was requested for a resource with no prior state.

    The state store can only refresh resources it already tracks;
    importing an existing resource is rejected.
    """

    def __init__(self, message: str, *, urn: str = "") -> None:
        self.urn = urn
        super().__init__(message)


class FingerprintError(ProviderError, ValueError):
    """A fingerprint was requested for a falsy or empty value."""
