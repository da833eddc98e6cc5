"""pyprovider - resource provider routing and a built-in state store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyprovider")
except PackageNotFoundError:
    __version__ = "0+local"
from pyprovider.compare import deep_equal
from pyprovider.component import ComponentDefinition, ComponentProvider
from pyprovider.config import ProviderConfig
from pyprovider.exceptions import (
    FingerprintError,
    ImportNotSupportedError,
    MalformedUrnError,
    ProviderConfigError,
    ProviderError,
    UnknownResourceTypeError,
    UnsupportedOperationError,
)
from pyprovider.handler import Operation, ResourceHandler
from pyprovider.hashing import md5_hash, md5_hash_object
from pyprovider.host import component_provider_host
from pyprovider.models import (
    CheckFailure,
    CheckResult,
    ConstructResult,
    CreateResult,
    DiffResult,
    ReadResult,
    StateStoreArgs,
    StateStoreProperties,
    UpdateResult,
)
from pyprovider.provider import Provider, ProviderFactory
from pyprovider.state_store import StateStoreHandler, state_provider_factory, state_store_token
from pyprovider.urn import Urn, parse_urn

__all__ = [
    "__version__",
    "CheckFailure",
    "CheckResult",
    "ComponentDefinition",
    "ComponentProvider",
    "ConstructResult",
    "CreateResult",
    "DiffResult",
    "FingerprintError",
    "ImportNotSupportedError",
    "MalformedUrnError",
    "Operation",
    "Provider",
    "ProviderConfig",
    "ProviderConfigError",
    "ProviderError",
    "ProviderFactory",
    "ReadResult",
    "ResourceHandler",
    "StateStoreArgs",
    "StateStoreHandler",
    "StateStoreProperties",
    "UnknownResourceTypeError",
    "UnsupportedOperationError",
    "UpdateResult",
    "Urn",
    "component_provider_host",
    "deep_equal",
    "md5_hash",
    "md5_hash_object",
    "parse_urn",
    "state_provider_factory",
    "state_store_token",
]
