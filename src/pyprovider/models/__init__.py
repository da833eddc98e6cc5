"""Data models for engine payloads, results and schemas."""

from pyprovider.models._base import ProviderBaseModel
from pyprovider.models.results import (
    CheckFailure,
    CheckResult,
    ConstructResult,
    CreateResult,
    DiffResult,
    ReadResult,
    UpdateResult,
)
from pyprovider.models.schema import PackageSpec, PropertySpec, ResourceSpec
from pyprovider.models.state_store import StateStoreArgs, StateStoreProperties

__all__ = [
    "CheckFailure",
    "CheckResult",
    "ConstructResult",
    "CreateResult",
    "DiffResult",
    "PackageSpec",
    "PropertySpec",
    "ProviderBaseModel",
    "ReadResult",
    "ResourceSpec",
    "StateStoreArgs",
    "StateStoreProperties",
    "UpdateResult",
]
