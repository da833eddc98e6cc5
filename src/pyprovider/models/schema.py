"""Package schema documents."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from pyprovider.models._base import ProviderBaseModel


class PropertySpec(ProviderBaseModel):
    type: str | None = None
    additional_properties: PropertySpec | None = None
    plain: bool | None = None
    description: str | None = None


class ResourceSpec(ProviderBaseModel):
    """Schema description of one resource type."""

    is_component: bool = False
    type: str = "object"
    description: str | None = None
    properties: dict[str, PropertySpec] = Field(default_factory=dict)
    input_properties: dict[str, PropertySpec] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    required_inputs: list[str] = Field(default_factory=list)


class PackageSpec(ProviderBaseModel):
    """Top-level package schema.

    Unknown sections produced by the discovery pass are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    namespace: str | None = None
    version: str | None = None
    resources: dict[str, ResourceSpec] = Field(default_factory=dict)

    def resource_tokens(self) -> list[str]:
        return sorted(self.resources)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> PackageSpec:
        return cls.model_validate(document)
