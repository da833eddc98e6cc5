"""Result envelopes returned by lifecycle operations."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pyprovider.models._base import ProviderBaseModel


class CheckFailure(ProviderBaseModel):
    """A single input validation failure reported by ``check``."""

    property: str
    reason: str


class CheckResult(ProviderBaseModel):
    """Validated inputs plus any failures found while checking them."""

    inputs: dict[str, Any] = Field(default_factory=dict)
    failures: list[CheckFailure] = Field(default_factory=list)


class DiffResult(ProviderBaseModel):
    """Outcome of comparing old state with new inputs.

    ``changes`` is ``None`` when the handler could not tell; the router's
    neutral default always reports ``False``.
    """

    changes: bool | None = None
    replaces: list[str] = Field(default_factory=list)
    stables: list[str] = Field(default_factory=list)
    delete_before_replace: bool = False


class CreateResult(ProviderBaseModel):
    id: str
    outs: dict[str, Any] = Field(default_factory=dict)


class ReadResult(ProviderBaseModel):
    id: str | None = None
    props: dict[str, Any] | None = None
    inputs: dict[str, Any] | None = None


class UpdateResult(ProviderBaseModel):
    outs: dict[str, Any] = Field(default_factory=dict)


class ConstructResult(ProviderBaseModel):
    """URN and output state of a constructed component."""

    urn: str
    state: dict[str, Any] = Field(default_factory=dict)
