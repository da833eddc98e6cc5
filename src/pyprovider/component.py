"""Component provider base.

:class:`ComponentProvider` is the part of the provider that assembles
component resources from their children and describes them in the package
schema. Component constructors are registered up front as
:class:`ComponentDefinition` entries; the schema's ``resources`` section is
discovered from that registry.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pyprovider.exceptions import UnknownResourceTypeError
from pyprovider.models.results import ConstructResult
from pyprovider.models.schema import PackageSpec, ResourceSpec

_logger = logging.getLogger(__name__)

ComponentConstructor = Callable[[str, dict[str, Any], dict[str, Any]], Awaitable[ConstructResult]]
"""``(name, inputs, options) -> ConstructResult``"""


@dataclass(frozen=True, slots=True)
class ComponentDefinition:
    """A component type the provider can construct."""

    token: str
    constructor: ComponentConstructor
    description: str | None = None

    def resource_spec(self) -> ResourceSpec:
        return ResourceSpec(is_component=True, type="object", description=self.description)


class ComponentProvider:
    """Constructs registered components and discovers the package schema."""

    def __init__(
        self,
        name: str,
        *,
        namespace: str | None = None,
        version: str = "0.0.0",
        components: Iterable[ComponentDefinition] = (),
    ) -> None:
        self.name = name
        self.namespace = namespace
        self.version = version
        self._components: dict[str, ComponentDefinition] = {c.token: c for c in components}

    @property
    def component_tokens(self) -> list[str]:
        return sorted(self._components)

    def package_spec(self) -> PackageSpec:
        return PackageSpec(
            name=self.name,
            namespace=self.namespace,
            version=self.version,
            resources={token: c.resource_spec() for token, c in self._components.items()},
        )

    async def get_schema(self) -> str:
        """Serialized package schema covering every registered component."""
        return json.dumps(self.package_spec().to_wire())

    async def construct(
        self,
        name: str,
        type: str,
        inputs: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> ConstructResult:
        component = self._components.get(type)
        if component is None:
            raise UnknownResourceTypeError(f"unknown component type {type}", resource_type=type)
        _logger.debug("Constructing component %s (%s)", name, type)
        return await component.constructor(name, inputs, options or {})
