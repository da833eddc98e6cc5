"""Provider that routes resource lifecycle calls to per-type handlers."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pyprovider._redact import redact_for_log
from pyprovider.component import ComponentDefinition, ComponentProvider
from pyprovider.exceptions import UnknownResourceTypeError, UnsupportedOperationError
from pyprovider.handler import Operation, ResourceHandler
from pyprovider.models.results import (
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    UpdateResult,
)
from pyprovider.schema import merge_state_store_schema
from pyprovider.state_store import state_provider_factory, state_store_token
from pyprovider.urn import Urn

_logger = logging.getLogger(__name__)

HandlerFactory = Callable[[], ResourceHandler]

ProviderFactory = Mapping[str, HandlerFactory]
"""Resource type token -> handler factory.

A factory may return a new handler on every call or the same one each
time; the provider never caches handlers itself.
"""


class Provider(ComponentProvider):
    """Routes each lifecycle call to the handler registered for the URN's type.

    The state store handler is always registered under
    ``<name>:index:StateStoreResource``. The registry is fixed once the
    provider is constructed.

    Usage::

        provider = Provider("my-pkg", factories={"my-pkg:index:Thing": ThingHandler})
        result = await provider.create(urn, inputs)
    """

    def __init__(
        self,
        name: str,
        factories: ProviderFactory | None = None,
        *,
        namespace: str | None = None,
        version: str = "0.0.0",
        components: Iterable[ComponentDefinition] = (),
    ) -> None:
        super().__init__(name, namespace=namespace, version=version, components=components)
        self.state_store_token = state_store_token(name)
        registry: dict[str, HandlerFactory] = dict(factories or {})
        registry[self.state_store_token] = state_provider_factory
        self._factories: Mapping[str, HandlerFactory] = registry

    @property
    def resource_types(self) -> list[str]:
        return sorted(self._factories)

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    async def get_schema(self) -> str:
        base = json.loads(await super().get_schema())
        return json.dumps(merge_state_store_schema(base, self.state_store_token))

    # ------------------------------------------------------------------
    # Function-style operations
    # ------------------------------------------------------------------

    async def invoke(self, token: str, inputs: dict[str, Any]) -> Any:
        raise UnsupportedOperationError(
            f"function invocations not supported: {token}",
            token=token,
            operation="invoke",
        )

    async def call(self, token: str, inputs: dict[str, Any]) -> Any:
        raise UnsupportedOperationError(
            f"resource methods not supported {token}",
            token=token,
            operation="call",
        )

    # ------------------------------------------------------------------
    # Resource lifecycle
    # ------------------------------------------------------------------

    async def check(self, urn: str, olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        handler = self._require_handler(urn, Operation.CHECK)
        if not handler.supports(Operation.CHECK):
            return CheckResult(inputs=news, failures=[])
        return await handler.check(urn, olds, news)

    async def diff(
        self,
        id: str,
        urn: str,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> DiffResult:
        handler = self._require_handler(urn, Operation.DIFF)
        if not handler.supports(Operation.DIFF):
            return DiffResult(changes=False)
        return await handler.diff(id, urn, olds, news)

    async def create(self, urn: str, inputs: dict[str, Any]) -> CreateResult:
        handler = self._require_handler(urn, Operation.CREATE)
        if not handler.supports(Operation.CREATE):
            raise self._unknown(urn)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("create inputs for %s: %s", urn, redact_for_log(inputs))
        return await handler.create(urn, inputs)

    async def read(self, id: str, urn: str, props: dict[str, Any] | None = None) -> ReadResult:
        handler = self._require_handler(urn, Operation.READ)
        if not handler.supports(Operation.READ):
            return ReadResult(id=id, props=props)
        return await handler.read(id, urn, props)

    async def update(
        self,
        id: str,
        urn: str,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> UpdateResult:
        handler = self._require_handler(urn, Operation.UPDATE)
        if not handler.supports(Operation.UPDATE):
            return UpdateResult(outs=news)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "update %s: olds=%s news=%s",
                urn,
                redact_for_log(olds),
                redact_for_log(news),
            )
        return await handler.update(id, urn, olds, news)

    async def delete(self, id: str, urn: str, props: dict[str, Any]) -> None:
        handler = self._require_handler(urn, Operation.DELETE)
        if handler.supports(Operation.DELETE):
            await handler.delete(id, urn, props)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def handler_for_type(self, resource_type: str) -> ResourceHandler | None:
        """Return a handler for *resource_type*, or ``None`` if none is registered."""
        factory = self._factories.get(resource_type)
        return factory() if factory is not None else None

    def _require_handler(self, urn: str, operation: Operation) -> ResourceHandler:
        resource_type = Urn.parse(urn).type
        handler = self.handler_for_type(resource_type)
        if handler is None:
            raise self._unknown(urn, resource_type)
        _logger.debug("%s %s (%s)", operation.value, urn, resource_type)
        return handler

    @staticmethod
    def _unknown(urn: str, resource_type: str = "") -> UnknownResourceTypeError:
        _logger.debug("Rejecting %s: no handler for resource type", urn)
        return UnknownResourceTypeError(
            f"unknown resource type {urn}",
            urn=urn,
            resource_type=resource_type or Urn.parse(urn).type,
        )
