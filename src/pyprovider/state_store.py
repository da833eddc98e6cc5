"""Built-in state store resource.

The state store keeps a map of values that stays stable across updates:
outputs are the values first given as inputs. Stored values are only
replaced when

* ``updateOnRefresh`` was set and a refresh has since run, or
* ``triggers`` are declared on either side and both the triggers and
  the values changed.

Otherwise new keys are added and existing keys keep their stored value.
"""

from __future__ import annotations

import logging
from typing import Any

from pyprovider.compare import deep_equal
from pyprovider.exceptions import ImportNotSupportedError
from pyprovider.handler import ResourceHandler
from pyprovider.models.results import CreateResult, DiffResult, ReadResult, UpdateResult
from pyprovider.models.state_store import StateStoreArgs, StateStoreProperties
from pyprovider.urn import Urn

_logger = logging.getLogger(__name__)

STATE_STORE_TYPE_NAME = "StateStoreResource"


def state_store_token(provider_name: str) -> str:
    """Resource type token of the state store for *provider_name*."""
    return f"{provider_name}:index:{STATE_STORE_TYPE_NAME}"


def merge_values(old: dict[str, Any] | None, new: dict[str, Any] | None) -> dict[str, Any]:
    """Add keys from *new* that *old* lacks; keys already in *old* keep their value."""
    merged = dict(old or {})
    for key, value in (new or {}).items():
        if key not in merged:
            merged[key] = value
    return merged


class StateStoreHandler(ResourceHandler):
    """Lifecycle handler for the state store resource.

    Stateless: everything threaded between calls (``shouldUpdate``) lives
    in the property bags the engine passes back in.
    """

    async def create(self, urn: str, inputs: dict[str, Any]) -> CreateResult:
        return CreateResult(id=Urn.parse(urn).name, outs=inputs)

    async def read(self, id: str, urn: str, props: dict[str, Any] | None = None) -> ReadResult:
        # Prior state is only present on refresh; an import has none.
        if not props:
            raise ImportNotSupportedError(f"Import is not supported for {urn} resource", urn=urn)

        prior = StateStoreProperties.model_validate(props)
        should_update = prior.refresh_requested
        _logger.debug("Refreshed state store %s (shouldUpdate=%s)", urn, should_update)
        return ReadResult(
            id=id,
            props={"values": props.get("values"), "shouldUpdate": should_update},
        )

    async def diff(
        self,
        id: str,
        urn: str,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> DiffResult:
        return DiffResult(changes=has_changes(olds, news))

    async def update(
        self,
        id: str,
        urn: str,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> UpdateResult:
        return UpdateResult(outs=reconcile(olds, news))

    async def delete(self, id: str, urn: str, props: dict[str, Any]) -> None:
        return None


def has_changes(olds: dict[str, Any], news: dict[str, Any]) -> bool:
    """Whether *news* should replace the stored values in *olds*."""
    old = StateStoreProperties.model_validate(olds)
    new = StateStoreArgs.model_validate(news)
    values_changed = not deep_equal(new.values, old.values)

    if old.pending_update and values_changed:
        return True

    if old.has_triggers or new.has_triggers:
        triggers_changed = not deep_equal(new.triggers, old.triggers)
        return triggers_changed and values_changed

    return False


def reconcile(olds: dict[str, Any], news: dict[str, Any]) -> dict[str, Any]:
    """Compute the new stored state.

    A pending refresh or declared triggers make the store fully replaceable,
    so *news* is returned as-is. Otherwise only the merged ``values`` are
    returned; ``triggers`` and ``updateOnRefresh`` are not carried over.
    """
    old = StateStoreProperties.model_validate(olds)
    new = StateStoreArgs.model_validate(news)

    if old.pending_update:
        return news

    if old.has_triggers or new.has_triggers:
        return news

    return {"values": merge_values(old.values, new.values)}


def state_provider_factory() -> StateStoreHandler:
    """Handler factory registered for the state store type."""
    return _STATE_STORE_HANDLER


_STATE_STORE_HANDLER = StateStoreHandler()
