"""Payload models for the state store resource."""

from __future__ import annotations

from typing import Any

from pyprovider.models._base import ProviderBaseModel


class StateStoreArgs(ProviderBaseModel):
    """Declared inputs of a state store resource.

    Parameters
    ----------
    values : dict or None
        The values to store.
    update_on_refresh : bool or None
        Whether a refresh should mark the stored values as out of date.
        Kept as received; only the boolean ``True`` enables it.
    triggers : dict or None
        Values whose change allows the stored values to be replaced.
        ``None`` means no triggers were declared, which is distinct from
        an empty mapping.
    """

    values: dict[str, Any] | None = None
    update_on_refresh: Any = None
    triggers: dict[str, Any] | None = None

    @property
    def refresh_requested(self) -> bool:
        return self.update_on_refresh is True

    @property
    def has_triggers(self) -> bool:
        return self.triggers is not None


class StateStoreProperties(StateStoreArgs):
    """Stored state of a state store resource.

    ``should_update`` is never declared by the caller; ``read`` computes it
    during a refresh and the following ``diff``/``update`` consume it.
    """

    should_update: Any = None

    @property
    def pending_update(self) -> bool:
        return self.should_update is True
