"""Base model for engine-facing payloads.

Every envelope exchanged with the orchestration engine inherits from
:class:`ProviderBaseModel` which provides:

* ``alias_generator=to_camel`` so the engine's camelCase keys
  (``updateOnRefresh``, ``deleteBeforeReplace``) map onto
  snake_case fields.
* ``populate_by_name`` so Python callers can use either spelling.
* :meth:`ProviderBaseModel.to_wire` to dump back to the engine's shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProviderBaseModel(BaseModel):
    """Base for engine payload and result models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to a camelCase dict, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
