"""Schema contribution of the built-in state store resource."""

from __future__ import annotations

import copy
from typing import Any

from pyprovider.models.schema import PropertySpec, ResourceSpec

STATE_STORE_DESCRIPTION = "A state store resource"


def _string_map() -> PropertySpec:
    return PropertySpec(type="object", additional_properties=PropertySpec(type="string"))


def state_store_resource_spec() -> ResourceSpec:
    """Describe the state store: ``values`` in and out, plus a plain ``updateOnRefresh`` flag."""
    return ResourceSpec(
        is_component=False,
        type="object",
        description=STATE_STORE_DESCRIPTION,
        properties={"values": _string_map()},
        input_properties={
            "updateOnRefresh": PropertySpec(type="boolean", plain=True),
            "values": _string_map(),
        },
        required=["values"],
        required_inputs=["values"],
    )


def merge_state_store_schema(base: dict[str, Any], token: str) -> dict[str, Any]:
    """Return a copy of *base* with the state store resource registered under *token*.

    *base* is left untouched. A missing ``resources`` section is created.
    """
    merged = copy.deepcopy(base)
    resources = merged.get("resources")
    if not isinstance(resources, dict):
        resources = {}
        merged["resources"] = resources
    resources[token] = state_store_resource_spec().to_wire()
    return merged
