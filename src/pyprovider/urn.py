"""Resource URN decoding.

Each resource URN is of the form::

    urn:pulumi:<Stack>::<Project>::<Qualified$Type$Name>::<Name>

e.g. ``urn:pulumi:dev::simple::res:index:MyComponent$res:index:MyResource::example``

* ``<Stack>`` is the stack being deployed into.
* ``<Project>`` is the project being evaluated.
* ``<Qualified$Type$Name>`` is the resource type token, prefixed by the
  type tokens of its enclosing components.
* ``<Name>`` is the name assigned by the developer or provider.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pyprovider.exceptions import MalformedUrnError

_SEGMENT_SEPARATOR = "::"
_TYPE_SEPARATOR = "$"
_URN_PREFIX = "urn:pulumi"


class Urn(BaseModel):
    """A decoded resource URN."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    stack: str
    project: str
    type: str
    name: str
    qualified_types: tuple[str, ...]
    qualifier: str | None = None
    """Segment 1 as received, e.g. ``urn:pulumi:dev``."""

    @classmethod
    def parse(cls, urn: str) -> Urn:
        """Decode *urn*.

        Raises
        ------
        MalformedUrnError
            If *urn* does not have exactly four ``::`` segments, or if the
            stack, project or type resolve to an empty string.
        """
        parts = urn.split(_SEGMENT_SEPARATOR)
        if len(parts) != 4:
            raise MalformedUrnError(f"Invalid URN: {urn}", urn=urn)

        qualifier, project, qualified_type, name = parts
        type_parts = qualified_type.split(_TYPE_SEPARATOR)
        resource_type = type_parts[-1]

        qualifier_parts = qualifier.split(":")
        stack = qualifier_parts[2] if len(qualifier_parts) > 2 else ""
        if not stack or not project or not resource_type:
            raise MalformedUrnError(f"Invalid URN: {urn}", urn=urn)

        return cls(
            stack=stack,
            project=project,
            type=resource_type,
            name=name,
            qualified_types=tuple(type_parts),
            qualifier=qualifier,
        )

    @property
    def parent_type(self) -> str | None:
        """Type token of the enclosing component, if any."""
        if len(self.qualified_types) < 2:
            return None
        return self.qualified_types[-2]

    def format(self) -> str:
        """Rebuild the URN string.

        A parsed URN keeps its own scheme and subsystem; one built directly
        from fields uses ``urn:pulumi``.
        """
        return _SEGMENT_SEPARATOR.join(
            (
                self.qualifier or f"{_URN_PREFIX}:{self.stack}",
                self.project,
                _TYPE_SEPARATOR.join(self.qualified_types),
                self.name,
            )
        )

    def __str__(self) -> str:
        return self.format()


def parse_urn(urn: str) -> Urn:
    """Shorthand for :meth:`Urn.parse`."""
    return Urn.parse(urn)
