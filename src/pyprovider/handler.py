"""Resource handler interface.

A handler implements the lifecycle of exactly one resource type. Handlers
subclass :class:`ResourceHandler` and override only the operations they
support; the set of overridden operations is recorded on the class as
:attr:`ResourceHandler.operations` when the subclass is created. The
router consults that set instead of probing for attributes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pyprovider.models.results import (
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    UpdateResult,
)


class Operation(StrEnum):
    CHECK = "check"
    DIFF = "diff"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class ResourceHandler:
    """Base class for type-specific lifecycle handlers.

    The base methods are placeholders. Calling one that a subclass did not
    override raises :class:`NotImplementedError`; the router never does so
    because it checks :meth:`supports` first.
    """

    operations: ClassVar[frozenset[Operation]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.operations = frozenset(
            op for op in Operation if getattr(cls, op.value) is not getattr(ResourceHandler, op.value)
        )

    def supports(self, operation: Operation) -> bool:
        return operation in self.operations

    async def check(self, urn: str, olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        raise NotImplementedError(Operation.CHECK)

    async def diff(
        self,
        id: str,
        urn: str,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> DiffResult:
        raise NotImplementedError(Operation.DIFF)

    async def create(self, urn: str, inputs: dict[str, Any]) -> CreateResult:
        raise NotImplementedError(Operation.CREATE)

    async def read(self, id: str, urn: str, props: dict[str, Any] | None = None) -> ReadResult:
        raise NotImplementedError(Operation.READ)

    async def update(
        self,
        id: str,
        urn: str,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> UpdateResult:
        raise NotImplementedError(Operation.UPDATE)

    async def delete(self, id: str, urn: str, props: dict[str, Any]) -> None:
        raise NotImplementedError(Operation.DELETE)
