from __future__ import annotations

import json
from typing import Any

import pytest

from pyprovider.exceptions import (
    ImportNotSupportedError,
    MalformedUrnError,
    UnknownResourceTypeError,
    UnsupportedOperationError,
)
from pyprovider.handler import ResourceHandler
from pyprovider.models.results import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    UpdateResult,
)
from pyprovider.provider import Provider

STORE_URN = "urn:pulumi:dev::proj::acme:index:StateStore$acme:index:StateStoreResource::store"
FULL_URN = "urn:pulumi:dev::proj::acme:index:Full::thing"
BARE_URN = "urn:pulumi:dev::proj::acme:index:Bare::thing"
UNKNOWN_URN = "urn:pulumi:dev::proj::acme:index:Missing::thing"


class _BareHandler(ResourceHandler):
    """Implements nothing."""


class _CreateOnlyHandler(ResourceHandler):
    async def create(self, urn: str, inputs: dict[str, Any]) -> CreateResult:
        return CreateResult(id="bare-id", outs=inputs)


class _FullHandler(ResourceHandler):
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def check(self, urn: str, olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        self.calls.append(("check", (urn, olds, news)))
        return CheckResult(inputs=news, failures=[CheckFailure(property="size", reason="too big")])

    async def diff(self, id: str, urn: str, olds: dict[str, Any], news: dict[str, Any]) -> DiffResult:
        self.calls.append(("diff", (id, urn, olds, news)))
        return DiffResult(changes=True, replaces=["size"])

    async def create(self, urn: str, inputs: dict[str, Any]) -> CreateResult:
        self.calls.append(("create", (urn, inputs)))
        return CreateResult(id="full-id", outs={"created": True})

    async def read(self, id: str, urn: str, props: dict[str, Any] | None = None) -> ReadResult:
        self.calls.append(("read", (id, urn, props)))
        return ReadResult(id=id, props={"read": True})

    async def update(self, id: str, urn: str, olds: dict[str, Any], news: dict[str, Any]) -> UpdateResult:
        self.calls.append(("update", (id, urn, olds, news)))
        return UpdateResult(outs={"updated": True})

    async def delete(self, id: str, urn: str, props: dict[str, Any]) -> None:
        self.calls.append(("delete", (id, urn, props)))


class _FailingHandler(ResourceHandler):
    async def create(self, urn: str, inputs: dict[str, Any]) -> CreateResult:
        raise RuntimeError("boom")


@pytest.fixture
def full_handler() -> _FullHandler:
    return _FullHandler()


@pytest.fixture
def provider(full_handler: _FullHandler) -> Provider:
    return Provider(
        "acme",
        factories={
            "acme:index:Full": lambda: full_handler,
            "acme:index:Bare": _BareHandler,
            "acme:index:CreateOnly": _CreateOnlyHandler,
            "acme:index:Failing": _FailingHandler,
        },
    )


def test_state_store_is_always_registered() -> None:
    provider = Provider("acme")
    assert provider.state_store_token == "acme:index:StateStoreResource"
    assert provider.resource_types == ["acme:index:StateStoreResource"]


def test_seed_registry_is_not_mutated() -> None:
    factories = {"acme:index:Bare": _BareHandler}
    Provider("acme", factories=factories)
    assert list(factories) == ["acme:index:Bare"]


def test_factories_called_per_lookup(provider: Provider) -> None:
    assert provider.handler_for_type("acme:index:Bare") is not provider.handler_for_type("acme:index:Bare")
    assert provider.handler_for_type("acme:index:Missing") is None


# ------------------------------------------------------------------
# Unknown types
# ------------------------------------------------------------------


class TestUnknownType:
    @pytest.mark.asyncio
    async def test_check(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            await provider.check(UNKNOWN_URN, {}, {})
        assert exc_info.value.urn == UNKNOWN_URN
        assert exc_info.value.resource_type == "acme:index:Missing"

    @pytest.mark.asyncio
    async def test_diff(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError):
            await provider.diff("id", UNKNOWN_URN, {}, {})

    @pytest.mark.asyncio
    async def test_create(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError, match="unknown resource type"):
            await provider.create(UNKNOWN_URN, {})

    @pytest.mark.asyncio
    async def test_read(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError):
            await provider.read("id", UNKNOWN_URN, {})

    @pytest.mark.asyncio
    async def test_update(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError):
            await provider.update("id", UNKNOWN_URN, {}, {})

    @pytest.mark.asyncio
    async def test_delete(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError):
            await provider.delete("id", UNKNOWN_URN, {})


@pytest.mark.asyncio
async def test_malformed_urn_propagates(provider: Provider) -> None:
    with pytest.raises(MalformedUrnError):
        await provider.check("urn:pulumi:dev::proj", {}, {})


# ------------------------------------------------------------------
# Neutral defaults
# ------------------------------------------------------------------


class TestNeutralDefaults:
    @pytest.mark.asyncio
    async def test_check_returns_news(self, provider: Provider) -> None:
        result = await provider.check(BARE_URN, {"a": 1}, {"a": 2})
        assert result.inputs == {"a": 2}
        assert result.failures == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("olds", "news"),
        [({}, {}), ({"a": 1}, {"a": 2}), ({"values": {"x": "1"}}, {})],
    )
    async def test_diff_reports_no_changes(
        self,
        provider: Provider,
        olds: dict[str, Any],
        news: dict[str, Any],
    ) -> None:
        result = await provider.diff("id", BARE_URN, olds, news)
        assert result.changes is False

    @pytest.mark.asyncio
    async def test_read_echoes_props(self, provider: Provider) -> None:
        result = await provider.read("id-1", BARE_URN, {"a": 1})
        assert result.id == "id-1"
        assert result.props == {"a": 1}

    @pytest.mark.asyncio
    async def test_update_returns_news(self, provider: Provider) -> None:
        result = await provider.update("id", BARE_URN, {"a": 1}, {"a": 2})
        assert result.outs == {"a": 2}

    @pytest.mark.asyncio
    async def test_create_without_handler_support_is_rejected(self, provider: Provider) -> None:
        with pytest.raises(UnknownResourceTypeError):
            await provider.create(BARE_URN, {"a": 1})

    @pytest.mark.asyncio
    async def test_delete_without_handler_support_succeeds(self, provider: Provider) -> None:
        assert await provider.delete("id", BARE_URN, {"a": 1}) is None

    @pytest.mark.asyncio
    async def test_delete_with_handler_support_returns_nothing(
        self, provider: Provider, full_handler: _FullHandler
    ) -> None:
        assert await provider.delete("full-id", FULL_URN, {"a": 1}) is None
        assert full_handler.calls == [("delete", ("full-id", FULL_URN, {"a": 1}))]

    @pytest.mark.asyncio
    async def test_create_only_handler(self, provider: Provider) -> None:
        urn = "urn:pulumi:dev::proj::acme:index:CreateOnly::thing"
        result = await provider.create(urn, {"a": 1})
        assert result.id == "bare-id"
        assert (await provider.diff("bare-id", urn, {}, {"a": 2})).changes is False


# ------------------------------------------------------------------
# Pass-through
# ------------------------------------------------------------------


class TestPassThrough:
    @pytest.mark.asyncio
    async def test_every_operation_reaches_handler(self, provider: Provider, full_handler: _FullHandler) -> None:
        check = await provider.check(FULL_URN, {"o": 1}, {"n": 1})
        diff = await provider.diff("full-id", FULL_URN, {"o": 1}, {"n": 1})
        create = await provider.create(FULL_URN, {"n": 1})
        read = await provider.read("full-id", FULL_URN, {"o": 1})
        update = await provider.update("full-id", FULL_URN, {"o": 1}, {"n": 1})
        await provider.delete("full-id", FULL_URN, {"o": 1})

        assert check.failures == [CheckFailure(property="size", reason="too big")]
        assert diff.replaces == ["size"]
        assert create.outs == {"created": True}
        assert read.props == {"read": True}
        assert update.outs == {"updated": True}
        assert [name for name, _ in full_handler.calls] == [
            "check",
            "diff",
            "create",
            "read",
            "update",
            "delete",
        ]
        assert full_handler.calls[1][1] == ("full-id", FULL_URN, {"o": 1}, {"n": 1})

    @pytest.mark.asyncio
    async def test_handler_errors_propagate_unchanged(self, provider: Provider) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            await provider.create("urn:pulumi:dev::proj::acme:index:Failing::thing", {})


# ------------------------------------------------------------------
# State store through the router
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_state_store_refresh_cycle(provider: Provider) -> None:
    created = await provider.create(STORE_URN, {"values": {"a": "1"}, "updateOnRefresh": True})
    assert created.id == "store"
    assert created.outs == {"values": {"a": "1"}, "updateOnRefresh": True}

    refreshed = await provider.read(created.id, STORE_URN, created.outs)
    assert refreshed.props == {"values": {"a": "1"}, "shouldUpdate": True}

    news = {"values": {"a": "2"}, "updateOnRefresh": True}
    diff = await provider.diff(created.id, STORE_URN, refreshed.props or {}, news)
    assert diff.changes is True

    updated = await provider.update(created.id, STORE_URN, refreshed.props or {}, news)
    assert updated.outs == news


@pytest.mark.asyncio
async def test_state_store_import_rejected(provider: Provider) -> None:
    with pytest.raises(ImportNotSupportedError):
        await provider.read("store", STORE_URN, {})


# ------------------------------------------------------------------
# Function-style operations and schema
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_invoke_unsupported(provider: Provider) -> None:
    with pytest.raises(UnsupportedOperationError) as exc_info:
        await provider.invoke("acme:index:getThing", {})
    assert exc_info.value.token == "acme:index:getThing"
    assert exc_info.value.operation == "invoke"


@pytest.mark.asyncio
async def test_call_unsupported(provider: Provider) -> None:
    with pytest.raises(UnsupportedOperationError) as exc_info:
        await provider.call("acme:index:Thing/method", {})
    assert exc_info.value.operation == "call"


@pytest.mark.asyncio
async def test_schema_includes_state_store(provider: Provider) -> None:
    schema = json.loads(await provider.get_schema())

    assert schema["name"] == "acme"
    resource = schema["resources"]["acme:index:StateStoreResource"]
    assert resource["isComponent"] is False
    assert resource["requiredInputs"] == ["values"]
    assert resource["inputProperties"]["updateOnRefresh"] == {"type": "boolean", "plain": True}
    assert list(resource["properties"]) == ["values"]
