"""Provider process bootstrap.

The wire transport that talks to the orchestration engine is supplied by
the caller as ``serve``; this module only wires configuration, logging and
the provider together.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Awaitable, Callable, Iterable, Sequence

from pyprovider.component import ComponentDefinition
from pyprovider.config import ProviderConfig
from pyprovider.provider import Provider, ProviderFactory

_logger = logging.getLogger(__name__)

Serve = Callable[[Provider, Sequence[str]], Awaitable[None]]


def build_provider(
    config: ProviderConfig,
    factories: ProviderFactory | None = None,
    *,
    components: Iterable[ComponentDefinition] = (),
) -> Provider:
    return Provider(
        config.name,
        factories,
        namespace=config.namespace,
        version=config.version,
        components=components,
    )


async def component_provider_host(
    config: ProviderConfig,
    factories: ProviderFactory | None = None,
    *,
    serve: Serve,
    args: Sequence[str] | None = None,
    components: Iterable[ComponentDefinition] = (),
) -> None:
    """Build a :class:`Provider` from *config* and hand it to *serve*.

    *args* defaults to the process arguments after the program name.
    """
    logging.getLogger("pyprovider").setLevel(config.log_level.upper())

    provider = build_provider(config, factories, components=components)
    _logger.info(
        "Serving provider %s %s (%d resource types)",
        config.name,
        config.version,
        len(provider.resource_types),
    )
    await serve(provider, list(sys.argv[1:] if args is None else args))
