"""Provider configuration for pyprovider."""

from __future__ import annotations

import dataclasses
import os
import re
from importlib.metadata import PackageNotFoundError, metadata
from typing import Any

from pyprovider.exceptions import ProviderConfigError
from pyprovider.state_store import state_store_token

# Optional "@scope/" prefix followed by the bare package name.
_PACKAGE_NAME_RE = re.compile(r"^(?:@(?P<namespace>[^/]+)/)?(?P<name>.+)$")

_ENV_CONFIG_MAP = {
    "PYPROVIDER_NAME": "name",
    "PYPROVIDER_NAMESPACE": "namespace",
    "PYPROVIDER_VERSION": "version",
    "PYPROVIDER_LOG_LEVEL": "log_level",
}


def split_package_name(package_name: str) -> tuple[str | None, str]:
    """Split an optionally scoped package name into ``(namespace, name)``.

    ``"@acme/widgets"`` yields ``("acme", "widgets")`` and ``"widgets"``
    yields ``(None, "widgets")``.
    """
    match = _PACKAGE_NAME_RE.match(package_name.strip())
    if match is None:
        raise ProviderConfigError(f"Invalid package name: {package_name!r}")
    return match.group("namespace"), match.group("name")


@dataclasses.dataclass(frozen=True)
class ProviderConfig:
    """Provider configuration.

    Parameters
    ----------
    name : str
        Provider (package) name. Prefixes every resource type token.
    namespace : str or None
        Package namespace, e.g. the npm scope or publisher.
    version : str
        Package version reported in the schema.
    log_level : str
        Level for the ``pyprovider`` logger hierarchy when hosted.
    """

    name: str
    namespace: str | None = None
    version: str = "0.0.0"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ProviderConfigError("Provider name must be non-empty")

    @property
    def state_store_token(self) -> str:
        return state_store_token(self.name)

    @classmethod
    def from_env(cls, **overrides: Any) -> ProviderConfig:
        """Create configuration from ``PYPROVIDER_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        ProviderConfigError
            If no provider name is set by either source.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)
        if "name" not in config_kwargs:
            raise ProviderConfigError("PYPROVIDER_NAME is not set and no name was given")
        return cls(**config_kwargs)

    @classmethod
    def from_package_name(cls, package_name: str, **overrides: Any) -> ProviderConfig:
        """Derive name and namespace from an optionally scoped package name.

        Explicit ``name``/``namespace`` overrides take precedence.
        """
        namespace, name = split_package_name(package_name)
        config_kwargs: dict[str, Any] = {"name": name, "namespace": namespace}
        config_kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**config_kwargs)

    @classmethod
    def from_distribution(cls, distribution: str, **overrides: Any) -> ProviderConfig:
        """Derive name and version from an installed distribution's metadata."""
        try:
            meta = metadata(distribution)
        except PackageNotFoundError as exc:
            raise ProviderConfigError(f"Distribution {distribution!r} is not installed") from exc
        overrides.setdefault("version", meta["Version"])
        return cls.from_package_name(meta["Name"], **overrides)
