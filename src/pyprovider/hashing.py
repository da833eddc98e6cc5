"""Deterministic fingerprints for cache keys.

Digests match the ones produced by the Node.js component utilities for
the same input, so fingerprints stay stable across provider rewrites.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from pyprovider.exceptions import FingerprintError


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def md5_hash(value: str) -> str:
    """MD5 of the JSON-quoted *value*, as lowercase hex.

    Parameters
    ----------
    value : str
        The string to hash. It is JSON-encoded (quoted and escaped)
        before hashing.

    Returns
    -------
    str
        32-character lowercase hex digest.
    """
    return hashlib.md5(_to_json(value).encode("utf-8")).hexdigest()


def md5_hash_object(obj: Any) -> str:
    """Fingerprint a structured value.

    The value is serialized to compact JSON (keys in insertion order) and
    the result passed to :func:`md5_hash`.

    Raises
    ------
    FingerprintError
        If *obj* is falsy or an empty mapping or sequence.
    """
    if not obj:
        raise FingerprintError("Cannot compute md5 hash for falsy object")
    return md5_hash(_to_json(obj))
