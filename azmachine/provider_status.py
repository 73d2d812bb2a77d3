"""Conversions between provider status/spec mappings and raw JSON extensions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class RawExtension:
    """Raw JSON bytes embedded in a resource."""

    raw: bytes | None = None


def provider_status_from_raw_extension(extension: RawExtension | None) -> dict[str, Any]:
    """Decode a raw extension into a provider status mapping.

    A missing extension yields an empty status; invalid JSON raises ValueError.
    """
    if extension is None:
        return {}
    if not extension.raw:
        raise ValueError("unexpected end of JSON input")
    status = json.loads(extension.raw)
    if not isinstance(status, dict):
        raise ValueError("provider status must be a JSON object")
    return status


def _to_extension(value: Mapping[str, Any] | None) -> RawExtension:
    if value is None:
        return RawExtension()
    return RawExtension(raw=json.dumps(dict(value), separators=(",", ":")).encode())


def raw_extension_from_provider_status(status: Mapping[str, Any] | None) -> RawExtension:
    """Encode a provider status mapping as a raw extension."""
    return _to_extension(status)


def raw_extension_from_provider_spec(spec: Mapping[str, Any] | None) -> RawExtension:
    """Encode a provider spec mapping as a raw extension."""
    return _to_extension(spec)