"""Decoders for Neutron trunk JSON response bodies."""

from __future__ import annotations

import datetime
from typing import Any

from neutron_trunks.client.errors import TrunkParseError
from neutron_trunks.model.trunk import Subport, Trunk


def parse_trunk(body: Any) -> Trunk:
    """Decode a ``{"trunk": {...}}`` body.

    Args:
        body: Parsed JSON from a get/create/update/add_subports/remove_subports
            response.

    Returns:
        The decoded :class:`~neutron_trunks.model.trunk.Trunk`.

    Raises:
        TrunkParseError: If the envelope or a required field is missing or
            has the wrong type.
    """
    return trunk_from_dict(_envelope(body, "trunk", dict))


def parse_trunks(body: Any) -> list[Trunk]:
    """Decode a ``{"trunks": [...]}`` list page body."""
    return [trunk_from_dict(item) for item in _envelope(body, "trunks", list)]


def parse_subports(body: Any) -> list[Subport]:
    """Decode a ``{"sub_ports": [...]}`` body from ``get_subports``."""
    return [subport_from_dict(item) for item in _envelope(body, "sub_ports", list)]


def trunk_from_dict(data: Any) -> Trunk:
    """Build a :class:`Trunk` from the object nested under the envelope.

    ``id`` and ``port_id`` are required; every other field falls back to the
    model default when absent or ``null``.
    """
    if not isinstance(data, dict):
        raise TrunkParseError(f"Expected trunk object, got {type(data).__name__}")
    try:
        trunk_id = _require_str(data, "id")
        port_id = _require_str(data, "port_id")
        sub_ports = data.get("sub_ports") or []
        if not isinstance(sub_ports, list):
            raise TrunkParseError("Trunk field 'sub_ports' is not a list")
        return Trunk(
            id=trunk_id,
            port_id=port_id,
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            status=str(data.get("status") or ""),
            admin_state_up=bool(data.get("admin_state_up", False)),
            tenant_id=str(data.get("tenant_id") or ""),
            project_id=str(data.get("project_id") or ""),
            revision_number=int(data.get("revision_number") or 0),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            tags=[str(t) for t in data.get("tags") or []],
            subports=[subport_from_dict(sp) for sp in sub_ports],
        )
    except (TypeError, ValueError) as exc:
        raise TrunkParseError(f"Malformed trunk {data.get('id')!r}: {exc}") from exc


def subport_from_dict(data: Any) -> Subport:
    """Build a :class:`Subport`; all three fields are required."""
    if not isinstance(data, dict):
        raise TrunkParseError(f"Expected subport object, got {type(data).__name__}")
    if "segmentation_id" not in data:
        raise TrunkParseError("Subport is missing 'segmentation_id'")
    try:
        segmentation_id = int(data["segmentation_id"])
    except (TypeError, ValueError) as exc:
        raise TrunkParseError(
            f"Subport segmentation_id is not an integer: {data['segmentation_id']!r}"
        ) from exc
    return Subport(
        segmentation_id=segmentation_id,
        segmentation_type=_require_str(data, "segmentation_type"),
        port_id=_require_str(data, "port_id"),
    )


def _envelope(body: Any, key: str, kind: type) -> Any:
    if not isinstance(body, dict) or key not in body:
        raise TrunkParseError(f"Response body has no {key!r} key")
    value = body[key]
    if not isinstance(value, kind):
        raise TrunkParseError(f"Response {key!r} is not a {kind.__name__}")
    return value


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise TrunkParseError(f"Missing or invalid {key!r} in {data!r:.200}")
    return value


def _parse_timestamp(value: Any) -> datetime.datetime | None:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    if value in (None, ""):
        return None
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed
