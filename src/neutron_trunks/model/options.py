"""Request options for trunk operations.

Each class serializes itself into the exact JSON body (or query string) the
networking service expects.  Serialization validates first: a missing
required field raises :exc:`~neutron_trunks.client.errors.TrunkValidationError`
so that no request is ever sent with an incomplete payload.

Confirmed payloads::

    CREATE: POST /v2.0/trunks
        {"trunk": {"port_id": ..., "name": ..., "admin_state_up": ...,
                   "sub_ports": [{"port_id": ..., "segmentation_id": 1,
                                  "segmentation_type": "vlan"}]}}

    ADD SUBPORTS: PUT /v2.0/trunks/<id>/add_subports
        {"sub_ports": [{"port_id": ..., "segmentation_id": 1,
                        "segmentation_type": "vlan"}]}

    REMOVE SUBPORTS: PUT /v2.0/trunks/<id>/remove_subports
        {"sub_ports": [{"port_id": ...}]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from neutron_trunks.client.errors import TrunkValidationError
from neutron_trunks.model.trunk import RemoveSubport, Subport


@dataclass
class CreateOpts:
    """Options for creating a trunk.

    Attributes:
        port_id: UUID of the parent port (required).
        name: Trunk name; omitted when ``None``.
        description: Trunk description; omitted when ``None``.
        admin_state_up: ``True``/``False`` to set the administrative state,
            ``None`` to leave it to the service default.
        subports: Subports to attach at creation time.
        tenant_id: Owning tenant (admin only); omitted when ``None``.
        project_id: Owning project (admin only); omitted when ``None``.
    """

    port_id: str | None = None
    name: str | None = None
    description: str | None = None
    admin_state_up: bool | None = None
    subports: list[Subport] = field(default_factory=list)
    tenant_id: str | None = None
    project_id: str | None = None

    def to_body(self) -> dict[str, Any]:
        """Return the ``{"trunk": {...}}`` request body.

        Raises:
            TrunkValidationError: If ``port_id`` is missing or any subport
                is incomplete or repeats a port.
        """
        if not self.port_id:
            raise TrunkValidationError("port_id")
        trunk: dict[str, Any] = {"port_id": self.port_id}
        _put_optional(trunk, "name", self.name)
        _put_optional(trunk, "description", self.description)
        _put_optional(trunk, "admin_state_up", self.admin_state_up)
        _put_optional(trunk, "tenant_id", self.tenant_id)
        _put_optional(trunk, "project_id", self.project_id)
        trunk["sub_ports"] = _subports_to_list(self.subports)
        return {"trunk": trunk}


@dataclass
class UpdateOpts:
    """Partial update of a trunk: only non-``None`` fields are sent.

    An empty string is a real value (it clears the name/description).
    """

    name: str | None = None
    description: str | None = None
    admin_state_up: bool | None = None

    def to_body(self) -> dict[str, Any]:
        trunk: dict[str, Any] = {}
        _put_optional(trunk, "name", self.name)
        _put_optional(trunk, "description", self.description)
        _put_optional(trunk, "admin_state_up", self.admin_state_up)
        return {"trunk": trunk}


@dataclass
class AddSubportsOpts:
    """Subports to attach to an existing trunk."""

    subports: list[Subport] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        return {"sub_ports": _subports_to_list(self.subports)}


@dataclass
class RemoveSubportsOpts:
    """Subports to detach from an existing trunk."""

    subports: list[RemoveSubport] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        """Return the ``{"sub_ports": [{"port_id": ...}, ...]}`` body.

        Raises:
            TrunkValidationError: If any entry lacks a ``port_id``.
        """
        sub_ports: list[dict[str, Any]] = []
        for idx, sp in enumerate(self.subports):
            if not sp.port_id:
                raise TrunkValidationError(f"sub_ports[{idx}].port_id")
            sub_ports.append({"port_id": sp.port_id})
        return {"sub_ports": sub_ports}


@dataclass
class ListOpts:
    """Filters, sorting and paging for listing trunks.

    Every field is optional and passed through to the service as-is; the
    service decides which values are valid.  Tag filters take lists and are
    sent comma-joined.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    admin_state_up: bool | None = None
    port_id: str | None = None
    status: str | None = None
    tenant_id: str | None = None
    project_id: str | None = None
    revision_number: int | None = None
    tags: list[str] = field(default_factory=list)
    tags_any: list[str] = field(default_factory=list)
    not_tags: list[str] = field(default_factory=list)
    not_tags_any: list[str] = field(default_factory=list)
    sort_key: str | None = None
    sort_dir: str | None = None
    limit: int | None = None
    marker: str | None = None

    def to_query(self) -> dict[str, str]:
        """Return the query-string parameters for ``GET /trunks``."""
        query: dict[str, str] = {}
        for key in (
            "id",
            "name",
            "description",
            "port_id",
            "status",
            "tenant_id",
            "project_id",
            "sort_key",
            "sort_dir",
            "marker",
        ):
            value = getattr(self, key)
            if value is not None:
                query[key] = value
        if self.admin_state_up is not None:
            query["admin_state_up"] = "true" if self.admin_state_up else "false"
        if self.revision_number is not None:
            query["revision_number"] = str(self.revision_number)
        if self.limit is not None:
            query["limit"] = str(self.limit)
        # Tag filters use dashes on the wire.
        for key, tags in (
            ("tags", self.tags),
            ("tags-any", self.tags_any),
            ("not-tags", self.not_tags),
            ("not-tags-any", self.not_tags_any),
        ):
            if tags:
                query[key] = ",".join(tags)
        return query


def _put_optional(target: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        target[key] = value


def _subports_to_list(subports: list[Subport]) -> list[dict[str, Any]]:
    """Validate *subports* and render them as JSON objects.

    Raises:
        TrunkValidationError: On the first subport missing a field, or on a
            port UUID that appears twice.
    """
    seen: set[str] = set()
    result: list[dict[str, Any]] = []
    for idx, sp in enumerate(subports):
        if sp.segmentation_id is None:
            raise TrunkValidationError(f"sub_ports[{idx}].segmentation_id")
        if not sp.segmentation_type:
            raise TrunkValidationError(f"sub_ports[{idx}].segmentation_type")
        if not sp.port_id:
            raise TrunkValidationError(f"sub_ports[{idx}].port_id")
        if sp.port_id in seen:
            raise TrunkValidationError(
                f"sub_ports[{idx}].port_id",
                f"Duplicate subport port_id {sp.port_id!r}",
            )
        seen.add(sp.port_id)
        result.append(
            {
                "port_id": sp.port_id,
                "segmentation_id": sp.segmentation_id,
                "segmentation_type": sp.segmentation_type,
            }
        )
    return result
