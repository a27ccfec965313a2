"""Typed models for Neutron trunks and their subports."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field


@dataclass
class Subport:
    """A child port attached to a trunk with a segmentation tag.

    Attributes:
        segmentation_id: Segmentation tag, e.g. the VLAN ID.
        segmentation_type: Segmentation technology, e.g. ``"vlan"``.
        port_id: UUID of the child port.
    """

    segmentation_id: int | None = None
    segmentation_type: str | None = None
    port_id: str | None = None


@dataclass
class RemoveSubport:
    """Reference to a subport to detach; only the child port UUID is needed."""

    port_id: str | None = None


@dataclass
class Trunk:
    """A trunk: a parent port aggregating zero or more tagged subports.

    Attributes:
        id: Trunk UUID.
        port_id: UUID of the parent port.
        name: Human-readable name.
        description: Free-form description.
        status: Service-reported status (``ACTIVE``, ``DOWN``, ``BUILD``,
            ``DEGRADED`` or ``ERROR``); kept as an opaque string.
        admin_state_up: Administrative state.
        tenant_id: Owning tenant.
        project_id: Owning project (same value as *tenant_id* on current APIs).
        revision_number: Revision counter bumped on every update.
        created_at: Creation time, or ``None`` if the service omitted it.
        updated_at: Last update time, or ``None`` if the service omitted it.
        tags: Resource tags.
        subports: Attached subports; each references a distinct port.
    """

    id: str
    port_id: str
    name: str = ""
    description: str = ""
    status: str = ""
    admin_state_up: bool = False
    tenant_id: str = ""
    project_id: str = ""
    revision_number: int = 0
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None
    tags: list[str] = field(default_factory=list)
    subports: list[Subport] = field(default_factory=list)
