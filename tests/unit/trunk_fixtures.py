"""Canned Neutron trunk request/response bodies shared by the unit tests."""

from __future__ import annotations

import datetime

from neutron_trunks.model.trunk import Subport, Trunk

BASE_URL = "http://controller:9696"
API_URL = f"{BASE_URL}/v2.0"
TOKEN = "cbc36478b0bd8e67e89469c7749d4127"

TRUNK_ID = "f6a9718c-5a64-43e3-944f-4deccad8e78c"
PARENT_PORT_ID = "c373d2fa-3d3b-4492-924c-aff54dea19b6"
SUBPORT_A = "28e452d7-4f8a-4be4-b1e6-7f3db4c0430b"
SUBPORT_B = "4c8b2bff-9824-4d4c-9b60-b3f6621b2bab"
PROJECT_ID = "e153f3f9082240a5974f667cfe1036e3"

CREATE_REQUEST = {
    "trunk": {
        "admin_state_up": True,
        "description": "Trunk created by neutron-trunks",
        "name": "gophertrunk",
        "port_id": PARENT_PORT_ID,
        "sub_ports": [
            {"port_id": SUBPORT_A, "segmentation_id": 1, "segmentation_type": "vlan"},
            {"port_id": SUBPORT_B, "segmentation_id": 2, "segmentation_type": "vlan"},
        ],
    }
}

_TRUNK_BODY = {
    "admin_state_up": True,
    "created_at": "2018-10-03T13:57:24Z",
    "description": "Trunk created by neutron-trunks",
    "id": TRUNK_ID,
    "name": "gophertrunk",
    "port_id": PARENT_PORT_ID,
    "project_id": PROJECT_ID,
    "revision_number": 1,
    "status": "ACTIVE",
    "sub_ports": [
        {"port_id": SUBPORT_A, "segmentation_id": 1, "segmentation_type": "vlan"},
        {"port_id": SUBPORT_B, "segmentation_id": 2, "segmentation_type": "vlan"},
    ],
    "tags": [],
    "tenant_id": PROJECT_ID,
    "updated_at": "2018-10-03T13:57:26Z",
}

CREATE_RESPONSE = {"trunk": _TRUNK_BODY}
GET_RESPONSE = {"trunk": _TRUNK_BODY}

CREATE_NO_SUBPORTS_REQUEST = {
    "trunk": {
        "admin_state_up": True,
        "description": "Trunk created by neutron-trunks",
        "name": "gophertrunk",
        "port_id": PARENT_PORT_ID,
        "sub_ports": [],
    }
}

CREATE_NO_SUBPORTS_RESPONSE = {
    "trunk": {**_TRUNK_BODY, "sub_ports": [], "created_at": "2018-10-03T13:57:24Z"}
}

_OTHER_TRUNK_BODY = {
    "admin_state_up": True,
    "created_at": "2018-10-01T15:29:39Z",
    "description": "",
    "id": "3e72aa1b-d0da-48f2-831a-fd1c5f3f99c2",
    "name": "mytrunk",
    "port_id": "16c425d3-d7fc-40b8-b94c-cc95da45b270",
    "project_id": PROJECT_ID,
    "revision_number": 3,
    "status": "ACTIVE",
    "sub_ports": [
        {
            "port_id": "424da4b7-7868-4db2-bb71-05155601c6e4",
            "segmentation_id": 11,
            "segmentation_type": "vlan",
        },
        {
            "port_id": "be28febe-bdff-45cc-8a2d-872d54e62527",
            "segmentation_id": 22,
            "segmentation_type": "vlan",
        },
    ],
    "tags": ["foo", "bar"],
    "tenant_id": PROJECT_ID,
    "updated_at": "2018-10-01T15:43:04Z",
}

LIST_RESPONSE = {"trunks": [_OTHER_TRUNK_BODY, _TRUNK_BODY]}

UPDATE_REQUEST = {
    "trunk": {
        "admin_state_up": False,
        "description": "gophertrunk updated by neutron-trunks",
        "name": "updated_gophertrunk",
    }
}

UPDATE_RESPONSE = {
    "trunk": {
        **_TRUNK_BODY,
        "admin_state_up": False,
        "description": "gophertrunk updated by neutron-trunks",
        "name": "updated_gophertrunk",
        "revision_number": 6,
        "status": "DOWN",
        "updated_at": "2018-10-03T13:59:58Z",
    }
}

ADD_SUBPORTS_REQUEST = {
    "sub_ports": [
        {"port_id": SUBPORT_A, "segmentation_id": 1, "segmentation_type": "vlan"},
        {"port_id": SUBPORT_B, "segmentation_id": 2, "segmentation_type": "vlan"},
    ]
}

# Prior state is CREATE_NO_SUBPORTS_RESPONSE; both subports are now attached.
ADD_SUBPORTS_RESPONSE = {"trunk": {**_TRUNK_BODY, "revision_number": 2}}

REMOVE_SUBPORTS_REQUEST = {
    "sub_ports": [{"port_id": SUBPORT_A}, {"port_id": SUBPORT_B}]
}

# Prior state is GET_RESPONSE; both subports are now detached.
REMOVE_SUBPORTS_RESPONSE = {
    "trunk": {**_TRUNK_BODY, "sub_ports": [], "revision_number": 3}
}

GET_SUBPORTS_RESPONSE = {"sub_ports": _TRUNK_BODY["sub_ports"]}


def _ts(text: str) -> datetime.datetime:
    return datetime.datetime.strptime(text, "%Y-%m-%dT%H:%M:%S").replace(
        tzinfo=datetime.timezone.utc
    )


EXPECTED_SUBPORTS = [
    Subport(segmentation_id=1, segmentation_type="vlan", port_id=SUBPORT_A),
    Subport(segmentation_id=2, segmentation_type="vlan", port_id=SUBPORT_B),
]


def expected_trunks() -> list[Trunk]:
    """Decoded form of :data:`LIST_RESPONSE`, built fresh on every call."""
    return [
        Trunk(
            id="3e72aa1b-d0da-48f2-831a-fd1c5f3f99c2",
            port_id="16c425d3-d7fc-40b8-b94c-cc95da45b270",
            name="mytrunk",
            description="",
            status="ACTIVE",
            admin_state_up=True,
            tenant_id=PROJECT_ID,
            project_id=PROJECT_ID,
            revision_number=3,
            created_at=_ts("2018-10-01T15:29:39"),
            updated_at=_ts("2018-10-01T15:43:04"),
            tags=["foo", "bar"],
            subports=[
                Subport(11, "vlan", "424da4b7-7868-4db2-bb71-05155601c6e4"),
                Subport(22, "vlan", "be28febe-bdff-45cc-8a2d-872d54e62527"),
            ],
        ),
        Trunk(
            id=TRUNK_ID,
            port_id=PARENT_PORT_ID,
            name="gophertrunk",
            description="Trunk created by neutron-trunks",
            status="ACTIVE",
            admin_state_up=True,
            tenant_id=PROJECT_ID,
            project_id=PROJECT_ID,
            revision_number=1,
            created_at=_ts("2018-10-03T13:57:24"),
            updated_at=_ts("2018-10-03T13:57:26"),
            tags=[],
            subports=list(EXPECTED_SUBPORTS),
        ),
    ]
