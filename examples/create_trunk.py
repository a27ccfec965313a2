#!/usr/bin/env python3
"""Example: create a trunk, attach a VLAN subport, then clean up.

Usage::

    export OS_NETWORK_ENDPOINT=http://controller:9696
    export OS_AUTH_TOKEN=...
    export PARENT_PORT_ID=<uuid>      # required: unbound port to use as parent
    export CHILD_PORT_ID=<uuid>       # required: port to attach as subport
    export VLAN_ID=100                # optional (default: 100)
    python examples/create_trunk.py

Environment variables:
    OS_NETWORK_ENDPOINT  Networking service endpoint (required).
    OS_AUTH_TOKEN        Keystone token (required).
    OS_VERIFY_TLS        Set to "0" to skip TLS verification (default: on).
    PARENT_PORT_ID       Parent port UUID (required).
    CHILD_PORT_ID        Subport UUID (required).
    VLAN_ID              Segmentation ID for the subport (default: 100).
    KEEP                 Set to "1" to keep the trunk instead of deleting it.
"""

from __future__ import annotations

import os
import sys

from neutron_trunks.client.errors import TrunkError
from neutron_trunks.client.http import ServiceClient
from neutron_trunks.client.trunk_ops import (
    trunk_add_subports,
    trunk_create,
    trunk_delete,
    trunk_remove_subports,
)
from neutron_trunks.model.options import AddSubportsOpts, CreateOpts, RemoveSubportsOpts
from neutron_trunks.model.trunk import RemoveSubport, Subport


def main() -> None:
    endpoint = os.environ.get("OS_NETWORK_ENDPOINT", "")
    token = os.environ.get("OS_AUTH_TOKEN", "")
    parent = os.environ.get("PARENT_PORT_ID", "")
    child = os.environ.get("CHILD_PORT_ID", "")
    if not (endpoint and token and parent and child):
        print(
            "ERROR: OS_NETWORK_ENDPOINT, OS_AUTH_TOKEN, PARENT_PORT_ID and "
            "CHILD_PORT_ID are required.",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        vlan_id = int(os.environ.get("VLAN_ID", "100"))
    except ValueError:
        print(f"ERROR: VLAN_ID must be an integer, got {os.environ['VLAN_ID']!r}", file=sys.stderr)
        sys.exit(1)

    verify_tls = os.environ.get("OS_VERIFY_TLS", "1") == "1"
    keep = os.environ.get("KEEP", "0") == "1"

    with ServiceClient(endpoint, token, verify_tls=verify_tls) as client:
        try:
            trunk = trunk_create(
                client,
                CreateOpts(port_id=parent, name="example-trunk", admin_state_up=True),
            ).extract()
            print(f"Created trunk {trunk.id} ({trunk.status})")

            trunk = trunk_add_subports(
                client,
                trunk.id,
                AddSubportsOpts(
                    subports=[
                        Subport(segmentation_id=vlan_id, segmentation_type="vlan", port_id=child)
                    ]
                ),
            ).extract()
            print(f"Trunk {trunk.id} now has {len(trunk.subports)} subport(s)")

            if keep:
                return

            trunk_remove_subports(
                client, trunk.id, RemoveSubportsOpts(subports=[RemoveSubport(port_id=child)])
            ).extract()
            trunk_delete(client, trunk.id).extract_err()
            print(f"Deleted trunk {trunk.id}")
        except TrunkError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
