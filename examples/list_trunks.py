#!/usr/bin/env python3
"""Example: list trunks (optionally filtered by status) using neutron-trunks.

Usage::

    export OS_NETWORK_ENDPOINT=http://controller:9696
    export OS_AUTH_TOKEN=$(openstack token issue -f value -c id)
    python examples/list_trunks.py [STATUS]
"""

from __future__ import annotations

import json
import os
import sys

from neutron_trunks.client.http import ServiceClient
from neutron_trunks.client.trunk_ops import extract_trunks, trunk_list
from neutron_trunks.model.options import ListOpts


def main() -> None:
    endpoint = os.environ.get("OS_NETWORK_ENDPOINT", "")
    token = os.environ.get("OS_AUTH_TOKEN", "")
    if not endpoint or not token:
        print("ERROR: OS_NETWORK_ENDPOINT and OS_AUTH_TOKEN are required.", file=sys.stderr)
        sys.exit(1)
    verify_tls = os.environ.get("OS_VERIFY_TLS", "1") == "1"

    opts = ListOpts(status=sys.argv[1] if len(sys.argv) > 1 else None)

    with ServiceClient(endpoint, token, verify_tls=verify_tls) as client:
        for page in trunk_list(client, opts):
            for trunk in extract_trunks(page):
                print(
                    json.dumps(
                        {
                            "id": trunk.id,
                            "name": trunk.name,
                            "status": trunk.status,
                            "port_id": trunk.port_id,
                            "sub_ports": len(trunk.subports),
                        }
                    )
                )


if __name__ == "__main__":
    main()
