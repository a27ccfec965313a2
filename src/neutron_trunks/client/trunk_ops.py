"""Trunk operations against the Neutron networking API.

Each function validates and serializes its options, sends exactly one
request through :class:`~neutron_trunks.client.http.ServiceClient` and
returns a :class:`~neutron_trunks.client.result.Result` (or a
:class:`~neutron_trunks.client.pagination.Pager` for listing).  Nothing
raises at call time: validation and transport errors are captured into the
result and surface from ``extract()``.

    LIST:            GET    /v2.0/trunks?{query}                 -> 200
    GET:             GET    /v2.0/trunks/<id>                    -> 200
    CREATE:          POST   /v2.0/trunks                         -> 201
    UPDATE:          PUT    /v2.0/trunks/<id>                    -> 200
    DELETE:          DELETE /v2.0/trunks/<id>                    -> 204
    ADD SUBPORTS:    PUT    /v2.0/trunks/<id>/add_subports       -> 200
    REMOVE SUBPORTS: PUT    /v2.0/trunks/<id>/remove_subports    -> 200
    GET SUBPORTS:    GET    /v2.0/trunks/<id>/get_subports       -> 200
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from neutron_trunks.client.errors import TrunkError, TrunkValidationError
from neutron_trunks.client.http import ServiceClient
from neutron_trunks.client.pagination import Page, Pager
from neutron_trunks.client.result import Result
from neutron_trunks.model.options import (
    AddSubportsOpts,
    CreateOpts,
    ListOpts,
    RemoveSubportsOpts,
    UpdateOpts,
)
from neutron_trunks.model.trunk import Subport, Trunk
from neutron_trunks.parser.trunk import parse_subports, parse_trunk, parse_trunks
from neutron_trunks.vendor.neutron import endpoints

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RESOURCES_KEY: str = "trunks"


def trunk_list(client: ServiceClient, opts: ListOpts | None = None) -> Pager:
    """List trunks, optionally filtered, as a lazy sequence of pages.

    Decode each page with :func:`extract_trunks`.
    """
    params = (opts or ListOpts()).to_query()
    logger.debug("Listing trunks (filters=%s)", params)
    return Pager(client, endpoints.list_url(client), _RESOURCES_KEY, params=params)


def extract_trunks(page: Page) -> list[Trunk]:
    """Decode the trunks held by one list page."""
    return parse_trunks(page.body)


def trunk_get(client: ServiceClient, trunk_id: str) -> Result[Trunk]:
    logger.debug("Getting trunk %s", trunk_id)
    return _send(
        client, "GET", endpoints.get_url(client, trunk_id), None, (200,), parse_trunk
    )


def trunk_create(client: ServiceClient, opts: CreateOpts) -> Result[Trunk]:
    """Create a trunk on the parent port ``opts.port_id``.

    Args:
        client: Networking service client.
        opts: Creation options; the parent port and every subport field
            are required.

    Returns:
        A result whose ``extract()`` yields the created
        :class:`~neutron_trunks.model.trunk.Trunk`.
    """
    body = _build(opts.to_body)
    if isinstance(body, TrunkError):
        return Result.failed(body)
    logger.debug(
        "Creating trunk on port %s with %d subport(s)",
        opts.port_id,
        len(opts.subports),
    )
    return _send(client, "POST", endpoints.create_url(client), body, (201,), parse_trunk)


def trunk_update(client: ServiceClient, trunk_id: str, opts: UpdateOpts) -> Result[Trunk]:
    """Update name, description and/or admin state of a trunk.

    Only fields set on *opts* are sent.
    """
    body = _build(opts.to_body)
    if isinstance(body, TrunkError):
        return Result.failed(body)
    logger.debug("Updating trunk %s: %s", trunk_id, body["trunk"])
    return _send(
        client, "PUT", endpoints.update_url(client, trunk_id), body, (200,), parse_trunk
    )


def trunk_delete(client: ServiceClient, trunk_id: str) -> Result[None]:
    """Delete a trunk.  Check the outcome with ``extract_err()``."""
    logger.debug("Deleting trunk %s", trunk_id)
    return _send(client, "DELETE", endpoints.delete_url(client, trunk_id), None, (204,), None)


def trunk_add_subports(
    client: ServiceClient,
    trunk_id: str,
    opts: AddSubportsOpts,
) -> Result[Trunk]:
    """Attach subports to a trunk; the result holds the updated trunk."""
    body = _build(opts.to_body)
    if isinstance(body, TrunkError):
        return Result.failed(body)
    logger.debug("Adding %d subport(s) to trunk %s", len(opts.subports), trunk_id)
    return _send(
        client,
        "PUT",
        endpoints.add_subports_url(client, trunk_id),
        body,
        (200,),
        parse_trunk,
    )


def trunk_remove_subports(
    client: ServiceClient,
    trunk_id: str,
    opts: RemoveSubportsOpts,
) -> Result[Trunk]:
    """Detach subports from a trunk; the result holds the updated trunk."""
    body = _build(opts.to_body)
    if isinstance(body, TrunkError):
        return Result.failed(body)
    logger.debug("Removing %d subport(s) from trunk %s", len(opts.subports), trunk_id)
    return _send(
        client,
        "PUT",
        endpoints.remove_subports_url(client, trunk_id),
        body,
        (200,),
        parse_trunk,
    )


def trunk_get_subports(client: ServiceClient, trunk_id: str) -> Result[list[Subport]]:
    logger.debug("Getting subports of trunk %s", trunk_id)
    return _send(
        client,
        "GET",
        endpoints.get_subports_url(client, trunk_id),
        None,
        (200,),
        parse_subports,
    )


def _build(to_body: Callable[[], dict[str, Any]]) -> dict[str, Any] | TrunkError:
    """Run an options serializer, returning the validation error instead of raising it."""
    try:
        return to_body()
    except TrunkValidationError as exc:
        logger.debug("Rejected request options: %s", exc)
        return exc


def _send(
    client: ServiceClient,
    method: str,
    url: str,
    body: dict[str, Any] | None,
    ok_codes: tuple[int, ...],
    decoder: Callable[[Any], T] | None,
) -> Result[T]:
    try:
        resp = client.request(method, url, json=body, ok_codes=ok_codes)
    except TrunkError as exc:
        logger.debug("%s %s failed: %s", method, url, exc)
        return Result.failed(exc)
    return Result(response=resp, decoder=decoder)
