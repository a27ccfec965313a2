"""Shared HTTP client for the Neutron networking service."""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Iterable
from typing import Any

import requests

from neutron_trunks.client.errors import TrunkRequestError, TrunkResponseError

logger = logging.getLogger(__name__)

try:
    _VERSION: str = importlib.metadata.version("neutron-trunks")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"neutron-trunks/{_VERSION}"

DEFAULT_API_VERSION: str = "v2.0"


def _normalise_base_url(url: str) -> str:
    """Ensure the URL has a scheme and no trailing slash."""
    url = url.rstrip("/")
    if not url.startswith(("http://", "https://")):
        url = "http://" + url
    return url


class ServiceClient:
    """Authenticated HTTP wrapper around :class:`requests.Session`.

    Resolves resource URLs below the networking endpoint, injects the
    ``X-Auth-Token`` and JSON content headers, applies timeout and TLS
    verification, and maps transport/HTTP errors to :mod:`.errors` types.

    Args:
        endpoint: Networking service endpoint, e.g. ``http://controller:9696``.
        token: Keystone token sent as ``X-Auth-Token``.
        api_version: Version path segment appended to *endpoint*
            (default ``v2.0``).
        timeout_s: Request timeout in seconds (default 30).
        verify_tls: Whether to verify TLS certificates (default True).
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        self.endpoint: str = _normalise_base_url(endpoint)
        self.resource_base: str = (
            f"{self.endpoint}/{api_version.strip('/')}" if api_version else self.endpoint
        )
        self.timeout_s: float = timeout_s
        self.verify_tls: bool = verify_tls
        self._session: requests.Session = requests.Session()
        self._session.headers.update(
            {
                "User-Agent": _USER_AGENT,
                "Accept": "application/json",
                "X-Auth-Token": token,
            }
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def service_url(self, *parts: str) -> str:
        """Join *parts* below :attr:`resource_base`.

        ``service_url("trunks", "abc")`` returns ``<resource_base>/trunks/abc``.
        """
        return "/".join([self.resource_base, *(p.strip("/") for p in parts)])

    def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        params: dict[str, str] | None = None,
        ok_codes: Iterable[int] = (200,),
    ) -> requests.Response:
        """Send an HTTP request to the absolute *url* and return the response.

        Args:
            method: HTTP verb (``"GET"``, ``"POST"``, ``"PUT"``, ``"DELETE"``).
            url: Absolute URL, usually built with :meth:`service_url`.
            json: Optional request body; sent with
                ``Content-Type: application/json``.
            params: Optional query-string parameters.
            ok_codes: Status codes the caller treats as success.

        Returns:
            The :class:`requests.Response`.

        Raises:
            TrunkRequestError: On any transport-level failure.
            TrunkResponseError: When the status code is not in *ok_codes*.
        """
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(
                method,
                url,
                json=json,
                params=params,
                timeout=self.timeout_s,
                verify=self.verify_tls,
            )
        except requests.exceptions.RequestException as exc:
            raise TrunkRequestError(url, exc) from exc
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        if resp.status_code not in set(ok_codes):
            raise TrunkResponseError(resp.status_code, resp.url or url, resp.text)
        return resp

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self._session.close()

    def __enter__(self) -> ServiceClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
