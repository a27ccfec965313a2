"""Linked-page iteration over Neutron collection resources.

Neutron collection responses carry a ``<resources>_links`` array next to the
resource array; the entry with ``"rel": "next"`` points at the next page::

    {"trunks": [...],
     "trunks_links": [{"href": "http://.../v2.0/trunks?marker=...", "rel": "next"}]}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from neutron_trunks.client.result import decode_json

if TYPE_CHECKING:
    from neutron_trunks.client.http import ServiceClient

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """One page of a collection.

    Attributes:
        url: URL the page was fetched from.
        body: Parsed JSON body.
        resources_key: Envelope key of the resource array (e.g. ``"trunks"``).
    """

    url: str
    body: Any
    resources_key: str

    def is_empty(self) -> bool:
        """True if the page holds no resources."""
        if not isinstance(self.body, dict):
            return True
        return not self.body.get(self.resources_key)

    def next_page_url(self) -> str | None:
        """Return the ``next`` link, or ``None`` on the last page."""
        if not isinstance(self.body, dict):
            return None
        for link in self.body.get(f"{self.resources_key}_links") or []:
            if isinstance(link, dict) and link.get("rel") == "next" and link.get("href"):
                return str(link["href"])
        return None


class Pager:
    """Lazy, single-use iterator over the pages of a collection.

    The first request is sent on the first :func:`next`.  Iteration ends when
    a page has no ``next`` link or no resources; an exhausted pager stays
    exhausted, so re-reading requires a new list call.

    Args:
        client: Client used to fetch every page.
        url: URL of the first page.
        resources_key: Envelope key of the resource array.
        params: Query parameters for the first page only; ``next`` links
            already carry their own.
    """

    def __init__(
        self,
        client: ServiceClient,
        url: str,
        resources_key: str,
        params: dict[str, str] | None = None,
    ) -> None:
        self._client = client
        self._next_url: str | None = url
        self._params: dict[str, str] | None = params or None
        self.resources_key: str = resources_key

    def __iter__(self) -> Iterator[Page]:
        return self

    def __next__(self) -> Page:
        if self._next_url is None:
            raise StopIteration
        url, params = self._next_url, self._params
        # A failed fetch leaves the pager exhausted.
        self._next_url = None
        self._params = None

        resp = self._client.request("GET", url, params=params, ok_codes=(200,))
        page = Page(url=url, body=decode_json(resp), resources_key=self.resources_key)
        if page.is_empty():
            logger.debug("Empty %s page at %s; stopping", self.resources_key, url)
            raise StopIteration
        self._next_url = page.next_page_url()
        return page

    def each_page(self, handler: Callable[[Page], bool]) -> None:
        """Call *handler* on every remaining page until it returns ``False``."""
        for page in self:
            if not handler(page):
                return

    def all_pages(self) -> list[Page]:
        """Fetch and return every remaining page."""
        return list(self)
