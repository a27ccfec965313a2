"""Deferred operation results.

Operation functions never decode a response themselves.  They return a
:class:`Result` holding either the raw :class:`requests.Response` or the
error captured while building/sending the request; decoding happens only
when the caller asks for it with :meth:`Result.extract`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import requests

from neutron_trunks.client.errors import TrunkError, TrunkParseError


T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """Outcome of one request, decoded on demand.

    Attributes:
        response: Raw response, or ``None`` if the request never completed.
        err: Validation/transport error captured before a response existed.
        decoder: Turns the parsed JSON body into the typed value; ``None``
            for operations without a response body (delete).
    """

    response: requests.Response | None = None
    err: TrunkError | None = None
    decoder: Callable[[Any], T] | None = None

    @classmethod
    def failed(cls, err: TrunkError) -> Result[T]:
        return cls(err=err)

    def extract_err(self) -> None:
        """Raise the captured error, if any."""
        if self.err is not None:
            raise self.err

    def extract(self) -> T:
        """Decode the response body into the typed value.

        Raises:
            TrunkValidationError: If the options were rejected.
            TrunkRequestError: If the request failed at the transport level.
            TrunkResponseError: If the service answered with an unexpected status.
            TrunkParseError: If the body is not JSON or not the expected shape.
        """
        self.extract_err()
        if self.response is None or self.decoder is None:
            raise TrunkParseError("Result carries no response body to extract")
        return self.decoder(self.body())

    def body(self) -> Any:
        """Return the response body parsed as JSON."""
        self.extract_err()
        if self.response is None:
            raise TrunkParseError("Result carries no response body to extract")
        return decode_json(self.response)


def decode_json(resp: requests.Response) -> Any:
    """Parse *resp* as JSON, raising :exc:`.TrunkParseError` on failure."""
    try:
        return resp.json()
    except ValueError as exc:
        raise TrunkParseError(
            f"Non-JSON response from {resp.url!r}: {resp.text[:200]!r}"
        ) from exc
