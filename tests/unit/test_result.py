"""Unit tests for neutron_trunks.client.result."""

from __future__ import annotations

import json

import pytest
import requests

from neutron_trunks.client.errors import (
    TrunkParseError,
    TrunkResponseError,
    TrunkValidationError,
)
from neutron_trunks.client.result import Result, decode_json
from neutron_trunks.parser.trunk import parse_trunk
from trunk_fixtures import GET_RESPONSE, expected_trunks


def _response(body: bytes, status: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = "http://controller:9696/v2.0/trunks/x"
    return resp


def _json_response(payload: str) -> requests.Response:
    return _response(payload.encode())


def test_extract_decodes_body() -> None:
    result: Result = Result(response=_json_response(json.dumps(GET_RESPONSE)), decoder=parse_trunk)
    assert result.err is None
    assert result.extract() == expected_trunks()[1]


def test_extract_raises_captured_error() -> None:
    err = TrunkValidationError("port_id")
    result: Result = Result.failed(err)
    with pytest.raises(TrunkValidationError) as exc_info:
        result.extract()
    assert exc_info.value is err


def test_extract_err_raises_captured_error() -> None:
    result: Result = Result.failed(TrunkResponseError(409, "http://x"))
    with pytest.raises(TrunkResponseError):
        result.extract_err()


def test_extract_err_no_error() -> None:
    result: Result = Result(response=_response(b"", status=204))
    result.extract_err()


def test_extract_non_json_raises_parse_error() -> None:
    result: Result = Result(response=_json_response("<html>oops</html>"), decoder=parse_trunk)
    with pytest.raises(TrunkParseError):
        result.extract()


def test_extract_wrong_shape_raises_parse_error() -> None:
    result: Result = Result(response=_json_response('{"port": {}}'), decoder=parse_trunk)
    with pytest.raises(TrunkParseError):
        result.extract()


def test_extract_without_decoder_raises_parse_error() -> None:
    result: Result = Result(response=_response(b"", status=204))
    with pytest.raises(TrunkParseError):
        result.extract()


def test_decode_is_deferred() -> None:
    # Building the result with a broken body must not raise.
    result: Result = Result(response=_json_response("{"), decoder=parse_trunk)
    with pytest.raises(TrunkParseError):
        result.body()


def test_decode_json_ok() -> None:
    assert decode_json(_json_response('{"a": 1}')) == {"a": 1}
