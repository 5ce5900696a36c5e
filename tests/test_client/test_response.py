"""Tests for ecwid_api.client.response -- content-type classification and decoding."""

from __future__ import annotations

import httpx
import pytest

from ecwid_api.client.response import (
    ApiResponse,
    JsonBody,
    RawBody,
    decode_response,
    is_json_content_type,
)
from ecwid_api.exceptions import (
    ApiError,
    AuthError,
    DecodeError,
    NotFoundError,
    ServerError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_response(
    status_code: int = 200,
    content: bytes = b"",
    content_type: str | None = "application/json",
    method: str = "GET",
) -> httpx.Response:
    headers = {"content-type": content_type} if content_type else {}
    return httpx.Response(
        status_code=status_code,
        headers=headers,
        content=content,
        request=httpx.Request(method, "https://app.ecwid.com/api/v1/12345/categories"),
    )


def _api_response(status_code: int, body) -> ApiResponse:
    return ApiResponse(
        status_code=status_code,
        headers={},
        body=body,
        method="GET",
        url="https://app.ecwid.com/api/v1/12345/category?id=1",
    )


# ---------------------------------------------------------------------------
# is_json_content_type
# ---------------------------------------------------------------------------


class TestIsJsonContentType:
    @pytest.mark.parametrize(
        "content_type",
        [
            "application/json",
            "application/json; charset=utf-8",
            "APPLICATION/JSON",
            "text/json",
            "application/vnd.api+json",
        ],
    )
    def test_json_types(self, content_type: str) -> None:
        assert is_json_content_type(content_type)

    @pytest.mark.parametrize(
        "content_type",
        [
            None,
            "",
            "text/plain",
            "text/html; charset=utf-8",
            "application/jsonp",
            "application/json-seq",
        ],
    )
    def test_non_json_types(self, content_type: str | None) -> None:
        assert not is_json_content_type(content_type)


# ---------------------------------------------------------------------------
# decode_response
# ---------------------------------------------------------------------------


class TestDecodeResponse:
    def test_json_body_is_parsed(self) -> None:
        result = decode_response(_make_response(content=b'[{"id": 1}]'))
        assert result.body == JsonBody([{"id": 1}])
        assert result.is_json
        assert result.data == [{"id": 1}]

    def test_plain_text_is_raw(self) -> None:
        result = decode_response(_make_response(content=b"hello", content_type="text/plain"))
        assert result.body == RawBody(b"hello")
        assert not result.is_json
        assert result.data == b"hello"
        assert result.body.text == "hello"

    def test_missing_content_type_is_raw(self) -> None:
        result = decode_response(_make_response(content=b'{"a": 1}', content_type=None))
        assert isinstance(result.body, RawBody)

    def test_empty_json_body_is_none(self) -> None:
        result = decode_response(_make_response(status_code=204, content=b""))
        assert result.body == JsonBody(None)

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_response(_make_response(content=b"not json"))
        assert exc_info.value.method == "GET"
        assert exc_info.value.url.endswith("/12345/categories")

    def test_request_context_is_recorded(self) -> None:
        result = decode_response(_make_response(content=b"{}", method="POST"))
        assert result.method == "POST"
        assert result.url == "https://app.ecwid.com/api/v1/12345/categories"

    def test_status_and_headers(self) -> None:
        result = decode_response(_make_response(status_code=201, content=b"{}"))
        assert result.status_code == 201
        assert result.ok
        assert result.headers["Content-Type"] == "application/json"


# ---------------------------------------------------------------------------
# raise_for_status
# ---------------------------------------------------------------------------


class TestRaiseForStatus:
    def test_success_does_not_raise(self) -> None:
        _api_response(200, JsonBody({})).raise_for_status()
        _api_response(302, RawBody(b"")).raise_for_status()

    @pytest.mark.parametrize(
        "status, exc_type",
        [
            (401, AuthError),
            (403, AuthError),
            (404, NotFoundError),
            (500, ServerError),
            (503, ServerError),
            (400, ApiError),
            (422, ApiError),
        ],
    )
    def test_error_mapping(self, status: int, exc_type: type) -> None:
        with pytest.raises(exc_type) as exc_info:
            _api_response(status, JsonBody(None)).raise_for_status()
        assert exc_info.value.status_code == status
        assert exc_info.value.method == "GET"
        assert str(exc_info.value) == f"HTTP {status}"

    def test_message_from_json_body(self) -> None:
        with pytest.raises(ApiError, match="HTTP 400: Invalid order number"):
            _api_response(400, JsonBody({"errorMessage": "Invalid order number"})).raise_for_status()

    def test_message_from_raw_body(self) -> None:
        with pytest.raises(ServerError, match="HTTP 502: Bad Gateway"):
            _api_response(502, RawBody(b"Bad Gateway")).raise_for_status()
