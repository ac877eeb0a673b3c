"""Tests for jsonshelf.errors and the pipeline's error mapping."""

import logging

import pytest

from jsonshelf.errors import (
    ConfigurationError,
    HTTPError,
    JsonShelfError,
    MethodNotAllowed,
    NotFound,
    ScanError,
    ScanFailure,
)
from jsonshelf.http.request import Request
from jsonshelf.server.errors import handle_http_error, handle_internal_error


def _request() -> Request:
    return Request.from_asgi({"type": "http", "method": "GET", "path": "/json"})


class TestHierarchy:
    @pytest.mark.parametrize("exc_type", [ConfigurationError, ScanError, HTTPError])
    def test_subclass_of_base(self, exc_type: type) -> None:
        assert issubclass(exc_type, JsonShelfError)

    def test_not_found(self) -> None:
        exc = NotFound()
        assert exc.status == 404
        assert str(exc) == "404: Not Found"

    def test_method_not_allowed_sorted_allow(self) -> None:
        exc = MethodNotAllowed(frozenset({"HEAD", "GET"}))
        assert exc.status == 405
        assert exc.headers == (("Allow", "GET, HEAD"),)

    def test_http_error_without_detail(self) -> None:
        assert str(HTTPError(418)) == "418"

    def test_args_carry_status_and_detail(self) -> None:
        assert HTTPError(418, "teapot").args == (418, "teapot")
        assert NotFound().args == (404, "Not Found")
        assert MethodNotAllowed(frozenset({"GET"})).args[0] == 405

    def test_repr_and_raise(self) -> None:
        with pytest.raises(NotFound) as exc_info:
            raise NotFound("gone")
        assert exc_info.value.args == (404, "gone")
        assert "gone" in repr(exc_info.value)


class TestScanError:
    def test_lists_every_failure(self) -> None:
        exc = ScanError(
            [
                ScanFailure("./a", "not a directory"),
                ScanFailure("./b/x.json", "cannot read file: Permission denied"),
            ]
        )

        assert len(exc.failures) == 2
        assert str(exc) == (
            "Failed to load JSON directories (2 error(s)):\n"
            "  - ./a: not a directory\n"
            "  - ./b/x.json: cannot read file: Permission denied"
        )

    def test_failures_immutable(self) -> None:
        failures = [ScanFailure("./a", "boom")]
        exc = ScanError(failures)
        failures.append(ScanFailure("./b", "boom"))
        assert len(exc.failures) == 1


class TestErrorMapping:
    def test_http_error_keeps_status_and_headers(self) -> None:
        response = handle_http_error(MethodNotAllowed(frozenset({"GET"})), _request())

        assert response.status == 405
        assert response.body == b""
        assert response.content_type == "application/json"
        assert response.header("Allow") == "GET"

    def test_internal_error_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="jsonshelf.server"):
            response = handle_internal_error(ValueError("boom"), _request())

        assert response.status == 500
        assert response.body == b""
        assert "500 GET /json" in caplog.text
        assert caplog.records[0].exc_info is not None
