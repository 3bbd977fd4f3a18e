"""Tests for missive.http.response — Response on top of the header store."""

import pytest

from missive.errors import InvalidHeaderValue, InvalidStatusCode
from missive.http.message import Message
from missive.http.response import Response
from missive.http.stream import Stream


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.get_status_code() == 200
        assert r.get_reason_phrase() == "OK"
        assert r.get_headers() == {}
        assert isinstance(r.get_body(), Stream)

    def test_is_message(self) -> None:
        assert isinstance(Response(), Message)

    def test_positional_status(self) -> None:
        assert Response(404).get_reason_phrase() == "Not Found"

    def test_invalid_header_aborts(self) -> None:
        with pytest.raises(InvalidHeaderValue):
            Response(headers={"X": "a\x00b"})

    def test_chaining_returns_new_objects(self) -> None:
        r1 = Response()
        r2 = r1.with_status(201)
        r3 = r2.with_header("Location", "/users/42")

        assert r1.status == 200
        assert r2.status == 201
        assert r2.get_headers() == {}
        assert r3.get_headers() == {"Location": ["/users/42"]}
        assert isinstance(r3, Response)

    def test_frozen(self) -> None:
        r = Response()
        with pytest.raises(AttributeError):
            r.status = 404  # type: ignore[misc]

    def test_body_write_and_read(self) -> None:
        r = Response()
        r.get_body().write("Hello, World!")
        assert r.get_body().read_all() == b"Hello, World!"


class TestWithStatus:
    def test_custom_reason(self) -> None:
        r = Response().with_status(418, "Short and stout")
        assert r.get_reason_phrase() == "Short and stout"

    def test_reason_reset_when_omitted(self) -> None:
        r = Response().with_status(500, "Oops").with_status(503)
        assert r.get_reason_phrase() == "Service Unavailable"

    def test_unregistered_code_has_empty_phrase(self) -> None:
        assert Response().with_status(599).get_reason_phrase() == ""

    def test_same_status_returns_self(self) -> None:
        r = Response(204)
        assert r.with_status(204) is r

    @pytest.mark.parametrize("status", [99, 600, -1, True, "200", 200.0])
    def test_rejects_out_of_range(self, status: object) -> None:
        with pytest.raises(InvalidStatusCode):
            Response().with_status(status)  # type: ignore[arg-type]

    def test_constructor_validates(self) -> None:
        with pytest.raises(InvalidStatusCode):
            Response(1000)
