"""
Unit tests for HTTP response building.
"""

from datetime import datetime, timezone
import json

from parambind.http.response import (
    HTTPResponse,
    ResponseBuilder,
    HTTPStatus,
    ok,
    not_found,
    bad_request,
    error_response,
    internal_error,
    format_http_date,
)


class TestHTTPResponse:
    """Tests for HTTPResponse class."""

    def test_status_line(self):
        """Test status line generation."""
        response = HTTPResponse(status=HTTPStatus.OK)
        assert response.status_line == "HTTP/1.1 200 OK"

        response = HTTPResponse(status=HTTPStatus.BAD_REQUEST)
        assert response.status_line == "HTTP/1.1 400 Bad Request"

    def test_to_bytes_includes_headers(self):
        """Test that to_bytes includes all headers."""
        response = HTTPResponse(
            status=HTTPStatus.OK,
            headers={"X-Custom": "value"},
            body=b"test",
        )

        result = response.to_bytes()

        assert b"HTTP/1.1 200 OK\r\n" in result
        assert b"X-Custom: value\r\n" in result
        assert b"Content-Length: 4\r\n" in result
        assert b"Server: parambind/1.0\r\n" in result
        assert b"\r\n\r\ntest" in result

    def test_to_bytes_server_name(self):
        """Test overriding the Server header value."""
        result = HTTPResponse().to_bytes("custom/2.0")
        assert b"Server: custom/2.0\r\n" in result

    def test_to_bytes_does_not_mutate_headers(self):
        """Test that serializing leaves the header dict alone."""
        response = HTTPResponse(body=b"x")
        response.to_bytes()
        assert "Content-Length" not in response.headers

    def test_set_header_chaining(self):
        """Test method chaining for headers."""
        response = (HTTPResponse()
            .set_header("X-One", "1")
            .set_header("X-Two", "2"))

        assert response.headers["X-One"] == "1"
        assert response.headers["X-Two"] == "2"

    def test_write_appends_text(self):
        """Test writing into a response the raw-access way."""
        response = HTTPResponse()
        response.write("o").write("k")

        assert response.body == b"ok"
        assert response.text == "ok"
        assert response.headers["Content-Type"] == "text/plain; charset=utf-8"

    def test_write_keeps_existing_content_type(self):
        """Test that write() does not override an explicit Content-Type."""
        response = HTTPResponse().set_content_type("text/csv")
        response.write("a,b")
        assert response.headers["Content-Type"] == "text/csv"


class TestResponseBuilder:
    """Tests for ResponseBuilder class."""

    def test_status(self):
        """Test setting status code."""
        response = ResponseBuilder().status(HTTPStatus.NOT_FOUND).build()
        assert response.status == HTTPStatus.NOT_FOUND

    def test_json_body(self):
        """Test JSON body encoding."""
        data = {"username": "kim", "age": 20}
        response = ResponseBuilder().json(data).build()

        assert response.headers["Content-Type"] == "application/json; charset=utf-8"
        assert response.json() == data

    def test_json_keeps_non_ascii(self):
        """Test that non-ASCII values are not escaped."""
        response = ResponseBuilder().json({"username": "김"}).build()
        assert "김" in response.text

    def test_text_body(self):
        """Test plain text body."""
        response = ResponseBuilder().text("ok").build()

        assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
        assert response.body == b"ok"

    def test_method_chaining(self):
        """Test fluent API chaining."""
        response = (ResponseBuilder()
            .status(HTTPStatus.OK)
            .header("X-Custom", "value")
            .json({"key": "value"})
            .build())

        assert response.status == HTTPStatus.OK
        assert response.headers["X-Custom"] == "value"
        assert b'"key"' in response.body

    def test_builder_to_bytes(self):
        """Test build-and-serialize in one step."""
        result = ResponseBuilder(server_name="test/1").text("hi").to_bytes()

        assert result.startswith(b"HTTP/1.1 200 OK\r\n")
        assert b"Server: test/1\r\n" in result
        assert result.endswith(b"\r\n\r\nhi")


class TestConvenienceFunctions:
    """Tests for convenience response functions."""

    def test_ok(self):
        """Test ok() function."""
        response = ok("ok")
        assert response.status == HTTPStatus.OK
        assert response.body == b"ok"

        response = ok({"msg": "hello"})
        assert response.json() == {"msg": "hello"}

    def test_ok_bytes_with_content_type(self):
        """Test ok() with raw bytes."""
        response = ok(b"\x00\x01", content_type="application/octet-stream")
        assert response.body == b"\x00\x01"
        assert response.headers["Content-Type"] == "application/octet-stream"

    def test_not_found(self):
        """Test not_found() function."""
        response = not_found("No endpoint for /nope")
        assert response.status == HTTPStatus.NOT_FOUND
        assert response.json() == {"error": "No endpoint for /nope"}

    def test_bad_request(self):
        """Test bad_request() function."""
        response = bad_request("Invalid input")
        assert response.status == HTTPStatus.BAD_REQUEST
        assert response.json() == {"error": "Invalid input"}

    def test_bad_request_with_parameter(self):
        """Test that the offending parameter is reported."""
        response = bad_request("missing", parameter="username")
        assert response.json() == {"error": "missing", "parameter": "username"}

    def test_error_response(self):
        """Test error_response() with an arbitrary status."""
        response = error_response(HTTPStatus.PAYLOAD_TOO_LARGE, "too big")
        assert response.status == 413
        assert response.json() == {"error": "too big"}

    def test_internal_error(self):
        """Test internal_error() function."""
        response = internal_error()
        assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Internal Server Error"}


class TestHTTPStatus:
    """Tests for HTTPStatus enum."""

    def test_status_phrases(self):
        """Test that all statuses have phrases."""
        assert HTTPStatus.OK.phrase == "OK"
        assert HTTPStatus.NOT_FOUND.phrase == "Not Found"
        assert HTTPStatus.METHOD_NOT_ALLOWED.phrase == "Method Not Allowed"
        assert HTTPStatus.INTERNAL_SERVER_ERROR.phrase == "Internal Server Error"

    def test_int_comparison(self):
        """Test that statuses compare and format as ints."""
        assert HTTPStatus.BAD_REQUEST == 400
        assert f"{HTTPStatus.OK}" == "200"

    def test_status_classes(self):
        """Test the status class helpers."""
        assert HTTPStatus.OK.is_success
        assert not HTTPStatus.OK.is_error
        assert HTTPStatus.BAD_REQUEST.is_client_error
        assert HTTPStatus.BAD_REQUEST.is_error
        assert HTTPStatus.HTTP_VERSION_NOT_SUPPORTED.is_server_error


class TestFormatHttpDate:
    """Tests for HTTP date formatting."""

    def test_format(self):
        """Test RFC 7231 date output."""
        dt = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert format_http_date(dt) == "Thu, 01 Jan 2026 12:00:00 GMT"
