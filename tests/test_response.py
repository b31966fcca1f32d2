"""Tests for parsing raw HTTP responses."""

import pytest
from cute.request import Response


class TestResponse:
    """Tests for Response.from_raw_string."""

    def test_parse(self, raw_response):
        """Status, headers and body are split out."""
        response = Response.from_raw_string(raw_response)
        assert response.status == 200
        assert response.reason == "OK"
        assert response.headers == [("Content-Type", "text/plain"), ("Content-Length", "5")]
        assert response.body == "hello"

    def test_lf_line_endings(self):
        """Plain newlines are accepted."""
        response = Response.from_raw_string("HTTP/2 404\nserver: x\n\nmissing")
        assert response.status == 404
        assert response.reason == ""
        assert response.body == "missing"

    def test_redirect_keeps_last_block(self):
        """The final header block describes the body."""
        raw = (
            "HTTP/1.1 301 Moved Permanently\r\nLocation: /new\r\n\r\n"
            "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n<p>hi</p>"
        )
        response = Response.from_raw_string(raw)
        assert response.status == 200
        assert response.headers == [("Content-Type", "text/html")]
        assert response.body == "<p>hi</p>"

    def test_body_may_contain_blank_lines(self):
        """Only the first blank line ends the headers."""
        response = Response.from_raw_string("HTTP/1.1 200 OK\n\nline1\n\nline2")
        assert response.body == "line1\n\nline2"

    def test_header_value_with_colon(self):
        """Header values keep their colons."""
        response = Response.from_raw_string("HTTP/1.1 200 OK\nDate: Mon, 01 Jan 10:00:00\n\n")
        assert response.headers == [("Date", "Mon, 01 Jan 10:00:00")]

    def test_no_headers(self):
        """A bare status line parses with no headers."""
        response = Response.from_raw_string("HTTP/1.1 200 OK\n\n")
        assert response.headers == []
        assert response.get_headers() == ""

    def test_get_headers(self, raw_response):
        """Headers format one per line."""
        response = Response.from_raw_string(raw_response)
        assert response.get_headers() == "Content-Type: text/plain\nContent-Length: 5"

    def test_not_http(self):
        """Text without a status line is rejected."""
        with pytest.raises(ValueError):
            Response.from_raw_string("<html></html>")

    def test_malformed_header(self):
        """A header line without a colon is rejected."""
        with pytest.raises(ValueError, match="Malformed header"):
            Response.from_raw_string("HTTP/1.1 200 OK\nbroken\n\nbody")
