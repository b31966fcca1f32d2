"""Parsing of raw HTTP responses captured from curl."""

import re
from dataclasses import dataclass, field

STATUS_LINE = re.compile(r"^HTTP/\d(?:\.\d)?\s+(\d{3})(?:\s+(.*))?$")


@dataclass
class Response:
    """A parsed HTTP response.

    Attributes:
        status: Numeric status code.
        reason: Reason phrase, possibly empty.
        headers: Header pairs in the order received.
        body: Everything after the blank line that ends the headers.
    """

    status: int
    reason: str = ""
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: str = ""

    @classmethod
    def from_raw_string(cls, raw: str) -> "Response":
        """
        Parse the output of `curl -i`.

        Redirects and interim responses produce several header blocks;
        the last one describes the body.

        Args:
            raw: Raw response text, with CRLF or LF line endings.

        Returns:
            The parsed Response.

        Raises:
            ValueError: If the text does not start with an HTTP status line.
        """
        text = raw.replace("\r\n", "\n")
        if not STATUS_LINE.match(text.split("\n", 1)[0].strip()):
            raise ValueError("Response does not start with an HTTP status line")

        while True:
            head, sep, rest = text.partition("\n\n")
            next_line = rest.split("\n", 1)[0].strip()
            if sep and STATUS_LINE.match(next_line):
                text = rest
                continue
            break

        lines = head.split("\n")
        match = STATUS_LINE.match(lines[0].strip())
        headers = []
        for line in lines[1:]:
            if not line.strip():
                continue
            name, colon, value = line.partition(":")
            if not colon:
                raise ValueError(f"Malformed header line: {line!r}")
            headers.append((name.strip(), value.strip()))

        return cls(
            status=int(match.group(1)),
            reason=(match.group(2) or "").strip(),
            headers=headers,
            body=rest,
        )

    def get_headers(self) -> str:
        """Headers formatted one per line as "Name: value"."""
        return "\n".join(f"{name}: {value}" for name, value in self.headers)
