"""Validation of text typed into input prompts."""

from dataclasses import dataclass

from .screens import InputKind


@dataclass(frozen=True)
class ParsedInput:
    """Input that passed validation, converted to its payload type."""

    value: str | int | tuple[str, str]


@dataclass(frozen=True)
class InvalidInput:
    """Represents input that was rejected."""

    original_input: str
    reason: str = "Invalid input"


class InputParser:
    """Parses prompt input strings into option payloads."""

    NUMERIC_KINDS = {InputKind.RECURSION_DEPTH, InputKind.MAX_REDIRECTS}

    def parse(self, kind: InputKind, input_str: str) -> ParsedInput | InvalidInput:
        """
        Parse the text submitted on a prompt.

        Args:
            kind: What the prompt captures.
            input_str: The raw text the user typed.

        Returns:
            ParsedInput with the payload, or InvalidInput with a reason.
        """
        cleaned = input_str.strip()

        if not cleaned:
            return InvalidInput(original_input=input_str, reason="Empty input")

        if kind in self.NUMERIC_KINDS:
            return self._parse_count(input_str, cleaned)

        if kind is InputKind.HEADERS:
            return self._parse_header(input_str, cleaned)

        return ParsedInput(cleaned)

    def _parse_count(self, input_str: str, cleaned: str) -> ParsedInput | InvalidInput:
        try:
            number = int(cleaned)
        except ValueError:
            return InvalidInput(
                original_input=input_str,
                reason=f"Not a number: {cleaned}",
            )
        if number < 0:
            return InvalidInput(
                original_input=input_str,
                reason="Number must not be negative",
            )
        return ParsedInput(number)

    def _parse_header(self, input_str: str, cleaned: str) -> ParsedInput | InvalidInput:
        key, colon, value = cleaned.partition(":")
        if not colon or not key.strip():
            return InvalidInput(
                original_input=input_str,
                reason="Headers must look like key:value",
            )
        return ParsedInput((key.strip(), value.strip()))
