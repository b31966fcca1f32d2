"""Command builders and response parsing."""

from .curl import AuthKind, Curl
from .response import Response
from .wget import Wget

__all__ = ["AuthKind", "Curl", "Response", "Wget"]
