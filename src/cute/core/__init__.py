"""Core components of CuTE."""

from .options import Option, OptionKind, OptionSet, Policy, policy_for
from .screens import Screen, InputKind, CommandFamily, AuthType
from .navigation import NavigationStack, Cursor
from .lazy_storage import LazyStorage
from .adapter import CommandAdapter, NoCommandError
from .input_parser import InputParser, ParsedInput, InvalidInput
from .key_parser import KeyParser, Action
from .session import Session
from .menu_renderer import MenuRenderer

__all__ = [
    "Option",
    "OptionKind",
    "OptionSet",
    "Policy",
    "policy_for",
    "Screen",
    "InputKind",
    "CommandFamily",
    "AuthType",
    "NavigationStack",
    "Cursor",
    "LazyStorage",
    "CommandAdapter",
    "NoCommandError",
    "InputParser",
    "ParsedInput",
    "InvalidInput",
    "KeyParser",
    "Action",
    "Session",
    "MenuRenderer",
]
