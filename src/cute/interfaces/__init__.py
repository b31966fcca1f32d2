"""Abstract interfaces for CuTE collaborators."""

from .command_builder import CommandBuilder, ExecutionError
from .storage import Storage, StorageHandle, StorageError
from .terminal import Frame, Terminal

__all__ = [
    "CommandBuilder",
    "ExecutionError",
    "Storage",
    "StorageHandle",
    "StorageError",
    "Frame",
    "Terminal",
]
