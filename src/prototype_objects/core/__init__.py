"""
Core primitives of the Prototype Object System.

This module contains the fundamental building blocks:
- Node: an object with its own slots, methods and prototype link
- resolve: member lookup along the prototype chain
- SelfLogger: per-node logging
- Errors raised by all of the above

These primitives must be rock solid. They are tested extensively.
"""

from .errors import PrototypeError, InvalidArgumentError, MemberNotFoundError, ReadOnlyNodeError
from .node import Node, RESERVED_NAMES
from .resolver import NOT_FOUND, resolve

__all__ = [
    "Node",
    "RESERVED_NAMES",
    "NOT_FOUND",
    "resolve",
    "PrototypeError",
    "InvalidArgumentError",
    "MemberNotFoundError",
    "ReadOnlyNodeError",
]
