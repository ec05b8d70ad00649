"""
Runtime for the Prototype Object System.

ObjectModel builds root nodes and derives new nodes from existing ones.
"""

from .object_model import ObjectModel, create

__all__ = [
    "ObjectModel",
    "create",
]
