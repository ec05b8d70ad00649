"""
Prototype Objects: objects without classes.

Objects carry their attributes and methods directly. New objects are made
by extending an existing one, which becomes the new object's prototype.

The Prototype Object System provides:
- Root construction from a name -> value/callable mapping
- Accessors for every plain attribute (call to get, call with a value to set)
- extend(): attribute values are snapshotted, methods are shared live
- add_method(): new methods reach every descendant immediately
- Self-logging nodes (every node logs to itself)

Example:
    >>> from prototype_objects import create
    >>>
    >>> person = create(
    ...     first_name='Generic',
    ...     say_hi=lambda self: f"Hi, I'm {self.first_name()}",
    ... )
    >>> homer = person.extend(first_name='Homer')
    >>> homer.say_hi()
    "Hi, I'm Homer"
    >>> homer.prot() is person
    True
"""

from .core.errors import (
    PrototypeError,
    InvalidArgumentError,
    MemberNotFoundError,
    ReadOnlyNodeError,
    ConfigError,
)
from .core.node import Node
from .core.resolver import NOT_FOUND, resolve, iter_chain, chain_depth
from .core.self_logger import SelfLogger
from .config import ModelConfig, get_config, reload_config
from .runtime.object_model import ObjectModel, create, get_default_model, reset_default_model

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "create",
    "ObjectModel",
    "Node",
    "NOT_FOUND",
    "resolve",
    "iter_chain",
    "chain_depth",
    "SelfLogger",
    "ModelConfig",
    "get_config",
    "reload_config",
    "get_default_model",
    "reset_default_model",
    "PrototypeError",
    "InvalidArgumentError",
    "MemberNotFoundError",
    "ReadOnlyNodeError",
    "ConfigError",
]
