"""
Node

The only entity of the prototype object model.

A Node is:
- Slots (attribute values, names fixed at construction)
- Methods (one table shared by plain methods and slot accessors)
- Prototype (the node it was extended from, None for roots)
- Logs (every node logs to itself)

Member access on a node (node.say_hi()) is resolved at call time by
walking the prototype chain, and the resolved callable is always bound
to the node the access was made on.
"""

import numbers
import types
from typing import Any, Callable, Dict, List, Optional

from .errors import InvalidArgumentError, MemberNotFoundError, ReadOnlyNodeError
from .resolver import NOT_FOUND, resolve, iter_chain, find_owner
from .self_logger import SelfLogger


_NO_VALUE = object()


def is_truthy(value: Any) -> bool:
    """
    Whether an accessor call with value should overwrite the slot.

    Only scalars can be "no value": None, False, numeric zero, the empty
    string and the string '0' leave the slot untouched. Every other
    object (lists, dicts, nodes, arrays...) counts as a value, even when
    empty, and its __bool__ is never called.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Number):
        return value != 0
    if isinstance(value, str):
        return value not in ('', '0')
    return True


def make_accessor(name: str) -> Callable:
    """Build the getter/setter method for the slot called name."""

    def accessor(self, value=_NO_VALUE):
        if value is _NO_VALUE:
            return self._slots.get(name)

        if not is_truthy(value):
            self._log('DEBUG', 'Falsy value ignored', name=name, value=repr(value))
            return self._slots.get(name)

        if name not in self._slots:
            raise ReadOnlyNodeError(
                f"Node {self._node_id} has no slot '{name}' and slots can't be added"
            )

        self._slots[name] = value
        self._log('DEBUG', 'Attribute set', name=name, value=repr(value))
        return value

    accessor.__name__ = name
    accessor.__qualname__ = f'accessor.{name}'
    accessor.__doc__ = f"Get or set the '{name}' slot"
    accessor.is_accessor = True
    return accessor


def validate_name(name: Any) -> str:
    """
    Check a member name.

    Raises:
        InvalidArgumentError: If name is empty, not a string, not an
            identifier, or clashes with the node API
    """
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError("You must provide the name of the member")
    if not name.isidentifier():
        raise InvalidArgumentError(f"Member name must be an identifier, got {name!r}")
    if name.startswith('__') or name in RESERVED_NAMES:
        raise InvalidArgumentError(f"Member name {name!r} is reserved")
    return name


class Node:
    """
    A prototype-based object.

    Nodes are built by an ObjectModel (create/extend), never directly.
    """

    __slots__ = (
        '_model',
        '_node_id',
        '_slots',
        '_methods',
        '_prototype',
        '_attribute_names',
        '_logger',
    )

    def __init__(
        self,
        model,
        node_id: str,
        prototype: Optional['Node'] = None,
        logger: Optional[SelfLogger] = None,
    ):
        """
        Initialize an empty node.

        Args:
            model: ObjectModel that builds this node and its descendants
            node_id: Unique ID for this node
            prototype: Node this one was extended from
            logger: Self-logger, None disables logging for this node
        """
        init = object.__setattr__
        init(self, '_model', model)
        init(self, '_node_id', node_id)
        init(self, '_slots', {})
        init(self, '_methods', {})
        init(self, '_prototype', prototype)
        init(self, '_attribute_names', [])
        init(self, '_logger', logger)

    # -- construction (used by ObjectModel) --

    def _install(self, name: str, value: Any) -> None:
        """Install one entry of a construction mapping"""
        if callable(value):
            self._methods[name] = value
            return

        self._slots[name] = value
        self._methods[name] = make_accessor(name)
        if name not in self._attribute_names:
            self._attribute_names.append(name)

    def _log(self, level: str, message: str, **kwargs) -> None:
        if self._logger is not None:
            self._logger.log(level, message, node_id=self._node_id, **kwargs)

    # -- public API --

    @property
    def node_id(self) -> str:
        return self._node_id

    def extend(self, attrs: Optional[Dict[str, Any]] = None, /, **kwargs) -> 'Node':
        """
        Create a new node with this node as its prototype.

        Attribute values missing from attrs are copied from this node as
        they are right now. Methods are not copied; the new node finds
        them through its prototype on every call.
        """
        return self._model.derive(self, attrs, **kwargs)

    def add_method(self, name: str, func: Callable) -> None:
        """
        Add (or replace) a method on this node.

        Every descendant that does not define name itself sees the new
        method immediately.

        Raises:
            InvalidArgumentError: If name is not a valid member name or
                func is not callable
        """
        try:
            validate_name(name)
            if not callable(func):
                raise InvalidArgumentError("You must provide a callable")
        except InvalidArgumentError as e:
            self._log('ERROR', 'add_method rejected', name=repr(name), error=str(e))
            raise

        replaced = name in self._methods
        self._methods[name] = func

        if replaced:
            self._log('WARNING', 'Method replaced', name=name)
        else:
            self._log('INFO', 'Method added', name=name)

    def attributes(self) -> List[str]:
        """Names of the attributes declared when this node was built"""
        return list(self._attribute_names)

    def prot(self) -> Optional['Node']:
        """The node this one was extended from (None for roots)"""
        return self._prototype

    def can(self, name: str) -> bool:
        """Whether name is part of the node API or resolves in the chain"""
        if not isinstance(name, str):
            return False
        if name in API_NAMES:
            return True
        return resolve(self, name) is not NOT_FOUND

    def get_logs(self, level=None, limit=None, **filters) -> List[Dict[str, Any]]:
        """Get this node's log entries"""
        if self._logger is None:
            return []
        return self._logger.get_logs(level=level, limit=limit, **filters)

    # -- dynamic member access --

    def __getattr__(self, name: str):
        # Only called when normal lookup fails
        if name.startswith('__') or name in Node.__slots__:
            raise AttributeError(name)

        func = resolve(self, name)
        if func is NOT_FOUND:
            raise MemberNotFoundError(self._node_id, name)
        return types.MethodType(func, self)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ReadOnlyNodeError(
            f"Can't assign '{name}' on node {self._node_id}; "
            f"use the accessor (node.{name}(value)) or add_method()"
        )

    def __delattr__(self, name: str) -> None:
        raise ReadOnlyNodeError(f"Can't delete '{name}' from node {self._node_id}")

    def __dir__(self):
        names = set(object.__dir__(self))
        for node in iter_chain(self):
            names.update(node._methods)
        return sorted(names)

    def __repr__(self) -> str:
        prototype_id = self._prototype._node_id if self._prototype is not None else None
        return (
            f"<Node {self._node_id} attributes={self._attribute_names!r} "
            f"prototype={prototype_id}>"
        )

    def owner_of(self, name: str) -> Optional['Node']:
        """The node in the chain that defines name, or None"""
        return find_owner(self, name)


RESERVED_NAMES = frozenset(name for name in dir(Node) if not name.startswith('__'))
API_NAMES = frozenset(name for name in RESERVED_NAMES if not name.startswith('_'))
