"""
Object Model

Builds nodes and derives new nodes from existing ones.

The model:
- Creates root nodes from a name -> value/callable mapping
- Extends nodes (snapshot attributes, share methods through the chain)
- Validates member names before anything is built
- Gives each node its self-logger

The model holds configuration and an ID sequence only. It keeps no table
of the nodes it built; a node lives as long as something references it
(a variable, or a descendant's prototype link).
"""

import itertools
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..config import ModelConfig, get_config
from ..core.node import Node, validate_name
from ..core.self_logger import SelfLogger


class ObjectModel:
    """
    Construction engine for prototype nodes.
    """

    def __init__(
        self,
        name: str = 'proto',
        base_dir: Optional[Union[Path, str]] = None,
        config: Optional[ModelConfig] = None,
    ):
        """
        Initialize model.

        Args:
            name: Prefix for the IDs of nodes built by this model
            base_dir: Base directory for node logs (overrides config),
                      None keeps logs in memory unless configured
            config: Model configuration (default: global config)
        """
        self.name = name
        self.config = config or get_config()

        if base_dir is not None:
            self.base_dir = Path(base_dir)
        else:
            self.base_dir = self.config.log_dir

        self._ids = itertools.count(1)

    def create(self, attrs: Optional[Mapping[str, Any]] = None, /, **kwargs) -> Node:
        """
        Create a root node.

        Args:
            attrs: Mapping of member name to plain value (attribute) or
                   callable (method taking the node as first argument)
            **kwargs: More members, applied after attrs

        Returns:
            New Node without prototype

        Raises:
            InvalidArgumentError: If a member name is invalid
        """
        members = self._merge(attrs, kwargs)
        node = self._build(members)

        node._log(
            'INFO',
            'Node created',
            attributes=','.join(node.attributes()),
            methods=','.join(n for n in members if n not in node._slots),
        )

        return node

    def derive(
        self,
        prototype: Node,
        attrs: Optional[Mapping[str, Any]] = None,
        /,
        **kwargs,
    ) -> Node:
        """
        Extend prototype into a new node.

        Attributes of the prototype that attrs doesn't mention are copied
        by calling the prototype's accessor now (a snapshot, later changes
        on the prototype don't reach the new node). Methods are never
        copied: the new node resolves them through prototype at call time.

        Args:
            prototype: Node to extend
            attrs: Members to add or override
            **kwargs: More members, applied after attrs

        Returns:
            New Node whose prototype is prototype
        """
        members = self._merge(attrs, kwargs)

        copied = []
        for name in prototype.attributes():
            if name not in members:
                members[name] = getattr(prototype, name)()
                copied.append(name)

        node = self._build(members, prototype=prototype)

        node._log(
            'INFO',
            'Node extended',
            prototype_id=prototype.node_id,
            attributes=','.join(node.attributes()),
            copied=','.join(copied),
        )
        prototype._log('INFO', 'Extended by', child_id=node.node_id)

        return node

    def _merge(self, attrs: Optional[Mapping[str, Any]], kwargs: Dict[str, Any]) -> Dict[str, Any]:
        members = dict(attrs or {})
        members.update(kwargs)

        for name in members:
            validate_name(name)

        return members

    def _build(self, members: Dict[str, Any], prototype: Optional[Node] = None) -> Node:
        node_id = f'{self.name}-{next(self._ids)}'

        node = Node(
            model=self,
            node_id=node_id,
            prototype=prototype,
            logger=self._make_logger(node_id),
        )

        for name, value in members.items():
            node._install(name, value)

        return node

    def _make_logger(self, node_id: str) -> Optional[SelfLogger]:
        if not self.config.self_logging:
            return None

        return SelfLogger(
            object_id=node_id,
            base_dir=self.base_dir,
            max_log_size=self.config.max_log_size,
            max_entries=self.config.max_log_entries,
            min_level=self.config.log_level,
        )


# Default model (lazy loaded)
_default_model = None


def get_default_model() -> ObjectModel:
    """Get the model used by the module-level create()"""
    global _default_model
    if _default_model is None:
        _default_model = ObjectModel()
    return _default_model


def reset_default_model() -> None:
    """Drop the default model; the next create() builds a fresh one"""
    global _default_model
    _default_model = None


def create(attrs: Optional[Mapping[str, Any]] = None, /, **kwargs) -> Node:
    """Create a root node with the default model"""
    return get_default_model().create(attrs, **kwargs)
