"""
Member resolution along the prototype chain.

A node's own method table holds both plain methods and the accessors
generated for its attribute slots, so one table per node is enough.
Lookup checks the receiving node first, then its prototype, and so on
until a root (a node without prototype) is reached.

Resolution always walks the live chain. Nothing is precomputed, which is
what makes a method added to a prototype visible to every descendant
that does not define the name itself, including descendants created
before the method was added.
"""

from typing import Any, Callable, Iterator, Optional, Union


class _NotFound:
    """Outcome of a lookup that reached the root without a match"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'NOT_FOUND'

    def __reduce__(self):
        return (_NotFound, ())


NOT_FOUND = _NotFound()


def iter_chain(node) -> Iterator[Any]:
    """Yield the node itself, then each prototype up to the root."""
    while node is not None:
        yield node
        node = node._prototype


def chain_depth(node) -> int:
    """Number of prot() steps from node to its root (0 for a root)."""
    return sum(1 for _ in iter_chain(node)) - 1


def find_owner(node, name: str) -> Optional[Any]:
    """First node in the chain whose own table defines name, or None."""
    for current in iter_chain(node):
        if name in current._methods:
            return current
    return None


def resolve(node, name: str) -> Union[Callable, _NotFound]:
    """
    Resolve a member name on node.

    Args:
        node: Node the lookup starts from
        name: Attribute or method name

    Returns:
        The unbound callable (first argument is the receiving node),
        or NOT_FOUND when no node in the chain defines the name
    """
    owner = find_owner(node, name)
    if owner is None:
        return NOT_FOUND
    return owner._methods[name]
