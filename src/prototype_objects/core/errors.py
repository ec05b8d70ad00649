"""
Errors raised by the prototype object model.

Every error derives from PrototypeError so callers can catch the whole
family at once. The lookup and assignment errors also derive from
AttributeError, which keeps hasattr() and getattr(node, name, default)
behaving the way Python code expects.
"""


class PrototypeError(Exception):
    """Base exception for prototype object errors"""
    pass


class InvalidArgumentError(PrototypeError, ValueError):
    """Raised when a member name or method body is not acceptable"""
    pass


class MemberNotFoundError(PrototypeError, AttributeError):
    """Raised when a name is not defined anywhere in the prototype chain"""

    def __init__(self, node_id: str, name: str):
        super().__init__(f"Node {node_id} has no member '{name}'")
        # AttributeError.__init__ resets name, so set it afterwards
        self.node_id = node_id
        self.name = name


class ReadOnlyNodeError(PrototypeError, AttributeError):
    """Raised on direct attribute assignment or deletion on a node"""
    pass


class ConfigError(PrototypeError):
    """Raised when configuration values can't be parsed"""
    pass
