"""Template primitives (nodes and connections) describing a network."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .activations import ActivationFunction


class NodeType(str, Enum):
    """Enumeration of supported node categories."""

    BIAS = "bias"
    INPUT = "input"
    OUTPUT = "output"
    HIDDEN = "hidden"

    @classmethod
    def coerce(cls, value: NodeType | str) -> NodeType:
        """Coerce a string or NodeType into a NodeType instance."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"Unsupported node type value: {value!r}"
            raise TypeError(msg)
        try:
            return cls(value.strip().lower())
        except ValueError as error:
            valid = ", ".join(member.value for member in cls)
            msg = f"Invalid node type {value!r}. Expected one of: {valid}"
            raise ValueError(msg) from error


class ConnectionType(str, Enum):
    """Whether a connection feeds forward or back into an earlier stage."""

    NORMAL = "normal"
    RECURRENT = "recurrent"

    @classmethod
    def coerce(cls, value: ConnectionType | str) -> ConnectionType:
        """Coerce a string or ConnectionType into a ConnectionType instance."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"Unsupported connection type value: {value!r}"
            raise TypeError(msg)
        try:
            return cls(value.strip().lower())
        except ValueError as error:
            valid = ", ".join(member.value for member in cls)
            msg = f"Invalid connection type {value!r}. Expected one of: {valid}"
            raise ValueError(msg) from error


@dataclass(frozen=True, slots=True)
class NodeTemplate:
    """A node as declared on the builder; its index is its identity."""

    node_type: NodeType
    activation: ActivationFunction

    def __post_init__(self) -> None:
        object.__setattr__(self, "node_type", NodeType.coerce(self.node_type))
        object.__setattr__(
            self, "activation", ActivationFunction.coerce(self.activation)
        )


@dataclass(frozen=True, slots=True)
class ConnectionTemplate:
    """A weighted edge between two node indices.

    Indices are not checked against the node sequence here; that happens when
    the templates are realized into a network.
    """

    origin: int
    dest: int
    weight: float
    kind: ConnectionType = ConnectionType.NORMAL

    def __post_init__(self) -> None:
        try:
            weight = float(self.weight)
        except (TypeError, ValueError) as error:
            msg = f"weight must be convertible to float, got {self.weight!r}"
            raise ValueError(msg) from error
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "kind", ConnectionType.coerce(self.kind))

    @property
    def is_recurrent(self) -> bool:
        return self.kind is ConnectionType.RECURRENT


__all__ = ["NodeType", "ConnectionType", "NodeTemplate", "ConnectionTemplate"]
