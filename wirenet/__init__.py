"""Small recurrent computation graphs: templates, scheduling and evaluation."""

from __future__ import annotations

from .activations import ACTIVATIONS, ActivationFunction
from .builder import NetworkBuilder
from .config import BuilderConfig, load_builder_config
from .errors import ConnectionLoop, InvalidConnectionIndex, NetworkError
from .network import (
    Accumulating,
    ConsecutiveNetwork,
    NetworkRepresentation,
    Node,
    Settled,
)
from .reporters import EventLogger
from .scheduler import connection_order, precedence
from .templates import ConnectionTemplate, ConnectionType, NodeTemplate, NodeType

__all__ = [
    "ACTIVATIONS",
    "ActivationFunction",
    "NodeType",
    "ConnectionType",
    "NodeTemplate",
    "ConnectionTemplate",
    "NetworkBuilder",
    "NetworkRepresentation",
    "ConsecutiveNetwork",
    "Node",
    "Accumulating",
    "Settled",
    "connection_order",
    "precedence",
    "NetworkError",
    "ConnectionLoop",
    "InvalidConnectionIndex",
    "BuilderConfig",
    "load_builder_config",
    "EventLogger",
]
