"""Chainable builder for describing networks incrementally."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .activations import ActivationFunction
from .network import ConsecutiveNetwork, NetworkRepresentation
from .reporters import EventLogger
from .templates import ConnectionTemplate, ConnectionType, NodeTemplate, NodeType

if TYPE_CHECKING:
    from .config import BuilderConfig


class NetworkBuilder:
    """Collects node and connection templates and realizes them on demand.

    Nodes are addressed by the order in which they were added. Connections
    may reference nodes that have not been added yet; indices are only
    checked by :meth:`build`.
    """

    def __init__(
        self,
        *,
        default_activation: ActivationFunction | str = ActivationFunction.SIGMOID,
        reporter: EventLogger | None = None,
    ) -> None:
        self._nodes: list[NodeTemplate] = []
        self._connections: list[ConnectionTemplate] = []
        self._default_activation = ActivationFunction.coerce(default_activation)
        self._reporter = reporter
        self._owns_reporter = False

    def __enter__(self) -> NetworkBuilder:
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()

    @classmethod
    def from_config(
        cls,
        config: BuilderConfig,
        *,
        reporter: EventLogger | None = None,
    ) -> NetworkBuilder:
        """Create a builder using the defaults from ``config``.

        When ``reporter`` is omitted and the config names an event log, a
        logger appending to that file is opened; the builder owns it and
        closes it in :meth:`close`, so use the builder as a context manager.
        """
        if reporter is not None or config.event_log is None:
            return cls(default_activation=config.default_activation, reporter=reporter)
        builder = cls(
            default_activation=config.default_activation,
            reporter=EventLogger(config.event_log),
        )
        builder._owns_reporter = True
        return builder

    def close(self) -> None:
        """Close the event logger if this builder opened it."""
        if self._owns_reporter and self._reporter is not None:
            self._reporter.close()

    @property
    def reporter(self) -> EventLogger | None:
        return self._reporter

    @property
    def default_activation(self) -> ActivationFunction:
        return self._default_activation

    @property
    def nodes(self) -> tuple[NodeTemplate, ...]:
        return tuple(self._nodes)

    @property
    def connections(self) -> tuple[ConnectionTemplate, ...]:
        return tuple(self._connections)

    def set_default_activation(
        self, activation: ActivationFunction | str
    ) -> NetworkBuilder:
        """Set the activation used by later :meth:`add_nodes` calls."""
        self._default_activation = ActivationFunction.coerce(activation)
        return self

    def add_node(
        self,
        node_type: NodeType | str,
        activation: ActivationFunction | str,
    ) -> NetworkBuilder:
        self._nodes.append(NodeTemplate(node_type, activation))
        return self

    def add_nodes(self, node_type: NodeType | str, count: int) -> NetworkBuilder:
        """Append ``count`` nodes using the current default activation."""
        if count < 0:
            msg = "count must be non-negative."
            raise ValueError(msg)
        for _ in range(count):
            self.add_node(node_type, self._default_activation)
        return self

    def add_input(self) -> NetworkBuilder:
        """Append an input node; inputs always use the identity activation."""
        return self.add_node(NodeType.INPUT, ActivationFunction.IDENTITY)

    def add_inputs(self, count: int) -> NetworkBuilder:
        if count < 0:
            msg = "count must be non-negative."
            raise ValueError(msg)
        for _ in range(count):
            self.add_input()
        return self

    def add_connection(
        self,
        origin: int,
        dest: int,
        weight: float,
        kind: ConnectionType | str = ConnectionType.NORMAL,
    ) -> NetworkBuilder:
        self._connections.append(ConnectionTemplate(origin, dest, weight, kind))
        return self

    def add_normal_connection(
        self, origin: int, dest: int, weight: float
    ) -> NetworkBuilder:
        return self.add_connection(origin, dest, weight, ConnectionType.NORMAL)

    def add_recurrent_connection(
        self, origin: int, dest: int, weight: float
    ) -> NetworkBuilder:
        return self.add_connection(origin, dest, weight, ConnectionType.RECURRENT)

    def build(
        self,
        representation: type[NetworkRepresentation] = ConsecutiveNetwork,
    ) -> NetworkRepresentation:
        """Realize the current templates as ``representation``.

        The network is built from a snapshot; later edits to the builder do
        not affect it.

        Raises:
            InvalidConnectionIndex: if a connection references a missing node.
            ConnectionLoop: if the connections cannot be ordered.
        """
        return representation.from_templates(
            self.nodes,
            self.connections,
            reporter=self._reporter,
        )


__all__ = ["NetworkBuilder"]
