"""Realized networks and their evaluation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .activations import ActivationFunction
from .errors import InvalidConnectionIndex
from .scheduler import connection_order
from .templates import ConnectionTemplate, ConnectionType, NodeTemplate, NodeType

if TYPE_CHECKING:
    from .reporters import EventLogger


@dataclass(frozen=True, slots=True)
class Accumulating:
    """Node is collecting weighted contributions and has not been read."""

    total: float = 0.0


@dataclass(frozen=True, slots=True)
class Settled:
    """Node has been read; ``value`` is its cached activation."""

    value: float


NodeState = Accumulating | Settled


@dataclass(slots=True)
class Node:
    """A node with live per-round state."""

    node_type: NodeType
    activation: ActivationFunction
    state: NodeState = field(default_factory=Accumulating)

    def read(self) -> float:
        """Return the node's value, settling it on the first read."""
        if isinstance(self.state, Settled):
            return self.state.value
        value = self.activation.apply(self.state.total)
        self.state = Settled(value)
        return value

    def contribute(self, amount: float) -> None:
        """Add ``amount`` to the node, starting afresh if it had settled."""
        if isinstance(self.state, Settled):
            self.state = Accumulating(amount)
        else:
            self.state = Accumulating(self.state.total + amount)

    def load(self, value: float) -> None:
        """Set the node's value directly, bypassing its activation."""
        self.state = Settled(value)

    def reset(self) -> None:
        self.state = Accumulating()


@dataclass(frozen=True, slots=True)
class Connection:
    """Realized connection; payload identical to its template."""

    origin: int
    dest: int
    weight: float
    kind: ConnectionType

    @classmethod
    def from_template(cls, template: ConnectionTemplate) -> Connection:
        return cls(
            origin=template.origin,
            dest=template.dest,
            weight=template.weight,
            kind=template.kind,
        )


class NetworkRepresentation(Protocol):
    """Construction and evaluation contract shared by network representations."""

    @classmethod
    def from_templates(
        cls,
        nodes: Sequence[NodeTemplate],
        connections: Sequence[ConnectionTemplate],
        *,
        reporter: EventLogger | None = None,
    ) -> NetworkRepresentation: ...

    def evaluate(self, inputs: Sequence[float]) -> list[float]: ...


def validate_connections(
    nodes: Sequence[NodeTemplate],
    connections: Sequence[ConnectionTemplate],
) -> None:
    """Raise InvalidConnectionIndex for the first endpoint that is not a node.

    Endpoints must be ints (bools excluded) within the node sequence.
    """
    node_count = len(nodes)
    for index, connection in enumerate(connections):
        for node_index in (connection.origin, connection.dest):
            if (
                not isinstance(node_index, int)
                or isinstance(node_index, bool)
                or not 0 <= node_index < node_count
            ):
                raise InvalidConnectionIndex(index, node_index, node_count)


class ConsecutiveNetwork:
    """Network that fires its connections one after another in a fixed order.

    The order is computed once, on construction. Node values persist between
    calls to :meth:`evaluate`, which is what lets recurrent connections read
    the previous round's output.
    """

    __slots__ = ("_nodes", "_connections", "_order", "_reporter", "_rounds")

    def __init__(
        self,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
        *,
        order: Sequence[int],
        reporter: EventLogger | None = None,
    ) -> None:
        self._nodes = list(nodes)
        self._connections = tuple(connections)
        self._order = tuple(order)
        self._reporter = reporter
        self._rounds = 0

    @classmethod
    def from_templates(
        cls,
        nodes: Sequence[NodeTemplate],
        connections: Sequence[ConnectionTemplate],
        *,
        reporter: EventLogger | None = None,
    ) -> ConsecutiveNetwork:
        """Validate, schedule, and materialize a network from templates.

        Raises:
            InvalidConnectionIndex: if a connection references a missing node.
            ConnectionLoop: if no valid firing order exists.
        """
        validate_connections(nodes, connections)
        order = connection_order(connections)
        scheduled: list[Connection] = []
        for index in order:
            if not 0 <= index < len(connections):
                raise InvalidConnectionIndex(index, None, len(nodes))
            scheduled.append(Connection.from_template(connections[index]))

        realized = [Node(node.node_type, node.activation) for node in nodes]
        if reporter is not None:
            reporter.log_schedule(order)
        return cls(realized, scheduled, order=order, reporter=reporter)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def input_count(self) -> int:
        return sum(1 for node in self._nodes if node.node_type is NodeType.INPUT)

    @property
    def output_count(self) -> int:
        return sum(1 for node in self._nodes if node.node_type is NodeType.OUTPUT)

    @property
    def connections(self) -> tuple[Connection, ...]:
        """Connections in firing order."""
        return self._connections

    @property
    def order(self) -> tuple[int, ...]:
        """Template indices of the connections, in firing order."""
        return self._order

    @property
    def rounds(self) -> int:
        """Number of completed evaluations since construction or reset."""
        return self._rounds

    def node_state(self, index: int) -> NodeState:
        """Return the current state of the node at ``index``."""
        return self._nodes[index].state

    def reset(self) -> None:
        """Discard all node state, including recurrent carry-over."""
        for node in self._nodes:
            node.reset()
        self._rounds = 0

    def _load_inputs(self, inputs: Sequence[float]) -> None:
        input_nodes = (node for node in self._nodes if node.node_type is NodeType.INPUT)
        for node, value in zip(input_nodes, inputs):
            node.load(float(value))

    def evaluate(self, inputs: Sequence[float]) -> list[float]:
        """Run one round and return output values in declaration order.

        Input values are paired with input nodes positionally; surplus values
        or surplus input nodes are ignored.
        """
        self._load_inputs(inputs)

        nodes = self._nodes
        for connection in self._connections:
            value = nodes[connection.origin].read()
            nodes[connection.dest].contribute(value * connection.weight)

        outputs = [
            node.read() for node in nodes if node.node_type is NodeType.OUTPUT
        ]
        self._rounds += 1
        if self._reporter is not None:
            self._reporter.log_round(self._rounds, inputs, outputs)
        return outputs


__all__ = [
    "Accumulating",
    "Connection",
    "ConsecutiveNetwork",
    "NetworkRepresentation",
    "Node",
    "NodeState",
    "Settled",
    "validate_connections",
]
