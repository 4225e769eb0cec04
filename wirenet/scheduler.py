"""Evaluation ordering for network connections."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Sequence

from .errors import ConnectionLoop
from .templates import ConnectionTemplate, ConnectionType


def precedence(
    connections: Sequence[ConnectionTemplate],
) -> dict[int, tuple[int, ...]]:
    """Return, for every connection index, the indices that must fire first.

    Connection ``i`` precedes connection ``j`` when either

    * ``i`` feeds the node a normal connection ``j`` reads from, so the node
      has received all of its input before it is read; or
    * ``i`` is recurrent and reads from the node ``j`` writes to, so the
      recurrent read sees the value from before the overwrite.

    A connection never depends on itself.
    """
    by_dest: dict[int, list[int]] = defaultdict(list)
    for index, connection in enumerate(connections):
        by_dest[connection.dest].append(index)

    required: dict[int, set[int]] = {index: set() for index in range(len(connections))}
    for j, connection in enumerate(connections):
        if connection.kind is ConnectionType.NORMAL:
            required[j].update(i for i in by_dest.get(connection.origin, ()) if i != j)
    for i, connection in enumerate(connections):
        if connection.kind is ConnectionType.RECURRENT:
            for j in by_dest.get(connection.origin, ()):
                if j != i:
                    required[j].add(i)

    return {index: tuple(sorted(before)) for index, before in required.items()}


def connection_order(connections: Sequence[ConnectionTemplate]) -> tuple[int, ...]:
    """Compute an order in which the connections can be fired.

    Returns a permutation of ``range(len(connections))``. Among connections
    that are ready at the same time the lowest index is placed first.

    Raises:
        ConnectionLoop: if the precedence relation contains a cycle. This
            includes cycles made only of recurrent connections, which a
            single flat order cannot represent.
    """
    required = precedence(connections)
    indegree: dict[int, int] = {index: len(before) for index, before in required.items()}
    successors: dict[int, list[int]] = defaultdict(list)
    for index, before in required.items():
        for predecessor in before:
            successors[predecessor].append(index)

    ready = [index for index, degree in indegree.items() if degree == 0]
    heapq.heapify(ready)
    order: list[int] = []

    while ready:
        index = heapq.heappop(ready)
        order.append(index)
        for successor in successors.get(index, []):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                heapq.heappush(ready, successor)

    if len(order) != len(connections):
        placed = set(order)
        raise ConnectionLoop(i for i in range(len(connections)) if i not in placed)

    return tuple(order)


__all__ = ["connection_order", "precedence"]
