from __future__ import annotations

import pytest
from wirenet.errors import ConnectionLoop
from wirenet.scheduler import connection_order, precedence
from wirenet.templates import ConnectionTemplate, ConnectionType

NORMAL = ConnectionType.NORMAL
RECURRENT = ConnectionType.RECURRENT


def _connections(
    *definitions: tuple[int, int, ConnectionType],
) -> list[ConnectionTemplate]:
    return [
        ConnectionTemplate(origin=origin, dest=dest, weight=1.0, kind=kind)
        for origin, dest, kind in definitions
    ]


def test_empty_connection_set() -> None:
    assert connection_order([]) == ()


def test_chain_added_in_reverse_is_reordered() -> None:
    connections = _connections((1, 2, NORMAL), (0, 1, NORMAL))
    assert connection_order(connections) == (1, 0)


def test_independent_connections_keep_index_order() -> None:
    connections = _connections((0, 2, NORMAL), (1, 2, NORMAL), (0, 3, NORMAL))
    assert connection_order(connections) == (0, 1, 2)


def test_precedence_rules() -> None:
    connections = _connections(
        (0, 1, NORMAL),
        (1, 2, NORMAL),
        (2, 3, RECURRENT),
    )
    required = precedence(connections)
    # 1 reads node 1 after 0 writes it; 2 reads node 2 before 1 writes it.
    assert required[1] == (0, 2)
    # Recurrent reads do not wait for writers of their origin.
    assert required[2] == ()
    assert required[0] == ()


def test_recurrent_reads_before_overwrite() -> None:
    connections = _connections(
        (0, 1, NORMAL),
        (1, 2, NORMAL),
        (2, 3, RECURRENT),
    )
    assert connection_order(connections) == (0, 2, 1)


def test_order_is_a_permutation() -> None:
    connections = _connections(
        (0, 3, NORMAL),
        (3, 4, NORMAL),
        (1, 3, NORMAL),
        (4, 5, NORMAL),
        (5, 3, RECURRENT),
        (2, 4, NORMAL),
    )
    order = connection_order(connections)
    assert sorted(order) == list(range(len(connections)))
    for index, before in precedence(connections).items():
        for predecessor in before:
            assert order.index(predecessor) < order.index(index)


def test_normal_cycle_raises() -> None:
    connections = _connections((0, 1, NORMAL), (1, 0, NORMAL))
    with pytest.raises(ConnectionLoop) as excinfo:
        connection_order(connections)
    assert excinfo.value.remaining == (0, 1)


def test_recurrent_cycle_is_rejected() -> None:
    connections = _connections((0, 1, RECURRENT), (1, 0, RECURRENT))
    with pytest.raises(ConnectionLoop):
        connection_order(connections)


def test_cycle_reports_only_stuck_connections() -> None:
    connections = _connections(
        (0, 1, NORMAL),
        (1, 2, NORMAL),
        (2, 1, NORMAL),
    )
    with pytest.raises(ConnectionLoop) as excinfo:
        connection_order(connections)
    assert excinfo.value.remaining == (1, 2)


def test_self_loops_are_schedulable() -> None:
    connections = _connections((0, 0, RECURRENT), (1, 1, NORMAL))
    assert connection_order(connections) == (0, 1)
