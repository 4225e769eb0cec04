"""Errors raised while realizing a network from its templates."""

from __future__ import annotations

from collections.abc import Iterable


class NetworkError(ValueError):
    """Base class for failures reported by network construction."""


class ConnectionLoop(NetworkError):
    """The connections cannot be ordered without violating a dependency."""

    def __init__(self, remaining: Iterable[int]) -> None:
        self.remaining = tuple(sorted(remaining))
        msg = (
            "Connection dependency cycle detected among connections "
            f"{list(self.remaining)}."
        )
        super().__init__(msg)


class InvalidConnectionIndex(NetworkError):
    """A connection index does not resolve against the templates.

    ``node_index`` is the offending endpoint as given on the template. It may
    be a non-int value from a foreign template, or ``None`` when the
    connection index itself does not resolve.
    """

    def __init__(
        self,
        connection_index: int,
        node_index: object,
        node_count: int,
    ) -> None:
        self.connection_index = connection_index
        self.node_index = node_index
        self.node_count = node_count
        if node_index is None:
            msg = (
                f"Connection {connection_index} does not resolve against "
                f"the {node_count} defined nodes."
            )
        else:
            msg = (
                f"Connection {connection_index} references node {node_index!r}, "
                f"but only {node_count} nodes are defined."
            )
        super().__init__(msg)


__all__ = ["NetworkError", "ConnectionLoop", "InvalidConnectionIndex"]
