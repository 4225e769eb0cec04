"""Timestamped event log for network scheduling and evaluation rounds.

Each line reads ``<UTC ISO timestamp> <message>``. Networks write a
``[schedule]`` line when they are built and a ``[round N]`` line after every
evaluation.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any


def _format_values(values: Sequence[float]) -> str:
    return repr([float(value) for value in values])


class EventLogger:
    """Appends network events to a UTF-8 text file.

    A network may outlive the logger it was given; events recorded after
    :meth:`close` are dropped.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._handle: IO[str] = self._path.open("a", encoding="utf-8")

    def __enter__(self) -> EventLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def log(self, message: str) -> None:
        if self.closed:
            return
        stamp = datetime.now(timezone.utc).isoformat()
        self._handle.write(f"{stamp} {message}\n")
        self._handle.flush()

    def log_schedule(self, order: Sequence[int]) -> None:
        """Record the firing order chosen for a newly built network."""
        self.log(f"[schedule] {len(order)} connections order={list(order)}")

    def log_round(
        self,
        round_index: int,
        inputs: Sequence[float],
        outputs: Sequence[float],
    ) -> None:
        """Record the inputs and outputs of one evaluation round."""
        self.log(
            f"[round {round_index}] inputs={_format_values(inputs)} "
            f"outputs={_format_values(outputs)}"
        )

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()


__all__ = ["EventLogger"]
