from __future__ import annotations

from pathlib import Path

from wirenet.builder import NetworkBuilder
from wirenet.reporters import EventLogger
from wirenet.templates import NodeType


def test_event_logger_appends_timestamped_lines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "events.log"
    with EventLogger(path) as logger:
        logger.log("first")
        logger.log_schedule((2, 0, 1))
        assert logger.path == path

    with EventLogger(path) as logger:
        logger.log_round(3, [1.0], [0.5, 0.25])

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(" first")
    assert lines[1].endswith("[schedule] 3 connections order=[2, 0, 1]")
    assert lines[2].endswith("[round 3] inputs=[1.0] outputs=[0.5, 0.25]")
    # Each line starts with an ISO-8601 UTC timestamp.
    assert "+00:00 " in lines[0]


def test_network_reports_each_round(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    with EventLogger(path) as logger:
        network = (
            NetworkBuilder(default_activation="identity", reporter=logger)
            .add_input()
            .add_nodes(NodeType.OUTPUT, 1)
            .add_normal_connection(0, 1, 2.0)
            .build()
        )
        network.evaluate([1.0])
        network.evaluate([2.0])

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[1].endswith("[round 1] inputs=[1.0] outputs=[2.0]")
    assert lines[2].endswith("[round 2] inputs=[2.0] outputs=[4.0]")


def test_closed_logger_drops_events(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    logger = EventLogger(path)
    logger.log("kept")
    logger.close()
    assert logger.closed

    logger.log_round(1, [1.0], [2.0])

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(" kept")
