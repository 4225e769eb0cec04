"""Configuration loading for network builders."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .activations import ActivationFunction


@dataclass(slots=True)
class BuilderConfig:
    default_activation: ActivationFunction = ActivationFunction.SIGMOID
    event_log: Path | None = None

    def __post_init__(self) -> None:
        self.default_activation = ActivationFunction.coerce(self.default_activation)

    def resolve(self, base_path: Path) -> BuilderConfig:
        return BuilderConfig(
            default_activation=self.default_activation,
            event_log=(
                (base_path / self.event_log).resolve() if self.event_log else None
            ),
        )


def _load_yaml(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        msg = f"Expected mapping in YAML file: {path}"
        raise ValueError(msg)
    return data


def load_builder_config(path: Path) -> BuilderConfig:
    path = Path(path)
    data = _load_yaml(path)
    config = BuilderConfig(
        default_activation=ActivationFunction.coerce(
            data.get("default_activation", ActivationFunction.SIGMOID)
        ),
        event_log=(Path(data["event_log"]) if data.get("event_log") else None),
    )
    return config.resolve(path.parent)


__all__ = ["BuilderConfig", "load_builder_config"]
