"""Catalogue of scalar activation functions."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum

ActivationCallable = Callable[[float], float]


def _sigmoid(x: float) -> float:
    if x >= 0:
        z = math.exp(-x)
        return 1.0 / (1.0 + z)
    z = math.exp(x)
    return z / (1.0 + z)


def _gaussian(x: float) -> float:
    return math.exp(-x * x / 2.0)


def _periodic(function: ActivationCallable) -> ActivationCallable:
    # math.sin and math.cos reject infinities; an overflowed sum yields nan.
    def wrapped(x: float) -> float:
        return function(x) if math.isfinite(x) else math.nan

    return wrapped


class ActivationFunction(str, Enum):
    """Named activation functions a node may apply to its accumulated input."""

    IDENTITY = "identity"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    RELU = "relu"
    GAUSSIAN = "gaussian"
    SIN = "sin"
    COS = "cos"
    ABS = "abs"
    SQUARE = "square"

    @classmethod
    def coerce(cls, value: ActivationFunction | str) -> ActivationFunction:
        """Coerce a string or ActivationFunction into an ActivationFunction."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"Unsupported activation value: {value!r}"
            raise TypeError(msg)
        try:
            return cls(value.strip().lower())
        except ValueError as error:
            valid = ", ".join(member.value for member in cls)
            msg = f"Invalid activation {value!r}. Expected one of: {valid}"
            raise ValueError(msg) from error

    def apply(self, x: float) -> float:
        """Apply the activation to ``x``."""
        return ACTIVATIONS[self](x)


ACTIVATIONS: dict[ActivationFunction, ActivationCallable] = {
    ActivationFunction.IDENTITY: lambda x: x,
    ActivationFunction.SIGMOID: _sigmoid,
    ActivationFunction.TANH: math.tanh,
    ActivationFunction.RELU: lambda x: x if x > 0.0 else 0.0,
    ActivationFunction.GAUSSIAN: _gaussian,
    ActivationFunction.SIN: _periodic(math.sin),
    ActivationFunction.COS: _periodic(math.cos),
    ActivationFunction.ABS: abs,
    ActivationFunction.SQUARE: lambda x: x * x,
}


__all__ = ["ACTIVATIONS", "ActivationCallable", "ActivationFunction"]
