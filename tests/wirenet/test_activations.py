from __future__ import annotations

import math

import pytest
from wirenet.activations import ACTIVATIONS, ActivationFunction


def test_sigmoid_reference_values() -> None:
    func = ActivationFunction.SIGMOID
    assert abs(func.apply(-1.0) - 0.26894) < 1e-4
    assert abs(func.apply(1.0) - 0.73105) < 1e-4


def test_sigmoid_handles_large_magnitudes() -> None:
    func = ActivationFunction.SIGMOID
    assert func.apply(-1000.0) == pytest.approx(0.0)
    assert func.apply(1000.0) == pytest.approx(1.0)


@pytest.mark.parametrize(
    ("function", "x", "expected"),
    [
        (ActivationFunction.IDENTITY, -2.5, -2.5),
        (ActivationFunction.TANH, 0.5, math.tanh(0.5)),
        (ActivationFunction.RELU, -3.0, 0.0),
        (ActivationFunction.RELU, 3.0, 3.0),
        (ActivationFunction.GAUSSIAN, 0.0, 1.0),
        (ActivationFunction.GAUSSIAN, 2.0, math.exp(-2.0)),
        (ActivationFunction.SIN, 1.0, math.sin(1.0)),
        (ActivationFunction.COS, 1.0, math.cos(1.0)),
        (ActivationFunction.ABS, -4.0, 4.0),
        (ActivationFunction.SQUARE, -3.0, 9.0),
    ],
)
def test_activation_definitions(
    function: ActivationFunction, x: float, expected: float
) -> None:
    assert function.apply(x) == pytest.approx(expected)


def test_apply_is_deterministic() -> None:
    for function in ActivationFunction:
        assert function.apply(0.3) == function.apply(0.3)


def test_catalogue_covers_every_member() -> None:
    assert set(ACTIVATIONS) == set(ActivationFunction)


def test_coerce_accepts_names() -> None:
    assert ActivationFunction.coerce(" Tanh ") is ActivationFunction.TANH
    assert ActivationFunction.coerce(ActivationFunction.ABS) is ActivationFunction.ABS


def test_coerce_rejects_invalid_values() -> None:
    with pytest.raises(ValueError):
        ActivationFunction.coerce("softmax")

    with pytest.raises(TypeError):
        ActivationFunction.coerce(3)  # type: ignore[arg-type]


@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_periodic_functions_map_non_finite_to_nan(x: float) -> None:
    assert math.isnan(ActivationFunction.SIN.apply(x))
    assert math.isnan(ActivationFunction.COS.apply(x))
