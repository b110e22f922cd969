"""Hue wrapping, the default colour factory, and small helpers."""

import math

import numpy as np
import pytest

from sema_theme.core_types import (
    Hue,
    HueError,
    Oklch,
    oklch,
    rgb_to_hex,
)


@pytest.mark.parametrize(
    "degrees, expected",
    [(0.0, 0.0), (30.0, 30.0), (360.0, 0.0), (725.0, 5.0), (-30.0, 330.0)],
)
def test_hue_wraps(degrees, expected):
    assert Hue.from_degrees(degrees).degrees == pytest.approx(expected)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_hue_rejects_non_finite(bad):
    with pytest.raises(HueError):
        Hue.from_degrees(bad)


def test_hue_error_is_value_error():
    assert issubclass(HueError, ValueError)
    with pytest.raises(ValueError):
        oklch(0.5, 0.1, float("nan"))


def test_oklch_factory():
    c = oklch(0.9, 0.032, 465)
    assert c == Oklch(0.9, 0.032, Hue(105.0))
    row = c.as_array()
    assert row.dtype == np.float32
    assert row.tolist() == pytest.approx([0.9, 0.032, 105.0])


def test_rgb_to_hex():
    assert rgb_to_hex((255, 8, 0)) == "#ff0800"
