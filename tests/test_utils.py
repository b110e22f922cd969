"""Logging and formatting helpers."""

from sema_theme.core_types import oklch
from sema_theme.utils import (
    format_number_compact,
    format_oklch,
    key_value_pairs_to_string,
)


def test_format_number_compact():
    assert format_number_compact(0.0320) == "0.032"
    assert format_number_compact(1.0) == "1"
    assert format_number_compact(8) == "8"
    assert format_number_compact("dark") == "dark"


def test_key_value_pairs():
    line = key_value_pairs_to_string([("Variants", 4), ("Swatch", True), ("L", 0.5)])
    assert line == "Variants: 4  Swatch: on  L: 0.5"


def test_format_oklch():
    assert format_oklch(oklch(0.9, 0.032, 105.0)) == "oklch(0.9 0.032 105)"
