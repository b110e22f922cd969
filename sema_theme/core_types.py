# sema_theme/core_types.py
from __future__ import annotations

"""
Core type aliases, the perceptual colour value objects, and lightweight helpers.
"""

import math
from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3|4)
Lab = NDArray[np.float32]  # (..., 3) OKLab
Lch = NDArray[np.float32]  # (..., 3) OKLCh, hue in degrees

ThemeKind = str  # "dark" | "light"


class HueError(ValueError):
    """Raised when a hue in degrees cannot be wrapped onto the colour wheel."""


# Value objects


@dataclass(frozen=True)
class Hue:
    """Hue angle in degrees, always inside [0, 360)."""

    degrees: float

    @classmethod
    def from_degrees(cls, degrees: float) -> "Hue":
        """Wrap degrees onto [0, 360). Non-finite input raises HueError."""
        value = float(degrees)
        if not math.isfinite(value):
            raise HueError(f"hue must be finite, got {degrees!r}")
        wrapped = value % 360.0
        # -1e-20 % 360.0 rounds to 360.0
        if wrapped >= 360.0:
            wrapped = 0.0
        return cls(wrapped)


@dataclass(frozen=True)
class Oklch:
    """OKLCh colour: lightness 0..1, chroma >= 0, hue on the wheel."""

    l: float  # noqa: E741
    c: float
    h: Hue

    def as_array(self) -> Lch:
        """(3,) float32 row [L, C, h_degrees] for vectorised conversion."""
        return np.array([self.l, self.c, self.h.degrees], dtype=np.float32)


# Callable signatures

ColourFactory = Callable[[float, float, float], Oklch]


def oklch(lightness: float, chroma: float, hue_degrees: float) -> Oklch:
    """Default colour factory. Hue is checked via Hue.from_degrees."""
    return Oklch(float(lightness), float(chroma), Hue.from_degrees(hue_degrees))


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Image",
    "Lab",
    "Lch",
    "ThemeKind",
    "HueError",
    # value objects
    "Hue",
    "Oklch",
    # callable signatures
    "ColourFactory",
    "oklch",
    # helpers
    "rgb_to_hex",
]
