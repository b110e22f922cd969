# sema_theme/palette.py
from __future__ import annotations

"""
Palette model for the sema editor themes.

A Palette holds six tuning knobs and answers two kinds of query:
  base(scale)        : neutral grey at a named point of the background..foreground axis
  pink() .. magenta(): nine accent colours at fixed OKLCh hues

Accent table (lightness tier, chroma tier, hue):
  pink        high  low     0
  red         low   high   30
  yellow      high  low   105
  green       high  medium 130
  light_green high  low   130
  blue        low   high  230
  light_blue  high  low   240
  lavender    high  low   285
  magenta     low   high  330

Everything here is pure. Colours are produced by the palette's colour_factory
(core_types.oklch unless injected), so no colour-space maths happens here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from . import constants as K
from .core_types import ColourFactory, Oklch, oklch


class BaseScale(Enum):
    """Named positions on the background..foreground axis, in order."""

    Bg = K.SCALE_BG
    LightBg = K.SCALE_LIGHT_BG
    LighterBg = K.SCALE_LIGHTER_BG
    DarkFg = K.SCALE_DARK_FG
    DimFg = K.SCALE_DIM_FG
    Fg = K.SCALE_FG
    BrightFg = K.SCALE_BRIGHT_FG

    @property
    def position(self) -> float:
        return float(self.value)


def lerp(x: float, lightness_range: Tuple[float, float]) -> float:
    """
    Linear interpolation across (start, end), unclamped.

    Same line as x * (end - start) + start, written so x=0 and x=1 land exactly
    on the endpoints. A reversed range (start > end) runs high to low.
    """
    start, end = lightness_range
    return (1.0 - x) * start + x * end


@dataclass(frozen=True)
class Palette:
    """Immutable set of palette knobs. See module docstring for the accent table."""

    base_lightness_range: Tuple[float, float]
    low_lightness: float
    high_lightness: float
    low_chroma: float
    medium_chroma: float
    high_chroma: float
    colour_factory: ColourFactory = field(default=oklch, compare=False, repr=False)

    # Base scale

    def base(self, scale: BaseScale) -> Oklch:
        """Grey (chroma 0, hue 0) at the scale position within base_lightness_range."""
        return self.colour_factory(
            lerp(scale.position, self.base_lightness_range), 0.0, 0.0
        )

    def scale(self) -> Dict[BaseScale, Oklch]:
        """All seven base colours, background first."""
        return {s: self.base(s) for s in BaseScale}

    # Accents

    def pink(self) -> Oklch:
        return self.colour_factory(self.high_lightness, self.low_chroma, 0.0)

    def red(self) -> Oklch:
        return self.colour_factory(self.low_lightness, self.high_chroma, 30.0)

    def yellow(self) -> Oklch:
        return self.colour_factory(self.high_lightness, self.low_chroma, 105.0)

    def green(self) -> Oklch:
        return self.colour_factory(self.high_lightness, self.medium_chroma, 130.0)

    def light_green(self) -> Oklch:
        return self.colour_factory(self.high_lightness, self.low_chroma, 130.0)

    def blue(self) -> Oklch:
        return self.colour_factory(self.low_lightness, self.high_chroma, 230.0)

    def light_blue(self) -> Oklch:
        return self.colour_factory(self.high_lightness, self.low_chroma, 240.0)

    def lavender(self) -> Oklch:
        return self.colour_factory(self.high_lightness, self.low_chroma, 285.0)

    def magenta(self) -> Oklch:
        return self.colour_factory(self.low_lightness, self.high_chroma, 330.0)

    def accents(self) -> Dict[str, Oklch]:
        """The nine accent colours by accessor name, in table order."""
        return {name: getattr(self, name)() for name in ACCENT_NAMES}


ACCENT_NAMES: Tuple[str, ...] = (
    "pink",
    "red",
    "yellow",
    "green",
    "light_green",
    "blue",
    "light_blue",
    "lavender",
    "magenta",
)


__all__ = ["BaseScale", "Palette", "ACCENT_NAMES", "lerp"]
