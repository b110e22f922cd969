# sema_theme/__init__.py
"""
sema_theme package.

Purpose:
  OKLCh palettes for the sema editor themes. See build_themes.py for the CLI.

Public API:
  Palette        : the palette model (base scale + nine accents).
  BaseScale      : named background..foreground positions.
  presets        : the eight named presets and build_preset(name).
  build_themes   : run a theme builder over a list of variants.
  core_types     : Oklch, Hue, the colour factory signature, small helpers.
  colour_convert : OKLCh -> sRGB for previews.
  swatch         : Pillow swatch sheets (SwatchWriter).
  utils          : logging and formatting helpers.

Quick start:
  from sema_theme import presets, BaseScale
  p = presets.chroma()
  p.base(BaseScale.Fg), p.pink()
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import colour_convert
from . import palette
from . import presets
from . import swatch
from . import utils

from .core_types import Hue, HueError, Oklch, oklch
from .palette import BaseScale, Palette
from .presets import build_preset, preset_names
from .build import (
    ALL_VARIANTS,
    DARK_VARIANTS,
    LIGHT_VARIANTS,
    ThemeBuilder,
    ThemeVariant,
    build_themes,
    variant_for_preset,
)

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "colour_convert",
    "palette",
    "presets",
    "swatch",
    "utils",
    "Hue",
    "HueError",
    "Oklch",
    "oklch",
    "BaseScale",
    "Palette",
    "build_preset",
    "preset_names",
    "ALL_VARIANTS",
    "DARK_VARIANTS",
    "LIGHT_VARIANTS",
    "ThemeBuilder",
    "ThemeVariant",
    "build_themes",
    "variant_for_preset",
]
