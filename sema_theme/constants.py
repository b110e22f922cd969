# sema_theme/constants.py
"""
Global tunables used across the project.

- Base scale positions (SCALE_*)
- Preset knobs for the dark and light palettes (DARK_*, LIGHT_*)
- Theme naming
- Swatch sheet geometry (SWATCH_*)
"""
from __future__ import annotations

from typing import Tuple

# ==========================
# Base scale (bg .. fg axis)
# ==========================
SCALE_BG: float = 0.0
SCALE_LIGHT_BG: float = 0.1
SCALE_LIGHTER_BG: float = 0.25
SCALE_DARK_FG: float = 0.35
SCALE_DIM_FG: float = 0.6
SCALE_FG: float = 0.85
SCALE_BRIGHT_FG: float = 1.0

# ================
# Dark palettes
# ================
DARK_BASE_LIGHTNESS: Tuple[float, float] = (0.17, 1.0)
DARK_LOW_LIGHTNESS: float = 0.8
DARK_HIGH_LIGHTNESS: float = 0.9
DARK_LOW_CHROMA: float = 0.032
DARK_MEDIUM_CHROMA: float = 0.07
DARK_HIGH_CHROMA: float = 0.1

# chroma variant
DARK_CHROMA_LOW_CHROMA: float = 0.06
DARK_CHROMA_MEDIUM_CHROMA: float = 0.09
DARK_CHROMA_HIGH_CHROMA: float = 0.11
DARK_CHROMA_HIGH_LIGHTNESS: float = 0.86

# soft variant
DARK_SOFT_BASE_LIGHTNESS: Tuple[float, float] = (0.25, 0.95)

# ================
# Light palettes
# ================
LIGHT_BASE_LIGHTNESS: Tuple[float, float] = (1.0, 0.2)  # reversed: bg is brightest
LIGHT_LOW_LIGHTNESS: float = 0.65
LIGHT_HIGH_LIGHTNESS: float = 0.55
LIGHT_LOW_CHROMA: float = 0.04
LIGHT_MEDIUM_CHROMA: float = 0.06
LIGHT_HIGH_CHROMA: float = 0.08

LIGHT_CHROMA_LOW_CHROMA: float = 0.09
LIGHT_CHROMA_MEDIUM_CHROMA: float = 0.1
LIGHT_CHROMA_HIGH_CHROMA: float = 0.12

LIGHT_SOFT_BASE_LIGHTNESS: Tuple[float, float] = (0.96, 0.3)

# ============
# Theme names
# ============
THEME_FAMILY: str = "sema"

# ======================
# Swatch sheet (SWATCH_)
# ======================
SWATCH_CELL: int = 64
SWATCH_GAP: int = 8
SWATCH_MARGIN: int = 16
SWATCH_SUFFIX: str = "_swatch.png"
DEFAULT_OUTDIR: str = "swatches"
