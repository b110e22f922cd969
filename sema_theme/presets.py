# sema_theme/presets.py
from __future__ import annotations

"""
Named palette presets.

Exports:
  with_overrides(base, **fields) -> Palette
  default(), chroma(), soft(), soft_chroma()                           # dark
  light(), light_chroma(), light_soft(), light_soft_chroma()           # light
  PRESETS: dict[str, () -> Palette]
  DARK_PRESETS, LIGHT_PRESETS: preset names per background
  preset_names() -> list[str]
  build_preset(name) -> Palette

Each preset is a base palette with a few fields replaced:
  chroma : more chroma on every tier
  soft   : narrower base lightness range (less contrast at both ends)
"""

import dataclasses
from typing import Callable, Dict, List, Tuple

from . import constants as K
from .palette import Palette


def with_overrides(base: Palette, **fields: object) -> Palette:
    """Copy of base with the given fields replaced. Unknown names raise TypeError."""
    return dataclasses.replace(base, **fields)


# Dark background


def default() -> Palette:
    return Palette(
        base_lightness_range=K.DARK_BASE_LIGHTNESS,
        low_lightness=K.DARK_LOW_LIGHTNESS,
        high_lightness=K.DARK_HIGH_LIGHTNESS,
        low_chroma=K.DARK_LOW_CHROMA,
        medium_chroma=K.DARK_MEDIUM_CHROMA,
        high_chroma=K.DARK_HIGH_CHROMA,
    )


def chroma() -> Palette:
    """
    default() with every chroma tier raised.

    high_lightness drops from 0.9 to 0.86 together with the chroma bump: the
    brighter tier is pulled down so the more saturated accents keep the same
    perceived brightness. The two changes belong together.
    """
    return with_overrides(
        default(),
        low_chroma=K.DARK_CHROMA_LOW_CHROMA,
        medium_chroma=K.DARK_CHROMA_MEDIUM_CHROMA,
        high_chroma=K.DARK_CHROMA_HIGH_CHROMA,
        high_lightness=K.DARK_CHROMA_HIGH_LIGHTNESS,
    )


def soft() -> Palette:
    return with_overrides(default(), base_lightness_range=K.DARK_SOFT_BASE_LIGHTNESS)


def soft_chroma() -> Palette:
    return with_overrides(chroma(), base_lightness_range=K.DARK_SOFT_BASE_LIGHTNESS)


# Light background


def light() -> Palette:
    """Light base. The base range runs from near-white background to darker text."""
    return Palette(
        base_lightness_range=K.LIGHT_BASE_LIGHTNESS,
        low_lightness=K.LIGHT_LOW_LIGHTNESS,
        high_lightness=K.LIGHT_HIGH_LIGHTNESS,
        low_chroma=K.LIGHT_LOW_CHROMA,
        medium_chroma=K.LIGHT_MEDIUM_CHROMA,
        high_chroma=K.LIGHT_HIGH_CHROMA,
    )


def light_chroma() -> Palette:
    return with_overrides(
        light(),
        low_chroma=K.LIGHT_CHROMA_LOW_CHROMA,
        medium_chroma=K.LIGHT_CHROMA_MEDIUM_CHROMA,
        high_chroma=K.LIGHT_CHROMA_HIGH_CHROMA,
    )


def light_soft() -> Palette:
    return with_overrides(light(), base_lightness_range=K.LIGHT_SOFT_BASE_LIGHTNESS)


def light_soft_chroma() -> Palette:
    return with_overrides(
        light_chroma(), base_lightness_range=K.LIGHT_SOFT_BASE_LIGHTNESS
    )


# Registry

PRESETS: Dict[str, Callable[[], Palette]] = {
    "default": default,
    "chroma": chroma,
    "soft": soft,
    "soft_chroma": soft_chroma,
    "light": light,
    "light_chroma": light_chroma,
    "light_soft": light_soft,
    "light_soft_chroma": light_soft_chroma,
}

DARK_PRESETS: Tuple[str, ...] = ("default", "chroma", "soft", "soft_chroma")
LIGHT_PRESETS: Tuple[str, ...] = (
    "light",
    "light_chroma",
    "light_soft",
    "light_soft_chroma",
)


def preset_names() -> List[str]:
    """Preset names in registry order (dark first)."""
    return list(PRESETS)


def normalise_preset_name(name: str) -> str:
    """'Soft-Chroma' / 'soft chroma' -> 'soft_chroma'."""
    return "_".join(name.strip().lower().replace("-", " ").split())


def build_preset(name: str) -> Palette:
    """Construct a preset by name. Unknown names raise ValueError."""
    key = normalise_preset_name(name)
    try:
        ctor = PRESETS[key]
    except KeyError:
        known = ", ".join(PRESETS)
        raise ValueError(f"unknown preset {name!r} (known: {known})") from None
    return ctor()


__all__ = [
    "with_overrides",
    "default",
    "chroma",
    "soft",
    "soft_chroma",
    "light",
    "light_chroma",
    "light_soft",
    "light_soft_chroma",
    "PRESETS",
    "DARK_PRESETS",
    "LIGHT_PRESETS",
    "preset_names",
    "normalise_preset_name",
    "build_preset",
]
