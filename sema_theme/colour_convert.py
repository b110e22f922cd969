# sema_theme/colour_convert.py
from __future__ import annotations

"""
Colour conversions for previews (OKLCh -> OKLab -> linear sRGB -> sRGB, D65).

The palette core never calls into this module. It is used by the swatch
collaborator and the CLI colour table.

Exports:
  oklch_to_oklab(lch)
  oklab_to_linear_srgb(lab)
  linear_to_srgb(linear)
  oklch_to_rgb_u8(lch)
  in_srgb_gamut(lch, eps)
  colours_to_lch(colours)
  colour_to_hex(colour)
"""

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .core_types import HexStr, Lab, Lch, Oklch, U8Image, rgb_to_hex


# OKLCh to OKLab


def oklch_to_oklab(lch: Lch) -> Lab:
    """
    LCh[...,3] (hue in degrees) to OKLab[...,3].
    Returns float32 with shape preserved.
    """
    arr = np.asarray(lch, dtype=np.float64)
    L = arr[..., 0]
    C = arr[..., 1]
    h = np.radians(arr[..., 2])
    out = np.empty(arr.shape, dtype=np.float32)
    out[..., 0] = L
    out[..., 1] = C * np.cos(h)
    out[..., 2] = C * np.sin(h)
    return out


# OKLab to linear sRGB


def oklab_to_linear_srgb(lab: Lab) -> NDArray[np.float64]:
    """
    OKLab[...,3] to linear sRGB[...,3], unclipped.
    Matrices from Ottosson's reference implementation.
    """
    arr = np.asarray(lab, dtype=np.float64)
    L, a, b = arr[..., 0], arr[..., 1], arr[..., 2]

    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l3, m3, s3 = l_**3, m_**3, s_**3

    out = np.empty(arr.shape, dtype=np.float64)
    out[..., 0] = 4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3
    out[..., 1] = -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3
    out[..., 2] = -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3
    return out


# Linear to sRGB


def linear_to_srgb(linear: np.ndarray) -> NDArray[np.float64]:
    """
    Linear RGB to sRGB (non-linear). Vectorised, sign-preserving so
    out-of-gamut negatives stay negative until clipped by the caller.
    """
    x = np.asarray(linear, dtype=np.float64)
    mag = np.abs(x)
    with np.errstate(invalid="ignore"):
        encoded = np.where(
            mag <= 0.0031308, 12.92 * mag, 1.055 * np.power(mag, 1.0 / 2.4) - 0.055
        )
    return np.sign(x) * encoded


def oklch_to_rgb_u8(lch: Lch) -> U8Image:
    """
    OKLCh[...,3] to uint8 sRGB[...,3]. Out-of-gamut channels are clipped.
    """
    srgb = linear_to_srgb(oklab_to_linear_srgb(oklch_to_oklab(lch)))
    return np.rint(np.clip(srgb, 0.0, 1.0) * 255.0).astype(np.uint8)


def in_srgb_gamut(lch: Lch, eps: float = 1e-4) -> NDArray[np.bool_]:
    """True where every linear channel lies in [-eps, 1+eps]."""
    linear = oklab_to_linear_srgb(oklch_to_oklab(lch))
    return np.all((linear >= -eps) & (linear <= 1.0 + eps), axis=-1)


# Oklch value helpers


def colours_to_lch(colours: Sequence[Oklch]) -> Lch:
    """Stack Oklch values into an (N,3) float32 array."""
    if not colours:
        return np.zeros((0, 3), dtype=np.float32)
    return np.stack([c.as_array() for c in colours]).astype(np.float32, copy=False)


def colour_to_hex(colour: Oklch) -> HexStr:
    """Single Oklch to '#rrggbb'."""
    rgb = oklch_to_rgb_u8(colour.as_array())
    return rgb_to_hex((int(rgb[0]), int(rgb[1]), int(rgb[2])))


__all__ = [
    "oklch_to_oklab",
    "oklab_to_linear_srgb",
    "linear_to_srgb",
    "oklch_to_rgb_u8",
    "in_srgb_gamut",
    "colours_to_lch",
    "colour_to_hex",
]
