"""OKLCh -> sRGB conversion used by previews."""

import numpy as np
import pytest

from sema_theme import presets
from sema_theme.colour_convert import (
    colour_to_hex,
    colours_to_lch,
    in_srgb_gamut,
    linear_to_srgb,
    oklch_to_oklab,
    oklch_to_rgb_u8,
)
from sema_theme.core_types import oklch
from sema_theme.palette import BaseScale


def test_white_and_black():
    assert colour_to_hex(oklch(1.0, 0.0, 0.0)) == "#ffffff"
    assert colour_to_hex(oklch(0.0, 0.0, 0.0)) == "#000000"


def test_greys_are_neutral():
    greys = np.array([[l, 0.0, 0.0] for l in np.linspace(0.1, 0.95, 12)])
    rgb = oklch_to_rgb_u8(greys).astype(int)
    assert rgb.shape == (12, 3)
    assert np.all(np.abs(rgb[:, 0] - rgb[:, 1]) <= 1)
    assert np.all(np.abs(rgb[:, 1] - rgb[:, 2]) <= 1)
    assert np.all(np.diff(rgb[:, 0]) > 0)


def test_srgb_red_reference():
    # OKLCh of sRGB #ff0000
    rgb = oklch_to_rgb_u8(np.array([0.627955, 0.257683, 29.2339]))
    assert abs(int(rgb[0]) - 255) <= 1
    assert int(rgb[1]) <= 1
    assert int(rgb[2]) <= 1


def test_oklab_components():
    lab = oklch_to_oklab(np.array([[0.5, 0.1, 90.0]], dtype=np.float32))
    assert lab.dtype == np.float32
    assert lab[0].tolist() == pytest.approx([0.5, 0.0, 0.1], abs=1e-6)


def test_linear_to_srgb_is_sign_preserving():
    out = linear_to_srgb(np.array([-0.5, 0.0, 0.002, 1.0]))
    assert out[0] < 0.0
    assert out[1] == 0.0
    assert out[2] == pytest.approx(0.002 * 12.92)
    assert out[3] == pytest.approx(1.0)


def test_out_of_gamut_is_clipped():
    lch = np.array([[0.7, 0.4, 150.0], [0.5, 0.0, 0.0]])
    assert in_srgb_gamut(lch).tolist() == [False, True]
    rgb = oklch_to_rgb_u8(lch)
    assert rgb.dtype == np.uint8
    assert rgb.shape == (2, 3)


def test_palette_colours_convert(preset_palette):
    colours = list(preset_palette.accents().values())
    lch = colours_to_lch(colours)
    assert lch.shape == (9, 3)
    assert oklch_to_rgb_u8(lch).shape == (9, 3)
    assert colours_to_lch([]).shape == (0, 3)


def test_dark_background_darker_than_light_background():
    dark = presets.default().base(BaseScale.Bg)
    light = presets.light().base(BaseScale.Bg)
    dark_bg = oklch_to_rgb_u8(colours_to_lch([dark]))
    light_bg = oklch_to_rgb_u8(colours_to_lch([light]))
    assert int(dark_bg[0, 0]) < int(light_bg[0, 0])
