"""Preset recipes and the preset registry."""

import pytest

from sema_theme import presets
from sema_theme.palette import Palette

FIELDS = (
    "base_lightness_range",
    "low_lightness",
    "high_lightness",
    "low_chroma",
    "medium_chroma",
    "high_chroma",
)

EXPECTED = {
    "default": ((0.17, 1.0), 0.8, 0.9, 0.032, 0.07, 0.1),
    "chroma": ((0.17, 1.0), 0.8, 0.86, 0.06, 0.09, 0.11),
    "soft": ((0.25, 0.95), 0.8, 0.9, 0.032, 0.07, 0.1),
    "soft_chroma": ((0.25, 0.95), 0.8, 0.86, 0.06, 0.09, 0.11),
    "light": ((1.0, 0.2), 0.65, 0.55, 0.04, 0.06, 0.08),
    "light_chroma": ((1.0, 0.2), 0.65, 0.55, 0.09, 0.1, 0.12),
    "light_soft": ((0.96, 0.3), 0.65, 0.55, 0.04, 0.06, 0.08),
    "light_soft_chroma": ((0.96, 0.3), 0.65, 0.55, 0.09, 0.1, 0.12),
}


def test_preset_values(preset_name, preset_palette):
    got = tuple(getattr(preset_palette, f) for f in FIELDS)
    assert got == EXPECTED[preset_name]


def test_registry_order_and_sets():
    assert presets.preset_names() == list(EXPECTED)
    assert presets.DARK_PRESETS == ("default", "chroma", "soft", "soft_chroma")
    assert presets.LIGHT_PRESETS == (
        "light",
        "light_chroma",
        "light_soft",
        "light_soft_chroma",
    )
    assert set(presets.DARK_PRESETS) | set(presets.LIGHT_PRESETS) == set(
        presets.PRESETS
    )


def test_constructors_match_registry():
    assert presets.soft_chroma() == presets.PRESETS["soft_chroma"]()
    assert presets.light_soft() == presets.build_preset("light_soft")


def test_soft_only_changes_range():
    base, soft = presets.default(), presets.soft()
    for f in FIELDS[1:]:
        assert getattr(soft, f) == getattr(base, f)
    assert soft.base_lightness_range != base.base_lightness_range


def test_soft_chroma_derives_from_chroma():
    assert presets.soft_chroma() == presets.with_overrides(
        presets.chroma(), base_lightness_range=(0.25, 0.95)
    )


def test_light_soft_chroma_derives_from_light_chroma():
    assert presets.light_soft_chroma() == presets.with_overrides(
        presets.light_chroma(), base_lightness_range=(0.96, 0.3)
    )


def test_with_overrides_returns_new_value():
    base = presets.default()
    changed = presets.with_overrides(base, high_chroma=0.5)
    assert isinstance(changed, Palette)
    assert changed.high_chroma == 0.5
    assert base.high_chroma == 0.1


def test_with_overrides_rejects_unknown_field():
    with pytest.raises(TypeError):
        presets.with_overrides(presets.default(), saturation=1.0)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("soft_chroma", "soft_chroma"),
        ("soft-chroma", "soft_chroma"),
        ("Soft Chroma", "soft_chroma"),
        ("  LIGHT-soft ", "light_soft"),
    ],
)
def test_build_preset_normalises_names(name, expected):
    assert presets.normalise_preset_name(name) == expected
    assert presets.build_preset(name) == presets.PRESETS[expected]()


def test_build_preset_unknown_name():
    with pytest.raises(ValueError, match="unknown preset 'sepia'"):
        presets.build_preset("sepia")
