"""Shared pytest fixtures for sema_theme tests."""

import pytest

from sema_theme import presets
from sema_theme.core_types import oklch


@pytest.fixture(params=presets.preset_names())
def preset_name(request):
    """Each of the eight preset names in turn."""
    return request.param


@pytest.fixture
def preset_palette(preset_name):
    """The palette built from preset_name."""
    return presets.build_preset(preset_name)


class RecordingFactory:
    """Colour factory that records every (l, c, h) it is asked for."""

    def __init__(self):
        self.calls = []

    def __call__(self, lightness, chroma, hue_degrees):
        self.calls.append((lightness, chroma, hue_degrees))
        return oklch(lightness, chroma, hue_degrees)


@pytest.fixture
def recording_factory():
    return RecordingFactory()


class RecordingBuilder:
    """Theme builder that remembers what it was given and returns the variant name."""

    def __init__(self):
        self.seen = []

    def build(self, variant, palette):
        self.seen.append((variant, palette))
        return variant.name


@pytest.fixture
def recording_builder():
    return RecordingBuilder()
