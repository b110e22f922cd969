# sema_theme/build.py
from __future__ import annotations

"""
Theme variants and the build loop.

Exports:
  ThemeVariant(name, preset, kind)
  ThemeBuilder                 : protocol, build(variant, palette) -> Any
  DARK_VARIANTS, LIGHT_VARIANTS, ALL_VARIANTS
  variant_for_preset(name) -> ThemeVariant
  palette_colours(palette) -> dict[str, Oklch]
  build_themes(builder, variants, *, jobs=1, debug=False) -> list

The builder is the theme-assembly collaborator. It receives each palette once
and owns whatever it produces (a theme file, a swatch, nothing at all).
"""

import re
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from . import constants as K
from .colour_convert import colour_to_hex
from .core_types import Oklch, ThemeKind
from .palette import Palette
from .presets import (
    DARK_PRESETS,
    LIGHT_PRESETS,
    PRESETS,
    build_preset,
    normalise_preset_name,
)
from .utils import (
    debug_log,
    format_oklch,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
)

THEME_KINDS: Tuple[str, ...] = ("dark", "light")


@dataclass(frozen=True)
class ThemeVariant:
    """One theme to build: display name, preset name, background kind."""

    name: str
    preset: str
    kind: ThemeKind = "dark"

    def __post_init__(self) -> None:
        if self.kind not in THEME_KINDS:
            raise ValueError(f"kind must be 'dark' or 'light', got {self.kind!r}")
        if not self.name.strip():
            raise ValueError("variant name must not be empty")

    @property
    def slug(self) -> str:
        """File-safe name: 'sema soft chroma' -> 'sema_soft_chroma'."""
        return "_".join(self.name.lower().split())

    def palette(self) -> Palette:
        return build_preset(self.preset)


class ThemeBuilder(Protocol):
    def build(self, variant: ThemeVariant, palette: Palette) -> Any: ...


def variant_for_preset(name: str) -> ThemeVariant:
    """
    Variant for a preset name. 'default' is the plain family name, others
    append their words: 'soft_chroma' -> 'sema soft chroma'.
    """
    key = normalise_preset_name(name)
    if key not in PRESETS:
        known = ", ".join(PRESETS)
        raise ValueError(f"unknown preset {name!r} (known: {known})")
    kind = "light" if key in LIGHT_PRESETS else "dark"
    if key == "default":
        return ThemeVariant(K.THEME_FAMILY, key, kind)
    return ThemeVariant(f"{K.THEME_FAMILY} {key.replace('_', ' ')}", key, kind)


DARK_VARIANTS: Tuple[ThemeVariant, ...] = tuple(
    variant_for_preset(n) for n in DARK_PRESETS
)
LIGHT_VARIANTS: Tuple[ThemeVariant, ...] = tuple(
    variant_for_preset(n) for n in LIGHT_PRESETS
)
ALL_VARIANTS: Tuple[ThemeVariant, ...] = DARK_VARIANTS + LIGHT_VARIANTS


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def palette_colours(palette: Palette) -> Dict[str, Oklch]:
    """Every named colour of a palette: base scale (bg, light_bg, ...) then accents."""
    out: Dict[str, Oklch] = {_snake(s.name): c for s, c in palette.scale().items()}
    out.update(palette.accents())
    return out


# Build loop


@dataclass(frozen=True)
class BuildResult:
    variant: ThemeVariant
    palette: Palette
    output: Any
    seconds: float


def _build_one(builder: Optional[ThemeBuilder], variant: ThemeVariant) -> BuildResult:
    t0 = time.perf_counter()
    palette = variant.palette()
    output = builder.build(variant, palette) if builder is not None else None
    return BuildResult(variant, palette, output, time.perf_counter() - t0)


def _report(result: BuildResult, debug: bool) -> None:
    variant = result.variant
    print_banner(variant.name)
    if debug:
        start, end = result.palette.base_lightness_range
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Preset", variant.preset),
                    ("Kind", variant.kind),
                    ("Base range", f"{start} -> {end}"),
                ]
            )
        )
    for name, colour in palette_colours(result.palette).items():
        log(f"  {colour_to_hex(colour)}  {name:<12} {format_oklch(colour)}")
    if result.output is not None:
        log(f"Wrote {result.output}")
    if debug:
        debug_log(f"built in {format_seconds_compact(result.seconds)}")


def build_themes(
    builder: Optional[ThemeBuilder],
    variants: Sequence[ThemeVariant] = DARK_VARIANTS,
    *,
    jobs: int = 1,
    debug: bool = False,
) -> List[Any]:
    """
    Build every variant with the builder and log each palette.

    Variants are independent, so jobs > 1 builds them on a thread pool.
    Reports are printed in variant order once each build is done.
    Returns builder outputs in variant order.
    """
    if jobs <= 1 or len(variants) <= 1:
        results = []
        for v in variants:
            res = _build_one(builder, v)
            _report(res, debug)
            results.append(res)
    else:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            futures = [ex.submit(_build_one, builder, v) for v in variants]
            results = [f.result() for f in futures]
        for res in results:
            _report(res, debug)
    return [r.output for r in results]


__all__ = [
    "THEME_KINDS",
    "ThemeVariant",
    "ThemeBuilder",
    "DARK_VARIANTS",
    "LIGHT_VARIANTS",
    "ALL_VARIANTS",
    "variant_for_preset",
    "palette_colours",
    "BuildResult",
    "build_themes",
]
