# sema_theme/swatch.py
from __future__ import annotations

"""
Swatch sheets: one PNG per palette, drawn with Pillow.

Layout:
  row 0: the seven base scale greys, background first
  row 1: the nine accents, in accessor table order
  The sheet itself is filled with the palette background.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from . import constants as K
from .colour_convert import colours_to_lch, oklch_to_rgb_u8
from .core_types import Oklch, RGBTuple
from .palette import ACCENT_NAMES, BaseScale, Palette

if TYPE_CHECKING:
    from .build import ThemeVariant

# Label ink on light / dark cells.
INK_DARK: Tuple[int, int, int, int] = (0, 0, 0, 255)
INK_LIGHT: Tuple[int, int, int, int] = (255, 255, 255, 255)
INK_SWITCH_L: float = 0.6


def swatch_label(name: str) -> str:
    """Cell label with one word per line, so no name is cut short."""
    return name.replace("_", "\n")


def _rgb_rows(colours: Sequence[Oklch]) -> List[RGBTuple]:
    rgb = oklch_to_rgb_u8(colours_to_lch(colours))
    return [(int(r), int(g), int(b)) for r, g, b in rgb.tolist()]


def sheet_size(columns: int = len(ACCENT_NAMES), rows: int = 2) -> Tuple[int, int]:
    """(width, height) of a sheet with the given grid."""
    width = (
        2 * K.SWATCH_MARGIN + columns * K.SWATCH_CELL + (columns - 1) * K.SWATCH_GAP
    )
    height = 2 * K.SWATCH_MARGIN + rows * K.SWATCH_CELL + (rows - 1) * K.SWATCH_GAP
    return width, height


def render_swatch(palette: Palette, labels: bool = True) -> Image.Image:
    """Draw the palette as an RGBA sheet."""
    base = [palette.base(s) for s in BaseScale]
    accents = list(palette.accents().values())
    rows = [
        (list(BaseScale.__members__), base),
        (list(ACCENT_NAMES), accents),
    ]

    width, height = sheet_size()
    bg = _rgb_rows([palette.base(BaseScale.Bg)])[0]
    img = Image.new("RGBA", (width, height), (*bg, 255))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default() if labels else None

    for r, (names, colours) in enumerate(rows):
        y0 = K.SWATCH_MARGIN + r * (K.SWATCH_CELL + K.SWATCH_GAP)
        cells = zip(names, _rgb_rows(colours), colours)
        for c, (name, rgb, colour) in enumerate(cells):
            x0 = K.SWATCH_MARGIN + c * (K.SWATCH_CELL + K.SWATCH_GAP)
            x1 = x0 + K.SWATCH_CELL - 1
            y1 = y0 + K.SWATCH_CELL - 1
            draw.rectangle([x0, y0, x1, y1], fill=(*rgb, 255))
            if font is not None:
                ink = INK_DARK if colour.l >= INK_SWITCH_L else INK_LIGHT
                text = swatch_label(name)
                lines = text.count("\n") + 1
                draw.multiline_text(
                    (x0 + 3, y1 - 12 * lines), text, fill=ink, font=font, spacing=2
                )
    return img


def save_swatch(path: Path, img: Image.Image) -> Path:
    """Save as PNG, forcing the suffix. Returns the written path."""
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
    return path


def swatch_array(palette: Palette) -> np.ndarray:
    """Unlabelled sheet as a uint8 (H,W,4) array."""
    return np.array(render_swatch(palette, labels=False), dtype=np.uint8)


class SwatchWriter:
    """Theme builder that writes one swatch PNG per variant into outdir."""

    def __init__(self, outdir: Path, labels: bool = True) -> None:
        self.outdir = Path(outdir)
        self.labels = labels

    def build(self, variant: ThemeVariant, palette: Palette) -> Path:
        path = self.outdir / f"{variant.slug}{K.SWATCH_SUFFIX}"
        return save_swatch(path, render_swatch(palette, labels=self.labels))


__all__ = [
    "swatch_label",
    "sheet_size",
    "render_swatch",
    "save_swatch",
    "swatch_array",
    "SwatchWriter",
]
