# Standard tile sizes (mm) — labels are what rooms and saved quotes reference

from typing import Optional

from .schemas import TilePreset

TILE_PRESETS = [
    TilePreset(label="25×25 Mosaic", length_mm=25, width_mm=25),
    TilePreset(label="48×48 Mosaic", length_mm=48, width_mm=48),
    TilePreset(label="100×100", length_mm=100, width_mm=100),
    TilePreset(label="150×150", length_mm=150, width_mm=150),
    TilePreset(label="200×100", length_mm=200, width_mm=100),
    TilePreset(label="300×300", length_mm=300, width_mm=300),
    TilePreset(label="600×300", length_mm=600, width_mm=300),
    TilePreset(label="600×600", length_mm=600, width_mm=600),
    TilePreset(label="900×600", length_mm=900, width_mm=600),
    TilePreset(label="1200×600", length_mm=1200, width_mm=600),
]

_BY_LABEL = {p.label: p for p in TILE_PRESETS}


def find_preset(label: Optional[str]) -> Optional[TilePreset]:
    """Look up a preset by label. Returns None for blank or retired labels."""
    if not label:
        return None
    return _BY_LABEL.get(label)


def list_presets() -> list:
    return list(TILE_PRESETS)
