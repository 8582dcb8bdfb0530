"""
Tile levelling clips.

clips/m² = ceil(3 / (L_m × W_m)) × 1.1 — three clips per tile plus 10% spare.
Clips are not used on tiles under 300 × 300, which gives 0 clips/m²; the
room's manually entered quantity is used instead. Sold in packs of 100.
"""

import math

from .base import OptionCalculator

MIN_CLIP_TILE_MM = 300
CLIPS_PER_TILE = 3
CLIP_SPARE_FACTOR = 1.1
CLIPS_PER_PACK = 100


def calc_clips_per_m2(length_mm: float, width_mm: float) -> float:
    """Clips per m² for a tile size. 0 for tiles under 300 mm on either side."""
    if length_mm < MIN_CLIP_TILE_MM or width_mm < MIN_CLIP_TILE_MM:
        return 0.0
    tile_area_m2 = (length_mm * width_mm) / 1_000_000
    return math.ceil(CLIPS_PER_TILE / tile_area_m2) * CLIP_SPARE_FACTOR


class LevellingClipsCalculator(OptionCalculator):

    kind = "levelling_clips"

    def clips_per_m2(self, room, grout) -> float:
        return self.resolve_tile_value(room, grout, calc_clips_per_m2)

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        clips_per_m2 = self.clips_per_m2(room, grout)
        area = wall_area if room.tile_type == "wall" else floor_area
        notes = []

        if clips_per_m2 > 0:
            quantity = math.ceil(area * clips_per_m2) if area > 0 else 0
        else:
            quantity = max(0, math.ceil(option.manual_qty))
            if quantity == 0:
                notes.append(
                    f"{room.name}: levelling clips need tiles of at least 300×300. "
                    f"Select a valid tile size or enter a clip quantity."
                )

        packs = self.units_needed(quantity, CLIPS_PER_PACK)
        materials = [
            self.make_material_item(
                key="levelling_clips",
                description="Levelling clips (packs of 100)",
                quantity=quantity,
                unit="clips",
                units=packs,
                unit_label="pack",
                cost=packs * rates.levelling_clips_price_per_100,
            ),
        ]
        return self.make_result(materials=materials, notes=notes, clips_per_m2=clips_per_m2)
