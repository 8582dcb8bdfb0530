"""
Grout calculator (job level).

kg/m² = (L + W) / (L × W) × joint × thickness × 1.7

Each room's tiled area (floor + wall) uses its own tile size, resolved
through the room's modular mix, preset or the global grout spec. Waste is
applied per room, kilos are summed across the job and bagged once.
"""

from typing import List

from ..areas import room_floor_area, room_wall_area
from ..schemas import GroutSpec, RateSheet, RoomSpec
from .base import BaseCalculator

GROUT_DENSITY = 1.7
GROUT_BAG_KG = 2.5


def grout_kg_per_m2(length_mm: float, width_mm: float,
                    joint_mm: float, thickness_mm: float) -> float:
    """Grout consumption in kg/m². Every dimension is floored at 1 mm."""
    length_mm = max(length_mm, 1.0)
    width_mm = max(width_mm, 1.0)
    joint_mm = max(joint_mm, 1.0)
    thickness_mm = max(thickness_mm, 1.0)
    return (length_mm + width_mm) / (length_mm * width_mm) * joint_mm * thickness_mm * GROUT_DENSITY


class GroutCalculator(BaseCalculator):

    def room_kg_per_m2(self, room: RoomSpec, grout: GroutSpec) -> float:
        return self.resolve_tile_value(
            room, grout,
            lambda length_mm, width_mm: grout_kg_per_m2(
                length_mm, width_mm, grout.joint_width, grout.tile_thickness),
        )

    def calculate(self, rooms: List[RoomSpec], rates: RateSheet, grout: GroutSpec) -> dict:
        waste_multiplier = max(0.0, 1 + grout.waste_percent / 100.0)
        total_kg = 0.0
        for room in rooms:
            room_area = room_floor_area(room) + room_wall_area(room)
            total_kg += room_area * self.room_kg_per_m2(room, grout) * waste_multiplier

        bags = self.units_needed(total_kg, GROUT_BAG_KG)
        item = self.make_material_item(
            key="grout",
            description="Grout (2.5 kg bags)",
            quantity=total_kg,
            unit="kg",
            units=bags,
            unit_label="bag",
            cost=bags * rates.grout_price_per_bag,
        )
        return self.make_result(materials=[item], total_kg=total_kg)
