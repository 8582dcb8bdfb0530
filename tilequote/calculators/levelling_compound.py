"""
Self-levelling compound — floor only.

A 25 kg bag covers 5 m² at 3 mm, so coverage = (5 × 3) / depth:
2 mm → 7.5 m²/bag, 3 mm → 5 m²/bag.
"""

from .base import OptionCalculator


class LevellingCompoundCalculator(OptionCalculator):

    kind = "levelling_compound"
    REFERENCE_COVERAGE_M2 = 5.0
    REFERENCE_DEPTH_MM = 3.0

    def coverage_per_bag(self, depth_mm: float) -> float:
        depth_mm = max(depth_mm or self.REFERENCE_DEPTH_MM, 1.0)
        return (self.REFERENCE_COVERAGE_M2 * self.REFERENCE_DEPTH_MM) / depth_mm

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        coverage = self.coverage_per_bag(option.depth_mm)
        bags = self.units_needed(floor_area, coverage)

        materials = [
            self.make_material_item(
                key="levelling_compound",
                description="Levelling compound (25 kg bags)",
                quantity=floor_area,
                unit="m²",
                units=bags,
                unit_label="bag",
                cost=bags * rates.levelling_compound_price_per_bag,
            ),
        ]
        labour = [
            self.make_labour_item(
                key="levelling_compound",
                description="Levelling compound",
                area=floor_area,
                cost=floor_area * rates.levelling_compound_labour_per_m2,
            ),
        ]
        return self.make_result(materials=materials, labour=labour)
