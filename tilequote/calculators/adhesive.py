"""
Tile adhesive calculator (job level).

Standard adhesive covers `adhesive_coverage_per_bag` m² per 20 kg bag.
Floor area over underfloor heating needs flexible S1 adhesive at a reduced
3 m²/bag; the two bag counts are rounded separately and added.
"""

from ..schemas import RateSheet
from .base import BaseCalculator


class AdhesiveCalculator(BaseCalculator):

    DEFAULT_COVERAGE_M2 = 4.0
    UFH_COVERAGE_M2 = 3.0

    def calculate(self, tile_area: float, ufh_area: float, rates: RateSheet) -> dict:
        coverage = rates.adhesive_coverage_per_bag or self.DEFAULT_COVERAGE_M2
        coverage = max(coverage, 1.0)

        standard_bags = self.units_needed(max(0.0, tile_area - ufh_area), coverage)
        ufh_bags = self.units_needed(ufh_area, self.UFH_COVERAGE_M2)
        bags = standard_bags + ufh_bags

        description = "Tile adhesive (20 kg bags)"
        if ufh_bags:
            description += f", incl. {ufh_bags} flexible S1 for UFH"

        item = self.make_material_item(
            key="adhesive",
            description=description,
            quantity=tile_area,
            unit="m²",
            units=bags,
            unit_label="bag",
            cost=bags * rates.adhesive_price_per_bag,
        )
        return self.make_result(
            materials=[item],
            standard_bags=standard_bags,
            ufh_bags=ufh_bags,
        )
