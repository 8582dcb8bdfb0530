"""Natural stone sealer — whole tiled area of the room (floor + wall), priced per m²."""

from .base import OptionCalculator


class SealerCalculator(OptionCalculator):

    kind = "sealer"

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        area = floor_area + wall_area
        materials = [
            self.make_material_item(
                key="sealer",
                description="Natural stone sealer",
                quantity=area,
                unit="m²",
                cost=area * rates.sealer_per_m2,
            ),
        ]
        labour = [
            self.make_labour_item(
                key="sealer",
                description="Sealer application",
                area=area,
                cost=area * rates.sealer_labour_per_m2,
            ),
        ]
        return self.make_result(materials=materials, labour=labour)
