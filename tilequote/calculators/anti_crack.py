"""
Anti-crack (uncoupling) membrane — floor only, priced per m².
Bedded on adhesive at 3 kg/m² like cement board.
"""

from .base import OptionCalculator


class AntiCrackCalculator(OptionCalculator):

    kind = "anti_crack"

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        materials = [
            self.make_material_item(
                key="anti_crack",
                description="Anti-crack membrane",
                quantity=floor_area,
                unit="m²",
                cost=floor_area * rates.anti_crack_per_m2,
            ),
            self.bed_adhesive_item(
                "anti_crack_adhesive", "Anti-crack bedding adhesive", floor_area, rates),
        ]
        labour = [
            self.make_labour_item(
                key="anti_crack",
                description="Anti-crack install",
                area=floor_area,
                cost=floor_area * rates.anti_crack_labour_per_m2,
            ),
        ]
        return self.make_result(materials=materials, labour=labour)
