"""Tile trim — sold in 2.5 m lengths."""

from .base import OptionCalculator


class TrimCalculator(OptionCalculator):

    kind = "trim"
    STICK_LENGTH_M = 2.5

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        if option.length_m <= 0:
            return self.make_result()
        lengths = self.units_needed(option.length_m, self.STICK_LENGTH_M)
        materials = [
            self.make_material_item(
                key="trim",
                description="Tile trim (2.5 m lengths)",
                quantity=option.length_m,
                unit="m",
                units=lengths,
                unit_label="length",
                cost=lengths * rates.trim_price_per_length,
            ),
        ]
        return self.make_result(materials=materials)
