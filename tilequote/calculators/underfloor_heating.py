"""
Underfloor heating — mat priced per m² of floor, one thermostat per room.

Declared wattage only feeds the displayed output figure; it never changes cost.
Floor area under UFH is also reported so adhesive can switch to flexible S1.
"""

from .base import OptionCalculator


class UnderfloorHeatingCalculator(OptionCalculator):

    kind = "underfloor_heating"

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        materials = [
            self.make_material_item(
                key="ufh_mat",
                description="UFH heating mat",
                quantity=floor_area,
                unit="m²",
                cost=floor_area * rates.ufh_mat_price_per_m2,
            ),
            self.make_material_item(
                key="ufh_thermostat",
                description="UFH thermostat",
                quantity=1,
                unit="ea",
                units=1,
                unit_label="thermostat",
                cost=rates.ufh_thermostat_price,
            ),
        ]
        labour = [
            self.make_labour_item(
                key="ufh",
                description="UFH installation",
                area=floor_area,
                cost=floor_area * rates.ufh_labour_per_m2,
            ),
        ]
        return self.make_result(
            materials=materials,
            labour=labour,
            ufh_area=floor_area,
            ufh_watts=option.watts_per_m2 * floor_area,
            thermostats=1,
        )
