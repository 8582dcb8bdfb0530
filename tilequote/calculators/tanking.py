"""
Tanking (waterproofing) — walls and floor toggle independently.

One tub covers 4 m². Wall and floor tubs are separate material lines, but
the install labour for both surfaces goes into one shared tanking total.
"""

from .base import OptionCalculator


class TankingCalculator(OptionCalculator):

    kind = "tanking"
    TUB_COVERAGE_M2 = 4.0

    def _surface(self, surface: str, area: float, rates) -> tuple:
        tubs = self.units_needed(area, self.TUB_COVERAGE_M2)
        material = self.make_material_item(
            key=f"tanking_{surface}",
            description=f"Tanking kit, {surface}",
            quantity=area,
            unit="m²",
            units=tubs,
            unit_label="tub",
            cost=tubs * rates.tanking_per_tub,
        )
        labour = self.make_labour_item(
            key="tanking",
            description="Tanking install",
            area=area,
            cost=area * rates.tanking_labour_per_m2,
        )
        return material, labour

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        materials = []
        labour = []
        if option.walls:
            material, work = self._surface("walls", wall_area, rates)
            materials.append(material)
            labour.append(work)
        if option.floor:
            material, work = self._surface("floor", floor_area, rates)
            materials.append(material)
            labour.append(work)
        return self.make_result(materials=materials, labour=labour)
