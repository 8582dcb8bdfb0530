"""
Cement board calculator — floor only.

Sheets cover 0.72 m² each (1200 × 600). Boards are bedded on adhesive at
3 kg/m², bagged separately from the tile adhesive.
"""

from .base import OptionCalculator


class CementBoardCalculator(OptionCalculator):

    kind = "cement_board"
    SHEET_AREA_M2 = 0.72

    def calculate(self, room, option, floor_area, wall_area, rates, grout) -> dict:
        sheets = self.units_needed(floor_area, self.SHEET_AREA_M2)

        materials = [
            self.make_material_item(
                key="cement_board",
                description="Cement board (1200×600 sheets)",
                quantity=floor_area,
                unit="m²",
                units=sheets,
                unit_label="sheet",
                cost=sheets * rates.cement_board_price_per_sheet,
            ),
            self.bed_adhesive_item(
                "cement_board_adhesive", "Cement board bedding adhesive", floor_area, rates),
        ]
        labour = [
            self.make_labour_item(
                key="cement_board",
                description="Cement board install",
                area=floor_area,
                cost=floor_area * rates.cement_board_labour_per_m2,
            ),
        ]
        return self.make_result(materials=materials, labour=labour)
