"""
Abstract base classes for the material quantity calculators.

Room option calculators take one room's resolved floor/wall area plus the
rate sheet and return a result dict:

    {"materials": [MaterialItem], "labour": [LabourItem], "notes": [str], ...extras}

Job-level calculators (adhesive, grout) work across all rooms at once.
"""

import logging
import math
from abc import ABC, abstractmethod

from ..schemas import GroutSpec, RateSheet, RoomSpec
from ..tile_catalog import find_preset

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """Shared helpers for every calculator."""

    ADHESIVE_BAG_KG = 20.0
    BED_ADHESIVE_KG_PER_M2 = 3.0   # cement board / anti-crack bedding adhesive

    # --- Rounding ---

    def units_needed(self, amount: float, per_unit: float) -> int:
        """
        Number of purchasable units covering `amount`.
        Always rounds UP — partial bags/sheets/tubs can't be bought.
        """
        if amount <= 0:
            return 0
        return math.ceil(amount / per_unit)

    # --- Tile size resolution ---

    def tile_size(self, label: str, grout: GroutSpec) -> tuple:
        """(length_mm, width_mm) for a preset label, falling back to the grout spec size."""
        preset = find_preset(label)
        if preset:
            return preset.length_mm, preset.width_mm
        if label:
            logger.debug("Unknown tile preset %r, using grout spec size", label)
        return grout.tile_length, grout.tile_width

    def resolve_tile_value(self, room: RoomSpec, grout: GroutSpec, formula) -> float:
        """
        Evaluate a per-tile-size formula(length_mm, width_mm) for a room.

        Priority: modular mix (weighted by normalized proportions) →
        single tile preset → global grout spec dimensions.
        """
        if room.use_modular_pattern:
            weights = [max(0.0, t.proportion) for t in room.modular_tiles]
            total = sum(weights)
            if total > 0:
                value = 0.0
                for entry, weight in zip(room.modular_tiles, weights):
                    length_mm, width_mm = self.tile_size(entry.preset, grout)
                    value += (weight / total) * formula(length_mm, width_mm)
                return value
        length_mm, width_mm = self.tile_size(room.tile_size_preset, grout)
        return formula(length_mm, width_mm)

    # --- Output builders ---

    def make_material_item(self, key: str, description: str, quantity: float, unit: str,
                           cost: float, units: int = None, unit_label: str = "") -> dict:
        """Build a MaterialItem dict (merged across rooms by key)."""
        return {
            "key": key,
            "description": description,
            "quantity": quantity,
            "unit": unit,
            "units": units,
            "unit_label": unit_label,
            "cost": cost,
        }

    def make_labour_item(self, key: str, description: str, area: float, cost: float) -> dict:
        """Build a LabourItem dict for area-based install labour."""
        return {
            "key": key,
            "description": description,
            "area": area,
            "cost": cost,
        }

    def make_result(self, materials: list = None, labour: list = None,
                    notes: list = None, **extra) -> dict:
        result = {
            "materials": materials or [],
            "labour": labour or [],
            "notes": notes or [],
        }
        result.update(extra)
        return result

    def bed_adhesive_item(self, key: str, description: str, floor_area: float,
                          rates: RateSheet) -> dict:
        """Bedding adhesive for boards/membranes: 3 kg/m² in 20 kg bags."""
        kg = floor_area * self.BED_ADHESIVE_KG_PER_M2
        bags = self.units_needed(kg, self.ADHESIVE_BAG_KG)
        return self.make_material_item(
            key=key,
            description=description,
            quantity=kg,
            unit="kg",
            units=bags,
            unit_label="bag",
            cost=bags * rates.adhesive_price_per_bag,
        )


class OptionCalculator(BaseCalculator):
    """One calculator per room option kind."""

    kind = ""

    @abstractmethod
    def calculate(self, room: RoomSpec, option, floor_area: float, wall_area: float,
                  rates: RateSheet, grout: GroutSpec) -> dict:
        """
        Takes a room, its option descriptor and its resolved areas.
        Returns a result dict (see module docstring).
        """
        pass
