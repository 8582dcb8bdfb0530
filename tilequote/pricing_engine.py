"""
Pricing Engine — the cost aggregator.

Combines tiling labour, per-room option calculators and the job-level
adhesive/grout calculators into a QuoteResult.
Pure math, no I/O. Recomputed from scratch on every call.

Ordering contract: margin is applied to the subtotal first, then VAT is
charged on the margin-inclusive total.
"""

import logging
from typing import List, Optional

from .areas import compute_areas, room_floor_area, room_wall_area
from .calculators.adhesive import AdhesiveCalculator
from .calculators.grout import GroutCalculator
from .calculators.registry import get_calculator
from .schemas import (
    AreaTotals,
    GroutSpec,
    LabourLine,
    MaterialLine,
    QuoteResult,
    RateSheet,
    RoomBreakdown,
    RoomSpec,
)

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Builds a QuoteResult from rooms, a rate sheet and the grout spec.
    Holds no state between calls.
    """

    MARGIN_PERCENT = 20.0

    # Display order for the itemized breakdown
    MATERIAL_ORDER = [
        "adhesive",
        "grout",
        "cement_board",
        "cement_board_adhesive",
        "anti_crack",
        "anti_crack_adhesive",
        "tanking_walls",
        "tanking_floor",
        "sealer",
        "trim",
        "levelling_compound",
        "levelling_clips",
        "ufh_mat",
        "ufh_thermostat",
    ]
    LABOUR_ORDER = [
        "cement_board",
        "anti_crack",
        "tanking",
        "sealer",
        "levelling_compound",
        "ufh",
    ]

    def __init__(self):
        self.adhesive_calculator = AdhesiveCalculator()
        self.grout_calculator = GroutCalculator()

    def build_quote(self, rooms: List[RoomSpec], rates: RateSheet, grout: GroutSpec) -> QuoteResult:
        """
        Args:
            rooms: every room on the job (all floor areas and walls count)
            rates: unit prices, labour mode and VAT settings
            grout: global tile size/joint spec, the fallback for rooms without a tile size

        Returns:
            QuoteResult with areas, labour, materials, margin, VAT and grand total
        """
        totals = compute_areas(rooms)
        tiling_labour = self._calculate_tiling_labour(totals, rates)

        materials = {}
        labour = {}
        notes = []
        room_breakdowns = []
        ufh_area = 0.0
        ufh_watts = 0.0
        thermostats = 0

        # --- Per-room options ---
        for room in rooms:
            floor_area = room_floor_area(room)
            wall_area = room_wall_area(room)
            clips_per_m2 = None
            room_watts = 0.0

            for option in self._enabled_options(room):
                calculator = get_calculator(option.kind)
                logger.debug("Running %s calculator for %r", option.kind, room.name)
                result = calculator.calculate(room, option, floor_area, wall_area, rates, grout)
                self._merge_items(materials, result["materials"], ("quantity", "units", "cost"))
                self._merge_items(labour, result["labour"], ("area", "cost"))
                notes.extend(result["notes"])

                if "clips_per_m2" in result:
                    clips_per_m2 = result["clips_per_m2"]
                ufh_area += result.get("ufh_area", 0.0)
                room_watts += result.get("ufh_watts", 0.0)
                thermostats += result.get("thermostats", 0)

            ufh_watts += room_watts
            room_breakdowns.append(RoomBreakdown(
                name=room.name,
                floor_area=floor_area,
                wall_area=wall_area,
                clips_per_m2=clips_per_m2,
                ufh_watts=room_watts,
            ))

        # --- Job-level materials ---
        tile_area = totals.floor_area + totals.wall_area
        adhesive = self.adhesive_calculator.calculate(tile_area, ufh_area, rates)
        grout_result = self.grout_calculator.calculate(rooms, rates, grout)
        self._merge_items(materials, adhesive["materials"], ("quantity", "units", "cost"))
        self._merge_items(materials, grout_result["materials"], ("quantity", "units", "cost"))

        material_lines = [MaterialLine(**item) for item in self._ordered(materials, self.MATERIAL_ORDER)]
        labour_lines = [LabourLine(**item) for item in self._ordered(labour, self.LABOUR_ORDER)]

        install_labour_total = sum(line.cost for line in labour_lines)
        materials_total = sum(line.cost for line in material_lines)
        total_labour_cost = tiling_labour + install_labour_total
        sub_total = total_labour_cost + materials_total

        summary = self.calculate_totals(sub_total, rates.vat_enabled, rates.vat_rate)

        logger.debug(
            "Quote computed: %d rooms, %.2f m² floor, %.2f m² wall, grand total %.2f",
            len(rooms), totals.floor_area, totals.wall_area, summary["grand_total"],
        )

        return QuoteResult(
            floor_area=totals.floor_area,
            wall_area=totals.wall_area,
            labour_mode=rates.labour_mode,
            tiling_labour=tiling_labour,
            install_labour=labour_lines,
            install_labour_total=install_labour_total,
            total_labour_cost=total_labour_cost,
            materials=material_lines,
            materials_total=materials_total,
            ufh_thermostat_count=thermostats,
            ufh_total_watts=ufh_watts,
            rooms=room_breakdowns,
            notes=notes,
            **summary,
        )

    def calculate_totals(self, sub_total: float, vat_enabled: bool, vat_rate: float) -> dict:
        """
        Margin on the subtotal, then VAT on the margin-inclusive total.
        Returns: {sub_total, margin_percent, margin_amount, total_with_margin,
                  vat_enabled, vat_rate, vat_amount, grand_total}
        """
        margin_amount = sub_total * self.MARGIN_PERCENT / 100.0
        total_with_margin = sub_total + margin_amount
        vat_amount = total_with_margin * vat_rate / 100.0 if vat_enabled else 0.0
        return {
            "sub_total": sub_total,
            "margin_percent": self.MARGIN_PERCENT,
            "margin_amount": margin_amount,
            "total_with_margin": total_with_margin,
            "vat_enabled": vat_enabled,
            "vat_rate": vat_rate,
            "vat_amount": vat_amount,
            "grand_total": total_with_margin + vat_amount,
        }

    def _calculate_tiling_labour(self, totals: AreaTotals, rates: RateSheet) -> float:
        """
        Base tiling labour from job-wide totals.
        Day mode ignores area entirely; option install labour is added on top either way.
        """
        if rates.labour_mode == "day":
            return rates.day_rate * rates.days_estimate
        return totals.floor_area * rates.floor_rate + totals.wall_area * rates.wall_rate

    def _enabled_options(self, room: RoomSpec) -> list:
        """First descriptor of each option kind on the room."""
        seen = set()
        enabled = []
        for option in room.options:
            if option.kind in seen:
                continue
            seen.add(option.kind)
            enabled.append(option)
        return enabled

    def _merge_items(self, merged: dict, items: list, numeric_fields: tuple) -> None:
        """Sum line items sharing a key across rooms."""
        for item in items:
            existing = merged.get(item["key"])
            if existing is None:
                merged[item["key"]] = dict(item)
                continue
            for field in numeric_fields:
                if item.get(field) is not None:
                    existing[field] = (existing.get(field) or 0) + item[field]

    def _ordered(self, merged: dict, order: list) -> list:
        rank = {key: i for i, key in enumerate(order)}
        return sorted(merged.values(), key=lambda item: rank.get(item["key"], len(order)))


_engine = PricingEngine()


def compute_quote(rooms: List[RoomSpec], rates: Optional[RateSheet] = None,
                  grout: Optional[GroutSpec] = None) -> QuoteResult:
    """Price a job. Missing rate sheet or grout spec use the defaults."""
    return _engine.build_quote(rooms, rates or RateSheet(), grout or GroutSpec())
