"""
Calculator registry — maps room option kinds to calculator classes.

Adding a material option means a new descriptor in schemas.RoomOption and
one entry here.
"""

from .anti_crack import AntiCrackCalculator
from .base import OptionCalculator
from .cement_board import CementBoardCalculator
from .levelling_clips import LevellingClipsCalculator
from .levelling_compound import LevellingCompoundCalculator
from .sealer import SealerCalculator
from .tanking import TankingCalculator
from .trim import TrimCalculator
from .underfloor_heating import UnderfloorHeatingCalculator

OPTION_REGISTRY: dict[str, type] = {
    "cement_board": CementBoardCalculator,
    "anti_crack": AntiCrackCalculator,
    "levelling_compound": LevellingCompoundCalculator,
    "levelling_clips": LevellingClipsCalculator,
    "tanking": TankingCalculator,
    "sealer": SealerCalculator,
    "underfloor_heating": UnderfloorHeatingCalculator,
    "trim": TrimCalculator,
}


def get_calculator(kind: str) -> OptionCalculator:
    """Returns an instance of the calculator for an option kind, or raises ValueError."""
    if kind not in OPTION_REGISTRY:
        raise ValueError(
            f"No calculator registered for option: {kind}. "
            f"Available: {list(OPTION_REGISTRY.keys())}"
        )
    return OPTION_REGISTRY[kind]()


def has_calculator(kind: str) -> bool:
    """Check if a calculator exists for an option kind."""
    return kind in OPTION_REGISTRY


def list_calculators() -> list[str]:
    """List all registered option kinds."""
    return list(OPTION_REGISTRY.keys())
