"""Game engine components."""

from .catalog import BUILDING_CATALOG, SYNTHESIS_RECIPES
from .economy import EconomyEngine, ProductionEvent, construction_cost
from .errors import (
    CapacityExceeded,
    EconomyError,
    InsufficientResources,
    InvalidDemolishCount,
    NebulaError,
    PrerequisiteUnmet,
)
from .map_generator import generate_stars, new_game
from .sectors import generate_sectors

__all__ = [
    "BUILDING_CATALOG",
    "SYNTHESIS_RECIPES",
    "EconomyEngine",
    "ProductionEvent",
    "construction_cost",
    "CapacityExceeded",
    "EconomyError",
    "InsufficientResources",
    "InvalidDemolishCount",
    "NebulaError",
    "PrerequisiteUnmet",
    "generate_stars",
    "new_game",
    "generate_sectors",
]
