"""Star system data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from ..utils.constants import MAP_SIZE_LY, MAX_BUILDINGS_PER_TYPE, NEUTRAL, PLAYER_IDS
from .building import BuildingType


class StarClass(str, Enum):
    """Stellar classes. Values are the short codes shown on the map."""

    COMMON = "s"
    NEUTRON = "psr"
    BLACK_HOLE = "str"
    SUPERMASSIVE_BLACK_HOLE = "STR"

    @property
    def is_exotic(self) -> bool:
        """Exotic stars double construction costs."""
        return self is not StarClass.COMMON


def empty_buildings() -> Dict[BuildingType, int]:
    return {b: 0 for b in BuildingType}


@dataclass
class StarSystem:
    """Represents a star system on the galaxy map.

    Star systems are created once by the galaxy generator and never added or
    removed. Only the owner, the three reserves and the building counts change
    during play, and only through the economy engine.
    """

    id: str  # e.g. "center-smbh", "start-Player 1", "B-psr-0"
    star_class: StarClass
    x: float  # Light-years (0-200)
    y: float  # Light-years (0-200)
    earth_like_count: int
    gas_giant_count: int
    label: str  # Map label, fixed at creation (e.g. "sE2J3")
    noise_seed: float  # Renderer input, carried through saves
    owner: str  # "Player 1".."Player 4" or "None"
    iron_reserve: int
    hydrogen_reserve: int
    star_gold_reserve: int
    is_home: bool = False
    buildings: Dict[BuildingType, int] = field(default_factory=empty_buildings)

    def __post_init__(self):
        """Validate star data after initialization."""
        self.star_class = StarClass(self.star_class)
        if not (0 <= self.x <= MAP_SIZE_LY):
            raise ValueError(f"Invalid x coordinate: {self.x} (must be 0-{MAP_SIZE_LY})")
        if not (0 <= self.y <= MAP_SIZE_LY):
            raise ValueError(f"Invalid y coordinate: {self.y} (must be 0-{MAP_SIZE_LY})")
        if self.owner not in (NEUTRAL, *PLAYER_IDS):
            raise ValueError(f"Invalid owner: {self.owner}")
        if self.earth_like_count < 0 or self.gas_giant_count < 0:
            raise ValueError("Planet counts must be >= 0")
        for name in ("iron_reserve", "hydrogen_reserve", "star_gold_reserve"):
            if getattr(self, name) < 0:
                raise ValueError(f"Invalid {name}: {getattr(self, name)} (must be >= 0)")

        # Every building type has an entry, even when loaded from partial data
        buildings = empty_buildings()
        for building, count in self.buildings.items():
            buildings[BuildingType(building)] = count
        for building, count in buildings.items():
            if not (0 <= count <= MAX_BUILDINGS_PER_TYPE):
                raise ValueError(
                    f"Invalid {building.value} count: {count} "
                    f"(must be 0-{MAX_BUILDINGS_PER_TYPE})"
                )
        self.buildings = buildings

    @property
    def is_neutral(self) -> bool:
        return self.owner == NEUTRAL
