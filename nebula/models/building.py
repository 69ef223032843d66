"""Building types and their static specifications."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from .ledger import Resource


class BuildingType(str, Enum):
    """Constructible building types.

    Declaration order is the canonical production order within a star.
    """

    MINE = "Mine"
    NANO_MINE = "NanoMine"
    FUSION_REACTOR = "FusionReactor"
    ZERO_POINT_MINE = "ZeroPointMine"


@dataclass(frozen=True)
class BuildingSpec:
    """Per-unit cost, production and consumption of one building type.

    Production only happens in a cycle where the full consumption of every
    unit on the star can be paid.
    """

    name: str
    cost: Dict["Resource", int]
    production: Dict["Resource", int]
    consumption: Dict["Resource", int] = field(default_factory=dict)
    req_earth: Optional[int] = None  # Minimum earth-like planets to build
