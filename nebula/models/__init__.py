"""Data models for Nebula."""

from .building import BuildingSpec, BuildingType
from .config import MapConfig
from .game import Game
from .ledger import RESERVE_RESOURCES, Resource, ResourceLedger
from .sector import Sector
from .star import StarClass, StarSystem

__all__ = [
    "BuildingSpec",
    "BuildingType",
    "MapConfig",
    "Game",
    "RESERVE_RESOURCES",
    "Resource",
    "ResourceLedger",
    "Sector",
    "StarClass",
    "StarSystem",
]
