"""Utility functions and constants for Nebula."""

from .constants import (
    FIRST_DAY,
    HOME_SLOTS,
    INITIAL_RESOURCES,
    MAP_SIZE_LY,
    MAX_BUILDINGS_PER_TYPE,
    MAX_RESOURCE_CAP,
    NEUTRAL,
    PLACEMENT_MAX_ATTEMPTS,
    PLAYER_IDS,
    SECTOR_COLS,
    SECTOR_IDS,
    SECTOR_ROWS,
)
from .distance import euclidean_distance
from .rng import GameRNG, hash_seed

__all__ = [
    "FIRST_DAY",
    "HOME_SLOTS",
    "INITIAL_RESOURCES",
    "MAP_SIZE_LY",
    "MAX_BUILDINGS_PER_TYPE",
    "MAX_RESOURCE_CAP",
    "NEUTRAL",
    "PLACEMENT_MAX_ATTEMPTS",
    "PLAYER_IDS",
    "SECTOR_COLS",
    "SECTOR_IDS",
    "SECTOR_ROWS",
    "euclidean_distance",
    "GameRNG",
    "hash_seed",
]
