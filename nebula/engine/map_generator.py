"""Galaxy generation: central black hole, home systems and sector-balanced stars."""

import logging
from typing import List, Tuple

from ..models import Game, MapConfig, Sector, StarClass, StarSystem
from ..utils import (
    HOME_SLOTS,
    MAP_SIZE_LY,
    NEUTRAL,
    PLACEMENT_MAX_ATTEMPTS,
    GameRNG,
    euclidean_distance,
)
from ..utils.constants import (
    HOME_EARTH_LIKE,
    HOME_GAS_GIANTS,
    MAX_PLANETS,
    RESERVE_MULTIPLIER_RANGE,
)
from .sectors import generate_sectors

logger = logging.getLogger(__name__)

CENTER_STAR_ID = "center-smbh"
CENTER_LABEL = "str*"

# Procedural placement order within each sector
PROCEDURAL_CLASSES = (StarClass.COMMON, StarClass.NEUTRON, StarClass.BLACK_HOLE)


def new_game(config: MapConfig) -> Game:
    """Generate a galaxy and wrap it in a fresh Game.

    Args:
        config: Map generation parameters

    Returns:
        Game on day 1 with initial ledgers and Player 1 acting
    """
    stars = generate_stars(config, generate_sectors())
    game = Game(map_config=config, stars=stars)
    logger.info(f"New game created: seed='{config.seed}', {len(stars)} star systems")
    return game


def generate_stars(config: MapConfig, sectors: List[Sector]) -> List[StarSystem]:
    """Generate every star system for a new galaxy.

    Algorithm:
    1. Seed the RNG from config.seed
    2. Place a supermassive black hole at the exact galaxy center
    3. Place one Common home star at the center of sectors A, C, D and F,
       owned by Players 1-4, with 2 earth-like planets and 3 gas giants
    4. For each sector, place common_count Common, neutron_count Neutron and
       black_hole_count BlackHole stars by rejection sampling against
       min_star_distance. After PLACEMENT_MAX_ATTEMPTS samples the last
       point is accepted even if too close, so generation always terminates.

    The returned order (center, homes, then sector/class/placement order) and
    the sequence of RNG draws are fixed: the same seed always yields the same
    list.

    Args:
        config: Map generation parameters
        sectors: Sector layout from generate_sectors()

    Returns:
        Ordered list of star systems
    """
    rng = GameRNG(config.seed)
    stars: List[StarSystem] = []

    # Central supermassive black hole
    iron, hydrogen, star_gold = _draw_reserves(rng, StarClass.SUPERMASSIVE_BLACK_HOLE)
    stars.append(
        StarSystem(
            id=CENTER_STAR_ID,
            star_class=StarClass.SUPERMASSIVE_BLACK_HOLE,
            x=MAP_SIZE_LY / 2,
            y=MAP_SIZE_LY / 2,
            earth_like_count=0,
            gas_giant_count=0,
            label=CENTER_LABEL,
            noise_seed=rng.random(),
            owner=NEUTRAL,
            iron_reserve=iron,
            hydrogen_reserve=hydrogen,
            star_gold_reserve=star_gold,
        )
    )

    # Player home systems
    sectors_by_id = {s.id: s for s in sectors}
    for sector_id, player in HOME_SLOTS:
        sector = sectors_by_id.get(sector_id)
        if sector is None:
            continue
        x, y = sector.center
        iron, hydrogen, star_gold = _draw_reserves(rng, StarClass.COMMON)
        stars.append(
            StarSystem(
                id=f"start-{player}",
                star_class=StarClass.COMMON,
                x=x,
                y=y,
                earth_like_count=HOME_EARTH_LIKE,
                gas_giant_count=HOME_GAS_GIANTS,
                label=f"HOME-{player[-1]}",
                noise_seed=rng.random(),
                owner=player,
                iron_reserve=iron,
                hydrogen_reserve=hydrogen,
                star_gold_reserve=star_gold,
                is_home=True,
            )
        )

    # Procedural systems
    counts = {
        StarClass.COMMON: config.common_count,
        StarClass.NEUTRON: config.neutron_count,
        StarClass.BLACK_HOLE: config.black_hole_count,
    }
    for sector in sectors:
        for star_class in PROCEDURAL_CLASSES:
            for i in range(counts[star_class]):
                star_id = f"{sector.id}-{star_class.value}-{i}"
                x, y = _sample_position(rng, sector, stars, config.min_star_distance, star_id)
                stars.append(_make_procedural_star(rng, star_id, star_class, x, y))

    logger.info(
        f"Generated {len(stars)} star systems across {len(sectors)} sectors "
        f"(seed='{rng.seed}')"
    )
    return stars


def generate_label(star_class: StarClass, earth: int, gas: int) -> str:
    """Build the map label for a star from its class and planet counts.

    Examples:
        >>> generate_label(StarClass.COMMON, 2, 3)
        'sE2J3'
        >>> generate_label(StarClass.NEUTRON, 1, 0)
        'psrE1'
    """
    if star_class is StarClass.SUPERMASSIVE_BLACK_HOLE:
        return CENTER_LABEL
    if star_class in (StarClass.NEUTRON, StarClass.BLACK_HOLE):
        return f"{star_class.value}E{earth}"
    return f"{star_class.value}E{earth}J{gas}"


def _draw_reserves(rng: GameRNG, star_class: StarClass) -> Tuple[int, int, int]:
    """Draw a reserve multiplier and compute (iron, hydrogen, star_gold).

    Args:
        rng: Random number generator
        star_class: Class of the star receiving the reserves

    Returns:
        Tuple of (iron, hydrogen, star_gold) reserves
    """
    multiplier = rng.randint(*RESERVE_MULTIPLIER_RANGE)

    if star_class is StarClass.COMMON:
        return multiplier * 10**10, 10**10, multiplier * 10**8
    if star_class is StarClass.SUPERMASSIVE_BLACK_HOLE:
        return multiplier * 10**9, 10, 10
    # Neutron stars and stellar black holes only hold iron
    return multiplier * 10**8, 0, 0


def _sample_position(
    rng: GameRNG,
    sector: Sector,
    placed: List[StarSystem],
    min_distance: float,
    star_id: str,
) -> Tuple[float, float]:
    """Rejection-sample a point in the sector away from placed stars.

    Args:
        rng: Random number generator
        sector: Sector to sample inside
        placed: Stars already placed anywhere in the galaxy
        min_distance: Minimum allowed distance to any placed star
        star_id: Id of the star being placed (for logging)

    Returns:
        Tuple of (x, y); the last sample when every attempt was too close
    """
    attempts = 0
    while True:
        x = sector.x + rng.random() * sector.width
        y = sector.y + rng.random() * sector.height
        attempts += 1

        if not _is_too_close(x, y, placed, min_distance):
            return x, y

        if attempts >= PLACEMENT_MAX_ATTEMPTS:
            logger.info(
                f"Placement attempt cap reached for {star_id} after {attempts} attempts, "
                f"accepting ({x:.2f}, {y:.2f})"
            )
            return x, y

        logger.debug(f"Rejected ({x:.2f}, {y:.2f}) for {star_id}: too close")


def _is_too_close(x: float, y: float, placed: List[StarSystem], min_distance: float) -> bool:
    return any(euclidean_distance(s.x, s.y, x, y) < min_distance for s in placed)


def _make_procedural_star(
    rng: GameRNG, star_id: str, star_class: StarClass, x: float, y: float
) -> StarSystem:
    """Roll planets, reserves and noise seed for a neutral procedural star."""
    earth = rng.randint(0, MAX_PLANETS)
    gas = rng.randint(0, MAX_PLANETS) if star_class is StarClass.COMMON else 0
    iron, hydrogen, star_gold = _draw_reserves(rng, star_class)

    return StarSystem(
        id=star_id,
        star_class=star_class,
        x=x,
        y=y,
        earth_like_count=earth,
        gas_giant_count=gas,
        label=generate_label(star_class, earth, gas),
        noise_seed=rng.random(),
        owner=NEUTRAL,
        iron_reserve=iron,
        hydrogen_reserve=hydrogen,
        star_gold_reserve=star_gold,
    )
