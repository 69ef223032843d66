"""Economy engine: construction, demolition, synthesis and cycle resolution.

All actions use the acting player's ledger (game.acting_player). The engine
does not check that the acting player owns the target star; callers that want
that rule enforce it themselves.

Each action validates everything first and only then mutates, so a raised
EconomyError always leaves the game untouched.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..models.building import BuildingType
from ..models.game import Game
from ..models.ledger import RESERVE_RESOURCES, Resource, ResourceLedger
from ..models.star import StarSystem
from ..utils.constants import EXOTIC_COST_MULTIPLIER, MAX_BUILDINGS_PER_TYPE
from .catalog import BUILDING_CATALOG, SYNTHESIS_RECIPES
from .errors import (
    CapacityExceeded,
    InsufficientResources,
    InvalidDemolishCount,
    PrerequisiteUnmet,
)

logger = logging.getLogger(__name__)

_RESERVE_FIELDS = {
    Resource.IRON: "iron_reserve",
    Resource.HYDROGEN: "hydrogen_reserve",
    Resource.STAR_GOLD: "star_gold_reserve",
}


@dataclass
class ProductionEvent:
    """What one building stack on one star did during a cycle."""

    star_id: str
    owner: str
    building: BuildingType
    count: int
    fired: bool  # False when consumption could not be paid in full
    consumed: Dict[Resource, int] = field(default_factory=dict)
    produced: Dict[Resource, int] = field(default_factory=dict)


def cost_multiplier(star: StarSystem) -> int:
    """Neutron stars and black holes double construction costs."""
    return EXOTIC_COST_MULTIPLIER if star.star_class.is_exotic else 1


def construction_cost(star: StarSystem, building: BuildingType, count: int) -> Dict[Resource, int]:
    """Total cost of building count units on a star.

    This is the only cost rule: construct, demolish refunds and any
    display preview all go through it.

    Args:
        star: Target star
        building: Building type
        count: Number of units

    Returns:
        Mapping of resource to total amount
    """
    spec = BUILDING_CATALOG[building]
    multiplier = cost_multiplier(star)
    return {resource: amount * count * multiplier for resource, amount in spec.cost.items()}


class EconomyEngine:
    """Applies player economy actions and advances the simulation cycle.

    The engine is stateless; every method operates on the Game passed in.
    """

    def construct(self, game: Game, star_id: str, building: BuildingType, count: int) -> None:
        """Build count units of a building on a star.

        Args:
            game: Current game state
            star_id: Target star ID
            building: Building type to construct
            count: Number of units (>= 1)

        Raises:
            ValueError: If count < 1 or the star does not exist
            PrerequisiteUnmet: If the star has too few earth-like planets
            CapacityExceeded: If the type's count would pass MAX_BUILDINGS_PER_TYPE
            InsufficientResources: If the acting ledger cannot pay the cost
        """
        _check_count(count)
        star = game.get_star(star_id)
        building = BuildingType(building)
        spec = BUILDING_CATALOG[building]
        ledger = _acting_ledger(game)

        if spec.req_earth and star.earth_like_count < spec.req_earth:
            raise self._reject(
                PrerequisiteUnmet(
                    f"At least {spec.req_earth} earth-like planets required",
                    {"star": star.id, "building": building.value, "earth_like": star.earth_like_count},
                )
            )

        if star.buildings[building] + count > MAX_BUILDINGS_PER_TYPE:
            raise self._reject(
                CapacityExceeded(
                    f"Max {MAX_BUILDINGS_PER_TYPE} units per building type",
                    {"star": star.id, "building": building.value, "current": star.buildings[building]},
                )
            )

        total_cost = construction_cost(star, building, count)
        if not ledger.can_afford(total_cost):
            raise self._reject(
                InsufficientResources(
                    "Insufficient resources",
                    {"player": game.acting_player, "building": building.value, "count": count},
                )
            )

        for resource, amount in total_cost.items():
            ledger[resource] -= amount
        star.buildings[building] += count

        logger.info(f"{game.acting_player} built {count} {building.value} at {star.id}")

    def demolish(self, game: Game, star_id: str, building: BuildingType, count: int) -> None:
        """Remove count units of a building and refund half their cost, rounded down.

        Args:
            game: Current game state
            star_id: Target star ID
            building: Building type to demolish
            count: Number of units (>= 1)

        Raises:
            ValueError: If count < 1 or the star does not exist
            InvalidDemolishCount: If fewer than count units are built
        """
        _check_count(count)
        star = game.get_star(star_id)
        building = BuildingType(building)
        ledger = _acting_ledger(game)

        if star.buildings[building] < count:
            raise self._reject(
                InvalidDemolishCount(
                    f"Cannot demolish {count} {building.value}",
                    {"star": star.id, "built": star.buildings[building]},
                )
            )

        for resource, amount in construction_cost(star, building, count).items():
            ledger[resource] += amount // 2  # Half the cost, rounded down
        star.buildings[building] -= count

        logger.info(f"{game.acting_player} demolished {count} {building.value} at {star.id}")

    def synthesize(
        self,
        game: Game,
        target: Resource,
        iron_cost: int | None = None,
        yield_amount: int = 1,
    ) -> None:
        """Convert iron into a refined material.

        Args:
            game: Current game state
            target: Resource to produce (must have a synthesis recipe)
            iron_cost: Iron to spend; defaults to the recipe cost
            yield_amount: Units of target credited

        Raises:
            ValueError: If target has no recipe, iron_cost is negative or yield_amount < 1
            InsufficientResources: If the acting ledger has less iron than iron_cost
        """
        target = Resource(target)
        if target not in SYNTHESIS_RECIPES:
            raise ValueError(f"No synthesis recipe for {target.value}")
        if iron_cost is None:
            iron_cost = SYNTHESIS_RECIPES[target]
        if not _is_whole(iron_cost) or iron_cost < 0:
            raise ValueError(f"Iron cost must be a non-negative integer, got {iron_cost!r}")
        if not _is_whole(yield_amount) or yield_amount < 1:
            raise ValueError(f"Yield must be a positive integer, got {yield_amount!r}")
        ledger = _acting_ledger(game)

        if ledger[Resource.IRON] < iron_cost:
            raise self._reject(
                InsufficientResources(
                    "Insufficient iron",
                    {"player": game.acting_player, "required": iron_cost, "available": ledger[Resource.IRON]},
                )
            )

        ledger[Resource.IRON] -= iron_cost
        ledger[target] += yield_amount

        logger.info(f"{game.acting_player} synthesized {yield_amount} {target.value} from {iron_cost} iron")

    def advance_cycle(self, game: Game) -> List[ProductionEvent]:
        """Advance the day counter and resolve every owned building.

        For each owned star (in list order) and each building type with units
        (in BuildingType order):
        1. Consumption for the whole stack must be affordable, otherwise the
           stack neither consumes nor produces this cycle
        2. Consumption is deducted from the owner's ledger
        3. Iron, hydrogen and star gold are harvested from the star's reserve,
           never more than what remains; other outputs are credited in full

        Args:
            game: Current game state

        Returns:
            One ProductionEvent per building stack evaluated
        """
        game.day += 1
        events: List[ProductionEvent] = []

        for star in game.stars:
            if star.is_neutral:
                continue
            ledger = game.ledgers[star.owner]
            for building in BuildingType:
                count = star.buildings[building]
                if count == 0:
                    continue
                events.append(_run_building(star, ledger, building, count))

        fired = sum(1 for e in events if e.fired)
        logger.info(f"Day {game.day}: {fired}/{len(events)} building stacks produced")
        return events

    def _reject(self, error: Exception) -> Exception:
        logger.warning(f"Rejected: {error}")
        return error


def _run_building(
    star: StarSystem, ledger: ResourceLedger, building: BuildingType, count: int
) -> ProductionEvent:
    """Resolve one building stack for one cycle: all or nothing."""
    spec = BUILDING_CATALOG[building]
    event = ProductionEvent(star_id=star.id, owner=star.owner, building=building, count=count, fired=False)

    required = {resource: amount * count for resource, amount in spec.consumption.items()}
    if not ledger.can_afford(required):
        return event

    for resource, amount in required.items():
        ledger[resource] -= amount
    event.consumed = required

    for resource, amount in spec.production.items():
        output = amount * count
        if resource in RESERVE_RESOURCES:
            reserve_field = _RESERVE_FIELDS[resource]
            output = min(getattr(star, reserve_field), output)
            setattr(star, reserve_field, getattr(star, reserve_field) - output)
        ledger[resource] += output
        event.produced[resource] = output

    event.fired = True
    return event


def _is_whole(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_count(count: int) -> None:
    if not _is_whole(count):
        raise ValueError(f"Count must be an integer, got {count!r}")
    if count < 1:
        raise ValueError(f"Count must be positive, got {count}")


def _acting_ledger(game: Game) -> ResourceLedger:
    return game.ledger_for(game.acting_player)
