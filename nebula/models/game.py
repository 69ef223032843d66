"""Game state container."""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..utils.constants import FIRST_DAY, INITIAL_RESOURCES, NEUTRAL, PLAYER_IDS
from .config import MapConfig
from .ledger import ResourceLedger
from .star import StarSystem


def initial_ledgers() -> Dict[str, ResourceLedger]:
    """Starting ledgers: every player gets the initial stock, Neutral gets nothing."""
    ledgers = {pid: ResourceLedger.from_dict(INITIAL_RESOURCES) for pid in PLAYER_IDS}
    ledgers[NEUTRAL] = ResourceLedger()
    return ledgers


@dataclass
class Game:
    """Main simulation context.

    Holds the star systems, the per-player ledgers and the cycle counter. The
    economy engine operates on one Game at a time; generating a new galaxy
    produces a new Game rather than resetting this one.
    """

    map_config: MapConfig
    stars: List[StarSystem] = field(default_factory=list)
    ledgers: Dict[str, ResourceLedger] = field(default_factory=initial_ledgers)
    technologies: Dict[str, Set[str]] = field(
        default_factory=lambda: {pid: set() for pid in PLAYER_IDS}
    )  # Owned technology ids, never touched by the engine
    day: int = FIRST_DAY
    acting_player: str = PLAYER_IDS[0]

    def __post_init__(self):
        """Validate game data after initialization."""
        if self.day < FIRST_DAY:
            raise ValueError(f"Invalid day: {self.day} (must be >= {FIRST_DAY})")
        if self.acting_player not in PLAYER_IDS:
            raise ValueError(f"Invalid acting player: {self.acting_player}")
        missing = set(PLAYER_IDS) - set(self.ledgers)
        if missing:
            raise ValueError(f"Missing ledgers for: {', '.join(sorted(missing))}")
        # Neutral always reads as empty, whatever a save file holds
        self.ledgers[NEUTRAL] = ResourceLedger()
        ids = [s.id for s in self.stars]
        if len(ids) != len(set(ids)):
            raise ValueError("Star ids must be unique")
        self._star_index = {s.id: s for s in self.stars}

    def get_star(self, star_id: str) -> StarSystem:
        """Look up a star by id.

        Raises:
            ValueError: If no star has that id
        """
        star = self._star_index.get(star_id)
        if star is None:
            raise ValueError(f"Star '{star_id}' does not exist")
        return star

    def ledger_for(self, player: str) -> ResourceLedger:
        if player not in self.ledgers:
            raise ValueError(f"Invalid player: {player}")
        return self.ledgers[player]

    def displayed_ledger(self, star_id: str) -> ResourceLedger:
        """Ledger shown when a star is selected: its owner's, or all zeros if neutral."""
        star = self.get_star(star_id)
        if star.is_neutral:
            return ResourceLedger()
        return self.ledgers[star.owner]

    def set_acting_player(self, player: str) -> None:
        if player not in PLAYER_IDS:
            raise ValueError(f"Invalid acting player: {player}")
        self.acting_player = player
