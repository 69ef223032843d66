"""Game state serialization to/from JSON.

The saved document holds the star list, every ledger, owned technologies,
the map config, the day counter and the acting player. Nothing else is
needed to resume a game.
"""

import json
from pathlib import Path
from typing import Any

from ..models.config import MapConfig
from ..models.game import Game
from ..models.ledger import ResourceLedger
from ..models.star import StarSystem
from ..schemas import SaveStateSchema, StarSchema


def save_game(game: Game, filepath: str) -> None:
    """Save game state to JSON file.

    Args:
        game: Game state to save
        filepath: Destination path; parent directories are created

    Example:
        save_game(game, "saves/operation_nebula.json")
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(serialize_game(game), f, indent=2)


def load_game(filepath: str) -> Game:
    """Load game state from JSON file.

    Args:
        filepath: Path to saved game file

    Returns:
        Loaded Game object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
    """
    with open(filepath) as f:
        data = json.load(f)

    return deserialize_game(data)


def serialize_game(game: Game) -> dict[str, Any]:
    """Convert Game object to JSON-compatible dictionary."""
    return {
        "stars": [_serialize_star(s) for s in game.stars],
        "playerResources": {pid: ledger.to_dict() for pid, ledger in game.ledgers.items()},
        "technologies": {pid: sorted(techs) for pid, techs in game.technologies.items()},
        "mapConfig": game.map_config.model_dump(by_alias=True),
        "day": game.day,
        "currentPlayer": game.acting_player,
    }


def deserialize_game(data: dict[str, Any]) -> Game:
    """Reconstruct Game object from dictionary.

    Raises:
        ValueError: If the document fails schema or model validation
    """
    state = SaveStateSchema.model_validate(data)

    return Game(
        map_config=MapConfig.model_validate(state.mapConfig),
        stars=[_deserialize_star(s) for s in state.stars],
        ledgers={pid: ResourceLedger.from_dict(res) for pid, res in state.playerResources.items()},
        technologies={pid: set(techs) for pid, techs in state.technologies.items()},
        day=state.day,
        acting_player=state.currentPlayer,
    )


def _serialize_star(star: StarSystem) -> dict[str, Any]:
    """Convert StarSystem to dictionary."""
    return {
        "id": star.id,
        "type": star.star_class.value,
        "x": star.x,
        "y": star.y,
        "earthLikeCount": star.earth_like_count,
        "gasGiantCount": star.gas_giant_count,
        "label": star.label,
        "noiseSeed": star.noise_seed,
        "owner": star.owner,
        "ironReserve": star.iron_reserve,
        "hydrogenReserve": star.hydrogen_reserve,
        "starGoldReserve": star.star_gold_reserve,
        "isHome": star.is_home,
        "buildings": {b.value: n for b, n in star.buildings.items()},
    }


def _deserialize_star(data: StarSchema) -> StarSystem:
    """Reconstruct StarSystem from its schema."""
    return StarSystem(
        id=data.id,
        star_class=data.type,
        x=data.x,
        y=data.y,
        earth_like_count=data.earthLikeCount,
        gas_giant_count=data.gasGiantCount,
        label=data.label,
        noise_seed=data.noiseSeed,
        owner=data.owner,
        iron_reserve=data.ironReserve,
        hydrogen_reserve=data.hydrogenReserve,
        star_gold_reserve=data.starGoldReserve,
        is_home=data.isHome,
        buildings=data.buildings,
    )
