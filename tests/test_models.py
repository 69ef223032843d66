"""Tests for data models."""

import pytest
from pydantic import ValidationError

from nebula.models import (
    BuildingType,
    Game,
    MapConfig,
    Resource,
    ResourceLedger,
    StarClass,
    StarSystem,
)
from nebula.utils import MAX_BUILDINGS_PER_TYPE, MAX_RESOURCE_CAP, NEUTRAL, PLAYER_IDS


def _star(**overrides) -> StarSystem:
    values = dict(
        id="A-s-0",
        star_class=StarClass.COMMON,
        x=10.0,
        y=20.0,
        earth_like_count=1,
        gas_giant_count=2,
        label="sE1J2",
        noise_seed=0.25,
        owner=NEUTRAL,
        iron_reserve=10**10,
        hydrogen_reserve=10**10,
        star_gold_reserve=10**8,
    )
    values.update(overrides)
    return StarSystem(**values)


class TestStarSystem:
    """Test StarSystem dataclass."""

    def test_create_star(self):
        star = _star()
        assert star.star_class == StarClass.COMMON
        assert star.is_neutral
        assert not star.is_home
        assert star.buildings == {b: 0 for b in BuildingType}

    def test_class_from_code(self):
        """Test the class can be given as its map code."""
        assert _star(star_class="psr").star_class == StarClass.NEUTRON
        assert _star(star_class="STR").star_class == StarClass.SUPERMASSIVE_BLACK_HOLE

    def test_exotic_classes(self):
        assert not StarClass.COMMON.is_exotic
        assert StarClass.NEUTRON.is_exotic
        assert StarClass.BLACK_HOLE.is_exotic
        assert StarClass.SUPERMASSIVE_BLACK_HOLE.is_exotic

    def test_buildings_from_names(self):
        """Test partial building maps by name are filled out."""
        star = _star(buildings={"Mine": 3})
        assert star.buildings[BuildingType.MINE] == 3
        assert star.buildings[BuildingType.ZERO_POINT_MINE] == 0

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError, match="Invalid x coordinate"):
            _star(x=201)
        with pytest.raises(ValueError, match="Invalid y coordinate"):
            _star(y=-1)

    def test_invalid_owner(self):
        with pytest.raises(ValueError, match="Invalid owner"):
            _star(owner="Player 5")

    def test_negative_reserve(self):
        with pytest.raises(ValueError, match="iron_reserve"):
            _star(iron_reserve=-1)

    def test_building_count_limits(self):
        with pytest.raises(ValueError, match="Mine count"):
            _star(buildings={BuildingType.MINE: -1})
        with pytest.raises(ValueError, match="Mine count"):
            _star(buildings={BuildingType.MINE: MAX_BUILDINGS_PER_TYPE + 1})

    def test_unknown_building(self):
        with pytest.raises(ValueError):
            _star(buildings={"Shipyard": 1})


class TestResourceLedger:
    """Test ResourceLedger indexing and helpers."""

    def test_index_by_resource(self):
        ledger = ResourceLedger()
        ledger[Resource.DENSE_NEUTRON] = 7
        assert ledger.dense_neutron == 7
        assert ledger["denseNeutron"] == 7

    def test_from_dict_missing_kinds_zero(self):
        ledger = ResourceLedger.from_dict({"iron": 5, "starGold": 2})
        assert ledger.iron == 5
        assert ledger.star_gold == 2
        assert ledger.energy == 0

    def test_to_dict_has_every_kind(self):
        assert set(ResourceLedger().to_dict()) == {r.value for r in Resource}

    def test_negative_stock_rejected(self):
        with pytest.raises(ValueError, match="Invalid iron"):
            ResourceLedger(iron=-1)

    def test_unknown_resource_rejected(self):
        with pytest.raises(ValueError):
            ResourceLedger.from_dict({"unobtainium": 1})

    def test_can_afford(self):
        ledger = ResourceLedger(iron=10, energy=5)
        assert ledger.can_afford({Resource.IRON: 10, Resource.ENERGY: 5})
        assert not ledger.can_afford({Resource.IRON: 11})
        assert ledger.can_afford({})

    def test_display_cap_is_soft(self):
        """Test values above the display cap are allowed and flagged."""
        ledger = ResourceLedger(energy=MAX_RESOURCE_CAP + 1, iron=MAX_RESOURCE_CAP)
        assert ledger.over_display_cap() == [Resource.ENERGY]


class TestMapConfig:
    """Test MapConfig validation."""

    def test_defaults(self):
        config = MapConfig()
        assert config.common_count == 8
        assert config.neutron_count == 2
        assert config.black_hole_count == 1
        assert config.min_star_distance == 12

    def test_alias_keys(self):
        config = MapConfig.model_validate(
            {"seed": "abc", "commonCount": 3, "neutronCount": 0, "blackHoleCount": 0, "minStarDistance": 5}
        )
        assert config.common_count == 3
        assert config.min_star_distance == 5

    def test_renderer_keys_pass_through(self):
        config = MapConfig.model_validate({"seed": "abc", "dustDensity": 0.35})
        assert config.model_dump(by_alias=True)["dustDensity"] == 0.35

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            MapConfig(common_count=-1)


class TestGame:
    """Test Game container."""

    def test_defaults(self):
        game = Game(map_config=MapConfig(seed="x"))
        assert game.day == 1
        assert game.acting_player == "Player 1"
        assert set(game.ledgers) == {*PLAYER_IDS, NEUTRAL}
        assert game.technologies == {pid: set() for pid in PLAYER_IDS}

    def test_invalid_acting_player(self):
        with pytest.raises(ValueError, match="Invalid acting player"):
            Game(map_config=MapConfig(), acting_player=NEUTRAL)
        game = Game(map_config=MapConfig())
        with pytest.raises(ValueError, match="Invalid acting player"):
            game.set_acting_player(NEUTRAL)

    def test_invalid_day(self):
        with pytest.raises(ValueError, match="Invalid day"):
            Game(map_config=MapConfig(), day=0)

    def test_duplicate_star_ids(self):
        with pytest.raises(ValueError, match="unique"):
            Game(map_config=MapConfig(), stars=[_star(), _star()])

    def test_displayed_ledger(self):
        """Test a neutral star shows an all-zero ledger, an owned star its owner's."""
        owned = _star(id="owned", owner="Player 2")
        neutral = _star(id="free")
        game = Game(map_config=MapConfig(), stars=[owned, neutral])

        assert game.displayed_ledger("owned") is game.ledgers["Player 2"]
        assert game.displayed_ledger("free") == ResourceLedger()

    def test_neutral_ledger_always_empty(self):
        """Test a stocked Neutral ledger is replaced by an empty one."""
        ledgers = {pid: ResourceLedger(iron=100) for pid in PLAYER_IDS}
        ledgers[NEUTRAL] = ResourceLedger(nano=10, iron=5)

        game = Game(map_config=MapConfig(), ledgers=ledgers)

        assert game.ledgers[NEUTRAL] == ResourceLedger()
        assert game.ledgers["Player 1"].iron == 100
