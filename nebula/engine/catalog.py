"""Static building table and synthesis exchange rates."""

from ..models.building import BuildingSpec, BuildingType
from ..models.ledger import Resource

BUILDING_CATALOG: dict[BuildingType, BuildingSpec] = {
    BuildingType.MINE: BuildingSpec(
        name="Basic Mine",
        cost={Resource.IRON: 1, Resource.ENERGY: 1},
        production={Resource.IRON: 1},
        consumption={},
        req_earth=1,
    ),
    BuildingType.NANO_MINE: BuildingSpec(
        name="Nano Mine",
        cost={Resource.NANO: 1, Resource.ENERGY: 1},
        production={Resource.IRON: 2},
        consumption={Resource.ENERGY: 100},
        req_earth=1,
    ),
    BuildingType.FUSION_REACTOR: BuildingSpec(
        name="Fusion Reactor",
        cost={Resource.IRON: 20, Resource.ENERGY: 40},
        production={Resource.ENERGY: 10},
        consumption={Resource.HYDROGEN: 1},
    ),
    BuildingType.ZERO_POINT_MINE: BuildingSpec(
        name="Zero-Point Extractor",
        cost={Resource.IRON: 20000, Resource.ENERGY: 20000},
        production={Resource.ENERGY: 1000},
        consumption={},
    ),
}

# Iron needed per unit of synthesized material
SYNTHESIS_RECIPES: dict[Resource, int] = {
    Resource.NANO: 2,
    Resource.CARBYNE: 5,
    Resource.DENSE_NEUTRON: 10,
    Resource.STRONG_INTERACTION: 20,
}
