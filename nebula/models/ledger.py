"""Resource kinds and per-player resource ledgers."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict

from ..utils.constants import MAX_RESOURCE_CAP


class Resource(str, Enum):
    """The eight tradeable resource kinds.

    Values match the keys used in saved games and building tables.
    """

    IRON = "iron"
    NANO = "nano"
    ENERGY = "energy"
    HYDROGEN = "hydrogen"
    CARBYNE = "carbyne"
    DENSE_NEUTRON = "denseNeutron"
    STRONG_INTERACTION = "strongInteraction"
    STAR_GOLD = "starGold"


# Resources whose production is limited by a star's finite reserve
RESERVE_RESOURCES = (Resource.IRON, Resource.HYDROGEN, Resource.STAR_GOLD)

_FIELD_BY_RESOURCE = {
    Resource.IRON: "iron",
    Resource.NANO: "nano",
    Resource.ENERGY: "energy",
    Resource.HYDROGEN: "hydrogen",
    Resource.CARBYNE: "carbyne",
    Resource.DENSE_NEUTRON: "dense_neutron",
    Resource.STRONG_INTERACTION: "strong_interaction",
    Resource.STAR_GOLD: "star_gold",
}


@dataclass
class ResourceLedger:
    """A player's stock of every resource kind.

    Fields are indexed by Resource (``ledger[Resource.IRON]``). There is no
    arithmetic ceiling; MAX_RESOURCE_CAP only drives a UI alarm.
    """

    iron: int = 0
    nano: int = 0
    energy: int = 0
    hydrogen: int = 0
    carbyne: int = 0
    dense_neutron: int = 0
    strong_interaction: int = 0
    star_gold: int = 0

    def __post_init__(self):
        """Validate ledger data after initialization."""
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Invalid {f.name}: {getattr(self, f.name)} (must be >= 0)")

    def __getitem__(self, resource: Resource) -> int:
        return getattr(self, _FIELD_BY_RESOURCE[Resource(resource)])

    def __setitem__(self, resource: Resource, amount: int) -> None:
        setattr(self, _FIELD_BY_RESOURCE[Resource(resource)], amount)

    def can_afford(self, amounts: Dict[Resource, int]) -> bool:
        """Check whether every amount is covered by the current stock."""
        return all(self[resource] >= amount for resource, amount in amounts.items())

    def over_display_cap(self) -> list[Resource]:
        """Resources whose stock is above the soft display threshold."""
        return [r for r in Resource if self[r] > MAX_RESOURCE_CAP]

    def to_dict(self) -> Dict[str, int]:
        return {r.value: self[r] for r in Resource}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "ResourceLedger":
        """Build a ledger from resource-keyed amounts; missing kinds are zero."""
        return cls(**{_FIELD_BY_RESOURCE[Resource(key)]: amount for key, amount in data.items()})
