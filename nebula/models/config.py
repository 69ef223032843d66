"""Map generation configuration."""

from pydantic import BaseModel, ConfigDict, Field


class MapConfig(BaseModel):
    """Galaxy generation parameters.

    Star counts are per sector and per class. Keys unknown to the core (the
    renderer's dust-field settings) are kept so they survive a save/load.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    seed: str = Field(default="", description="Generation seed; empty picks a random one")
    common_count: int = Field(default=8, ge=0, alias="commonCount")
    neutron_count: int = Field(default=2, ge=0, alias="neutronCount")
    black_hole_count: int = Field(default=1, ge=0, alias="blackHoleCount")
    min_star_distance: float = Field(default=12, ge=0, alias="minStarDistance")
