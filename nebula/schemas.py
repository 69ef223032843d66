"""Pydantic schemas for the saved-game document."""

from pydantic import BaseModel, Field


class StarSchema(BaseModel):
    """One star system as stored in a save file."""

    id: str
    type: str = Field(description="Class code: 's', 'psr', 'str' or 'STR'")
    x: float
    y: float
    earthLikeCount: int = Field(ge=0)  # noqa: N815
    gasGiantCount: int = Field(ge=0)  # noqa: N815
    label: str
    noiseSeed: float = 0.0  # noqa: N815
    owner: str
    ironReserve: int = Field(ge=0)  # noqa: N815
    hydrogenReserve: int = Field(ge=0)  # noqa: N815
    starGoldReserve: int = Field(ge=0)  # noqa: N815
    isHome: bool = False  # noqa: N815
    buildings: dict[str, int] = Field(default_factory=dict)


class SaveStateSchema(BaseModel):
    """Everything needed to rebuild a running game."""

    stars: list[StarSchema]
    playerResources: dict[str, dict[str, int]]  # noqa: N815
    technologies: dict[str, list[str]] = Field(default_factory=dict)
    mapConfig: dict  # noqa: N815
    day: int = Field(ge=1)
    currentPlayer: str  # noqa: N815
