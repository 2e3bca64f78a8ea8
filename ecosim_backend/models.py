"""Validated payloads for operator commands."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from ecosim.environment import Season


class PositionModel(BaseModel):
    """Grid coordinates; bounds are checked by the placement gatekeeper."""

    x: float
    y: float


class PlaceOrganismCommand(BaseModel):
    """Add an organism of ``type`` at ``position``."""

    type: str = Field(min_length=1)
    position: PositionModel


class RemoveOrganismCommand(BaseModel):
    id: str = Field(min_length=1)


class LevelCommand(BaseModel):
    """Water or sunlight level (0-100)."""

    level: float = Field(ge=0, le=100)


class SpeedCommand(BaseModel):
    speed: int = Field(ge=1, le=10)


class SeasonCommand(BaseModel):
    season: Season


class SeasonLengthCommand(BaseModel):
    milliseconds: float = Field(gt=0)


class BiomeCommand(BaseModel):
    biome_type: Literal["forest", "desert", "ocean"]


class CommandResponse(BaseModel):
    """Uniform reply for every command."""

    success: bool = True
    error: Optional[str] = None
    placed: Optional[bool] = None
    paused: Optional[bool] = None
