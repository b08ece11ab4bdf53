"""
Pydantic v2 data models for the workplace ranking domain.

Records arrive from the shifts API with camelCase keys (``workplaceId``,
``workerId``); the models accept those names through aliases and expose
snake_case attributes. Unknown fields in source records are ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Workplace(BaseModel):
    """A workplace as returned by the workplaces collection."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Opaque workplace identifier")
    name: str = Field(..., description="Display name")


class Shift(BaseModel):
    """A shift record. Only ``workplace_id`` takes part in ranking."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    workplace_id: Optional[str] = Field(
        default=None,
        alias="workplaceId",
        description="Id of the workplace the shift belongs to, None when unset",
    )
    worker_id: Optional[str] = Field(
        default=None,
        alias="workerId",
        description="Assigned worker, None for unclaimed shifts",
    )


class RankedWorkplace(BaseModel):
    """Leaderboard entry: a workplace name and its shift count."""

    model_config = ConfigDict(frozen=True)

    name: str
    shifts: int = Field(..., ge=0)
