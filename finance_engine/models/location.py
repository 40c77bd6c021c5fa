"""Location search result model (used by expense geotagging)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationResult(BaseModel):
    """A place returned by the location search collaborator."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        description="Provider identifier of the place"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Short display name (first component of the address)"
    )
    address: Optional[str] = Field(
        default=None,
        description="Full display address, if the provider returned one"
    )
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
