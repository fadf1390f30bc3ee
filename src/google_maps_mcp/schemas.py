"""Argument models for each tool; the Dispatcher validates every call against these."""

from typing import List, Optional

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class GeocodeArgs(BaseModel):
    address: str = Field(min_length=1)


class ReverseGeocodeArgs(LatLng):
    pass


class SearchPlacesArgs(BaseModel):
    query: str = Field(min_length=1)
    location: Optional[LatLng] = None
    radius: Optional[float] = Field(default=None, gt=0, le=50000)


class PlaceDetailsArgs(BaseModel):
    # Used as a URL path segment
    place_id: str = Field(min_length=1, pattern=r"^[^/?#]+$")


class DistanceMatrixArgs(BaseModel):
    origins: List[str] = Field(min_length=1)
    destinations: List[str] = Field(min_length=1)
    # Unknown modes are accepted and fall back to DRIVE.
    mode: Optional[str] = None


class ElevationArgs(BaseModel):
    locations: List[LatLng] = Field(min_length=1)


class DirectionsArgs(BaseModel):
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    mode: Optional[str] = None
