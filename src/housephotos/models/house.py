"""
House Data Models

Pydantic models for house records served by the paginated houses API.
"""
from typing import List
from pathlib import PurePosixPath
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field


class House(BaseModel):
    """
    House record from one page of the houses API.

    Instances are frozen once decoded; each one is handed to exactly one
    download worker. Validation is strict: a number sent as a string or a
    bool is rejected, not coerced.

    Attributes:
        id: Identifier assigned by the API
        address: Street address as listed
        homeowner: Owner name
        price: Listed price
        photo_url: URL of the house photo
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    id: int = Field(..., description="House identifier")
    address: str = Field(..., description="Street address")
    homeowner: str = Field(..., description="Homeowner name")
    price: int = Field(..., description="Listed price")
    photo_url: str = Field(..., alias="photoURL", description="Photo URL")

    @property
    def normalized_address(self) -> str:
        """Address with trailing dots removed."""
        return self.address.rstrip(".")

    @property
    def photo_extension(self) -> str:
        """File extension of the photo URL path, without the leading dot."""
        suffix = PurePosixPath(urlparse(self.photo_url).path).suffix
        return suffix.lstrip(".")

    def to_dict(self) -> dict:
        """Convert to dictionary using the API's field names."""
        return self.model_dump(by_alias=True)


class HousesPage(BaseModel):
    """One decoded page of the houses API."""

    houses: List[House] = Field(default_factory=list)
