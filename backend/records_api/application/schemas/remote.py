"""Pydantic DTOs for the remote volume search API.

Only the fields needed to build a Record are declared; everything else in
the upstream payload is ignored.
"""

from pydantic import BaseModel, Field


class VolumeInfo(BaseModel):
    title: str
    description: str | None = None
    page_count: int | None = Field(None, alias="pageCount", ge=0)

    model_config = {"populate_by_name": True}


class Volume(BaseModel):
    id: str
    volume_info: VolumeInfo = Field(..., alias="volumeInfo")

    model_config = {"populate_by_name": True}


class VolumeSearchResponse(BaseModel):
    """Top-level body of a volumes search."""

    total_items: int = Field(0, alias="totalItems")
    items: list[Volume] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
