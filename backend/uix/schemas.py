"""Pydantic request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    # Unknown properties are dropped rather than rejected
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class HealthResponse(ApiModel):
    status: str


class UiSettingsResponse(ApiModel):
    version: str
    port: int
    custom_wallpaper: bool = Field(alias="customWallpaper")
