from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Wire(BaseModel):
    # Roads API payloads are camelCase; python attributes are snake_case
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LatLng(_Wire):
    latitude: float
    longitude: float


class SnappedPoint(_Wire):
    location: LatLng
    original_index: Optional[int] = Field(default=None, alias="originalIndex")
    place_id: str = Field(alias="placeId")


class SpeedUnits(str, Enum):
    KPH = "KPH"
    MPH = "MPH"


class SpeedLimit(_Wire):
    place_id: str = Field(alias="placeId")
    speed_limit: float = Field(alias="speedLimit")
    units: SpeedUnits = SpeedUnits.KPH


class SnapToRoadsResponse(_Wire):
    snapped_points: List[SnappedPoint] = Field(default_factory=list, alias="snappedPoints")
    warning_message: Optional[str] = Field(default=None, alias="warningMessage")


class SpeedLimitsResponse(_Wire):
    speed_limits: List[SpeedLimit] = Field(default_factory=list, alias="speedLimits")


class SnappedSpeedLimits(_Wire):
    speed_limits: List[SpeedLimit] = Field(default_factory=list, alias="speedLimits")
    snapped_points: List[SnappedPoint] = Field(default_factory=list, alias="snappedPoints")


class ErrorDetail(_Wire):
    status: Optional[str] = None
    message: Optional[str] = None

    @field_validator("status", "message", mode="before")
    @classmethod
    def _as_text(cls, v):
        return None if v is None else str(v)


class ErrorEnvelope(_Wire):
    error: ErrorDetail
