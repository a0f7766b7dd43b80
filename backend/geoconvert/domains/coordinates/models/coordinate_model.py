from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

from geoconvert.domains.common.models.base_model import ValueObject


class Hemisphere(str, Enum):
    """南北半球"""

    NORTH = "N"
    SOUTH = "S"


class CardinalDirection(str, Enum):
    """DMS 座標的方位字母"""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def is_latitude(self) -> bool:
        return self in (CardinalDirection.NORTH, CardinalDirection.SOUTH)

    @property
    def is_negative(self) -> bool:
        return self in (CardinalDirection.SOUTH, CardinalDirection.WEST)


class RadianPoint(NamedTuple):
    """以弧度表示的經緯度，僅在投影計算內部使用"""

    latitude: float
    longitude: float


class PlanePoint(NamedTuple):
    """橫麥卡托平面座標 (尚未套用 UTM 比例與偏移)"""

    x: float
    y: float


class GeoCoordinate(ValueObject):
    """地理座標模型，表示地球上的位置"""

    latitude: float = Field(..., description="緯度 (度)，範圍 -90 到 90")
    longitude: float = Field(..., description="經度 (度)，範圍 -180 到 180")


class UTMCoordinate(ValueObject):
    """UTM 座標模型"""

    easting: float = Field(..., description="東距，單位:米")
    northing: float = Field(..., description="北距，單位:米")
    zone: int = Field(..., description="UTM 經度區帶")
    hemisphere: Hemisphere = Field(..., description="半球 (N/S)")


class FormattedUTMCoordinate(ValueObject):
    """以固定小數位字串表示東距與北距的 UTM 座標"""

    easting: str = Field(..., description="東距，固定小數位")
    northing: str = Field(..., description="北距，固定小數位")
    zone: int = Field(..., description="UTM 經度區帶")
    hemisphere: Hemisphere = Field(..., description="半球 (N/S)")


class DMSCoordinate(ValueObject):
    """度分秒座標"""

    direction: Optional[CardinalDirection] = Field(
        None, description="方位 N/S/E/W，未指定時視為經度"
    )
    degrees: float = Field(..., description="度")
    minutes: float = Field(0.0, description="分")
    seconds: float = Field(0.0, description="秒")


# --- API 請求模型 ---


class GeoToUTMRequest(BaseModel):
    """經緯度轉 UTM 請求"""

    latitude: float = Field(..., ge=-90, le=90, description="緯度 (度)")
    longitude: float = Field(..., ge=-180, le=180, description="經度 (度)")
    zone: Optional[int] = Field(
        None, ge=1, le=60, description="指定 UTM 區帶，未指定時依經度計算"
    )


class UTMToGeoRequest(BaseModel):
    """UTM 轉經緯度請求"""

    easting: float = Field(..., description="東距，單位:米")
    northing: float = Field(..., ge=0, description="北距，單位:米")
    zone: int = Field(..., ge=1, le=60, description="UTM 經度區帶")
    hemisphere: Hemisphere = Field(Hemisphere.NORTH, description="半球 (N/S)")
