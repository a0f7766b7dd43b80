"""
UTM 轉換

在橫麥卡托投影之上套用 UTM 區帶、中央經線、比例因子 0.9996、
500000 米東距偏移與南半球 10000000 米北距偏移。
"""

import math
from typing import Optional, Union

from geoconvert.domains.coordinates.models.coordinate_model import (
    GeoCoordinate,
    Hemisphere,
    UTMCoordinate,
)
from geoconvert.domains.coordinates.models.ellipsoid_model import (
    PI,
    UTM_FALSE_EASTING,
    UTM_FALSE_NORTHING_SOUTH,
    UTM_SCALE_FACTOR,
)
from geoconvert.domains.coordinates.services import transverse_mercator

MIN_ZONE = 1
MAX_ZONE = 60


def deg_to_rad(deg: float) -> float:
    return deg / 180.0 * PI


def rad_to_deg(rad: float) -> float:
    return rad / PI * 180.0


def utm_zone(lon_deg: float) -> int:
    """依經度計算 UTM 區帶，經度 [-180, 180) 對應區帶 [1, 60]"""
    return math.floor((lon_deg + 180.0) / 6) + 1


def utm_central_meridian(zone: int) -> float:
    """UTM 區帶的中央經線，單位:弧度"""
    return deg_to_rad(-183.0 + (zone * 6.0))


def resolve_zone(lon_deg: float, zone: Optional[int] = None) -> int:
    """決定實際使用的區帶

    未指定或指定值不在 [1, 60] 時，依經度計算。
    """
    if zone is None or not MIN_ZONE <= zone <= MAX_ZONE:
        return utm_zone(lon_deg)
    return int(zone)


def to_utm(lat_deg: float, lon_deg: float, zone: Optional[int] = None) -> UTMCoordinate:
    """將經緯度 (度) 轉換為 UTM 座標

    Args:
        lat_deg: 緯度，單位:度
        lon_deg: 經度，單位:度
        zone: 強制使用的 UTM 區帶，預設依經度計算

    Returns:
        UTM 座標
    """
    zone = resolve_zone(lon_deg, zone)

    x, y = transverse_mercator.project(
        deg_to_rad(lat_deg), deg_to_rad(lon_deg), utm_central_meridian(zone)
    )

    easting = x * UTM_SCALE_FACTOR + UTM_FALSE_EASTING
    northing = y * UTM_SCALE_FACTOR
    # 由計算出的北距正負決定是否加上偏移，而非半球
    if northing < 0.0:
        northing = northing + UTM_FALSE_NORTHING_SOUTH

    return UTMCoordinate(
        easting=easting,
        northing=northing,
        zone=zone,
        hemisphere=Hemisphere.SOUTH if lat_deg < 0 else Hemisphere.NORTH,
    )


def from_utm(
    easting: float,
    northing: float,
    zone: int,
    hemisphere: Union[Hemisphere, str] = Hemisphere.NORTH,
) -> GeoCoordinate:
    """將 UTM 座標轉換為經緯度 (度)

    Args:
        easting: 東距，單位:米
        northing: 北距，單位:米
        zone: UTM 區帶
        hemisphere: 半球，接受 Hemisphere 或 "N"/"S" (不分大小寫)

    Returns:
        地理座標
    """
    x = (easting - UTM_FALSE_EASTING) / UTM_SCALE_FACTOR

    y = northing
    if isinstance(hemisphere, str):
        hemisphere = Hemisphere(hemisphere.strip().upper())
    if hemisphere is Hemisphere.SOUTH:
        y -= UTM_FALSE_NORTHING_SOUTH
    y /= UTM_SCALE_FACTOR

    phi, lam = transverse_mercator.unproject(x, y, utm_central_meridian(zone))

    return GeoCoordinate(latitude=rad_to_deg(phi), longitude=rad_to_deg(lam))
