"""
度分秒 (DMS) 與十進位度數之間的轉換，以及 UTM 結果的字串格式化。
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from geoconvert.domains.coordinates.models.coordinate_errors import (
    LatitudeRangeError,
    LongitudeRangeError,
)
from geoconvert.domains.coordinates.models.coordinate_model import (
    CardinalDirection,
    FormattedUTMCoordinate,
)
from geoconvert.domains.coordinates.services.utm_converter import to_utm

# 奈度 (nanodegree) 精度，分解前先四捨五入以消除浮點殘差
NANODEGREES = 1000000000.0
SECONDS_SCALE = 100000000.0


def _as_direction(
    direction: Union[CardinalDirection, str, None]
) -> Optional[CardinalDirection]:
    """無法辨識的方位字母視為未指定 (經度)"""
    if direction is None or isinstance(direction, CardinalDirection):
        return direction
    try:
        return CardinalDirection(direction.strip().upper())
    except ValueError:
        return None


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _round_seconds(sec: float, precision: int) -> float:
    """以浮點數的精確值四捨五入，.5 一律進位"""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(sec).quantize(quantum, rounding=ROUND_HALF_UP))


def _format_number(value: float) -> str:
    """以最短可還原的位數輸出，不使用科學記號，整數值不輸出小數部分"""
    if float(value).is_integer():
        return str(int(value))
    text = format(Decimal(repr(float(value))), "f")
    return text.rstrip("0").rstrip(".")


def dms_to_decimal(
    direction: Union[CardinalDirection, str, None],
    degrees: float,
    minutes: float = 0.0,
    seconds: float = 0.0,
) -> float:
    """將度分秒轉換為十進位度數

    Args:
        direction: 方位 N/S/E/W (不分大小寫)，None 或無法辨識的字母視為經度
        degrees: 度
        minutes: 分
        seconds: 秒

    Returns:
        十進位度數，S/W 為負值

    Raises:
        LatitudeRangeError: 方位為 N/S 且 |degrees| > 90
        LongitudeRangeError: 其他方位且 |degrees| > 180
    """
    direction = _as_direction(direction)

    if direction is not None and direction.is_latitude:
        if abs(degrees) > LatitudeRangeError.bound:
            raise LatitudeRangeError(degrees)
    elif abs(degrees) > LongitudeRangeError.bound:
        raise LongitudeRangeError(degrees)

    if direction is not None and direction.is_negative:
        degrees = -degrees
        minutes = -minutes
        seconds = -seconds

    return degrees + minutes / 60 + seconds / 3600


def decimal_to_dms(decimal: float, precision: Optional[int] = None) -> str:
    """將十進位度數格式化為 D°M'S" 字串

    輸出只保留絕對值，正負號不會出現在字串中。

    Args:
        decimal: 十進位度數
        precision: 秒保留的小數位數，None 表示不額外取捨

    Returns:
        格式化後的度分秒字串
    """
    value = abs(_round_half_up(decimal * NANODEGREES))

    deg = math.floor(value / NANODEGREES)
    minutes = math.floor(((value / NANODEGREES) - deg) * 60)
    sec = (
        math.floor(
            ((((value / NANODEGREES) - math.floor(value / NANODEGREES)) * 60) - minutes)
            * SECONDS_SCALE
        )
        * 60
        / SECONDS_SCALE
    )
    if precision is not None:
        sec = _round_seconds(sec, precision)

    return f"{deg}°{minutes}'{_format_number(sec)}\""


def format_utm(
    latitude: float,
    longitude: float,
    precision: int = 0,
    zone: Optional[int] = None,
) -> FormattedUTMCoordinate:
    """轉換為 UTM 並將東距、北距格式化為固定小數位字串"""
    utm = to_utm(latitude, longitude, zone)
    return FormattedUTMCoordinate(
        easting=f"{utm.easting:.{precision}f}",
        northing=f"{utm.northing:.{precision}f}",
        zone=utm.zone,
        hemisphere=utm.hemisphere,
    )
