import logging
from typing import List, Optional

from geoconvert.domains.common.utils.result import Result
from geoconvert.domains.coordinates.interfaces.coordinate_service_interface import (
    CoordinateServiceInterface,
)
from geoconvert.domains.coordinates.models.coordinate_errors import (
    CoordinateRangeError,
)
from geoconvert.domains.coordinates.models.coordinate_model import (
    DMSCoordinate,
    FormattedUTMCoordinate,
    GeoCoordinate,
    Hemisphere,
    UTMCoordinate,
)
from geoconvert.domains.coordinates.services import degree_format, utm_converter

logger = logging.getLogger(__name__)


class CoordinateService(CoordinateServiceInterface):
    """座標轉換服務實現"""

    def _check_zone(self, geo: GeoCoordinate, zone: Optional[int]) -> None:
        if zone is not None and utm_converter.resolve_zone(geo.longitude, zone) != zone:
            logger.warning(
                f"Requested UTM zone {zone} is outside [1, 60], "
                f"falling back to zone computed from longitude {geo.longitude}"
            )

    async def geo_to_utm(
        self, geo: GeoCoordinate, zone: Optional[int] = None
    ) -> UTMCoordinate:
        """將地理座標轉換為 UTM 座標"""
        self._check_zone(geo, zone)
        result = utm_converter.to_utm(geo.latitude, geo.longitude, zone)
        logger.debug(f"Converted geo {geo} to UTM {result}")
        return result

    async def utm_to_geo(
        self,
        easting: float,
        northing: float,
        zone: int,
        hemisphere: Hemisphere = Hemisphere.NORTH,
    ) -> GeoCoordinate:
        """將 UTM 座標轉換為地理座標"""
        result = utm_converter.from_utm(easting, northing, zone, hemisphere)
        logger.debug(
            f"Converted UTM ({easting}, {northing}, zone {zone}, hemisphere {hemisphere}) "
            f"to geo {result}"
        )
        return result

    async def geo_to_utm_batch(self, points: List[GeoCoordinate]) -> List[UTMCoordinate]:
        """批次將地理座標轉換為 UTM 座標"""
        results = [
            utm_converter.to_utm(point.latitude, point.longitude) for point in points
        ]
        logger.debug(f"Converted {len(results)} geo coordinates to UTM")
        return results

    async def format_utm(
        self, geo: GeoCoordinate, precision: int = 0, zone: Optional[int] = None
    ) -> FormattedUTMCoordinate:
        """將地理座標轉換為以固定小數位字串表示的 UTM 座標"""
        self._check_zone(geo, zone)
        return degree_format.format_utm(geo.latitude, geo.longitude, precision, zone)

    async def dms_to_decimal(self, dms: DMSCoordinate) -> float:
        """將度分秒轉換為十進位度數

        Raises:
            LatitudeRangeError: 緯度度數超出 ±90
            LongitudeRangeError: 經度度數超出 ±180
        """
        return degree_format.dms_to_decimal(
            dms.direction, dms.degrees, dms.minutes, dms.seconds
        )

    async def dms_to_decimal_batch(
        self, items: List[DMSCoordinate]
    ) -> List[Result[float]]:
        """批次將度分秒轉換為十進位度數，單筆超出範圍只影響該筆結果"""
        results: List[Result[float]] = []
        for dms in items:
            try:
                value = degree_format.dms_to_decimal(
                    dms.direction, dms.degrees, dms.minutes, dms.seconds
                )
            except CoordinateRangeError as e:
                logger.info(f"Rejected DMS coordinate {dms}: {e}")
                error = e.to_error()
                results.append(
                    Result[float].failure(error.code, error.message, error.details)
                )
            else:
                results.append(Result[float].success(value))
        return results

    async def decimal_to_dms(self, decimal: float, precision: Optional[int] = None) -> str:
        """將十進位度數格式化為度分秒字串"""
        return degree_format.decimal_to_dms(decimal, precision)
