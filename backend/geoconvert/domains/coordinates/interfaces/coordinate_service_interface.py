from abc import ABC, abstractmethod
from typing import List, Optional

from geoconvert.domains.common.utils.result import Result
from geoconvert.domains.coordinates.models.coordinate_model import (
    DMSCoordinate,
    FormattedUTMCoordinate,
    GeoCoordinate,
    Hemisphere,
    UTMCoordinate,
)


class CoordinateServiceInterface(ABC):
    """座標轉換服務介面"""

    @abstractmethod
    async def geo_to_utm(
        self, geo: GeoCoordinate, zone: Optional[int] = None
    ) -> UTMCoordinate:
        """將地理座標轉換為 UTM 座標"""
        pass

    @abstractmethod
    async def utm_to_geo(
        self, easting: float, northing: float, zone: int, hemisphere: Hemisphere
    ) -> GeoCoordinate:
        """將 UTM 座標轉換為地理座標"""
        pass

    @abstractmethod
    async def geo_to_utm_batch(self, points: List[GeoCoordinate]) -> List[UTMCoordinate]:
        """批次將地理座標轉換為 UTM 座標"""
        pass

    @abstractmethod
    async def format_utm(
        self, geo: GeoCoordinate, precision: int = 0, zone: Optional[int] = None
    ) -> FormattedUTMCoordinate:
        """將地理座標轉換為以固定小數位字串表示的 UTM 座標"""
        pass

    @abstractmethod
    async def dms_to_decimal(self, dms: DMSCoordinate) -> float:
        """將度分秒轉換為十進位度數"""
        pass

    @abstractmethod
    async def dms_to_decimal_batch(
        self, items: List[DMSCoordinate]
    ) -> List[Result[float]]:
        """批次將度分秒轉換為十進位度數，每筆各自回傳結果"""
        pass

    @abstractmethod
    async def decimal_to_dms(self, decimal: float, precision: Optional[int] = None) -> str:
        """將十進位度數格式化為度分秒字串"""
        pass
