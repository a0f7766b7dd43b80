"""
座標領域模組

提供十進位經緯度、度分秒 (DMS) 與 UTM 座標之間的互相轉換服務，
以 WGS84 橢球體為模型。
"""

from geoconvert.domains.coordinates.models.coordinate_model import (
    CardinalDirection,
    DMSCoordinate,
    FormattedUTMCoordinate,
    GeoCoordinate,
    Hemisphere,
    UTMCoordinate,
)
from geoconvert.domains.coordinates.models.coordinate_errors import (
    CoordinateRangeError,
    LatitudeRangeError,
    LongitudeRangeError,
)
from geoconvert.domains.coordinates.models.ellipsoid_model import (
    WGS84,
    EllipsoidModel,
)
from geoconvert.domains.coordinates.services.utm_converter import to_utm, from_utm
from geoconvert.domains.coordinates.services.degree_format import (
    dms_to_decimal,
    decimal_to_dms,
    format_utm,
)
from geoconvert.domains.coordinates.interfaces.coordinate_service_interface import (
    CoordinateServiceInterface,
)
from geoconvert.domains.coordinates.services.coordinate_service import CoordinateService
