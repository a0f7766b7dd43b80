import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from geoconvert.core.config import DEFAULT_UTM_PRECISION
from geoconvert.domains.common.utils.result import Result
from geoconvert.domains.coordinates.models.coordinate_errors import (
    CoordinateRangeError,
)
from geoconvert.domains.coordinates.models.coordinate_model import (
    DMSCoordinate,
    FormattedUTMCoordinate,
    GeoCoordinate,
    GeoToUTMRequest,
    UTMCoordinate,
    UTMToGeoRequest,
)
from geoconvert.domains.coordinates.services.coordinate_service import (
    CoordinateService,
)

logger = logging.getLogger(__name__)
router = APIRouter()

# 創建座標服務的單例
coordinate_service = CoordinateService()


@router.post("/geo-to-utm", response_model=UTMCoordinate)
async def convert_geo_to_utm(request: GeoToUTMRequest) -> UTMCoordinate:
    """將地理座標轉換為 UTM 座標"""
    geo = GeoCoordinate(latitude=request.latitude, longitude=request.longitude)
    try:
        result = await coordinate_service.geo_to_utm(geo, request.zone)
        logger.info(f"Converted geo coords {geo} to UTM {result}")
        return result
    except Exception as e:
        logger.error(f"Error converting geo to UTM: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )


@router.post("/geo-to-utm/batch", response_model=List[UTMCoordinate])
async def convert_geo_to_utm_batch(points: List[GeoCoordinate]) -> List[UTMCoordinate]:
    """批次將地理座標轉換為 UTM 座標"""
    try:
        result = await coordinate_service.geo_to_utm_batch(points)
        logger.info(f"Converted {len(result)} geo coords to UTM")
        return result
    except Exception as e:
        logger.error(f"Error converting geo batch to UTM: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )


@router.post("/geo-to-utm/formatted", response_model=FormattedUTMCoordinate)
async def convert_geo_to_formatted_utm(
    request: GeoToUTMRequest,
    precision: Optional[int] = Query(None, ge=0, le=20, description="東距、北距小數位數"),
) -> FormattedUTMCoordinate:
    """將地理座標轉換為以固定小數位字串表示的 UTM 座標"""
    if precision is None:
        precision = DEFAULT_UTM_PRECISION
    geo = GeoCoordinate(latitude=request.latitude, longitude=request.longitude)
    try:
        result = await coordinate_service.format_utm(geo, precision, request.zone)
        logger.info(f"Formatted geo coords {geo} as UTM {result}")
        return result
    except Exception as e:
        logger.error(f"Error formatting geo as UTM: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )


@router.post("/utm-to-geo", response_model=GeoCoordinate)
async def convert_utm_to_geo(request: UTMToGeoRequest) -> GeoCoordinate:
    """將 UTM 座標轉換為地理座標"""
    try:
        result = await coordinate_service.utm_to_geo(
            request.easting, request.northing, request.zone, request.hemisphere
        )
        logger.info(f"Converted UTM coords {request} to geo {result}")
        return result
    except Exception as e:
        logger.error(f"Error converting UTM to geo: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )


@router.post("/dms-to-decimal", response_model=Dict[str, float])
async def convert_dms_to_decimal(dms: DMSCoordinate) -> Dict[str, float]:
    """將度分秒轉換為十進位度數"""
    try:
        decimal = await coordinate_service.dms_to_decimal(dms)
    except CoordinateRangeError as e:
        logger.info(f"Rejected DMS coordinate {dms}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.to_error().model_dump(),
        )
    except Exception as e:
        logger.error(f"Error converting DMS to decimal: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )
    logger.info(f"Converted DMS {dms} to decimal {decimal}")
    return {"decimal": decimal}


@router.post("/dms-to-decimal/batch", response_model=List[Result[float]])
async def convert_dms_to_decimal_batch(
    items: List[DMSCoordinate],
) -> List[Result[float]]:
    """批次將度分秒轉換為十進位度數，超出範圍的項目以失敗結果回傳"""
    try:
        results = await coordinate_service.dms_to_decimal_batch(items)
        logger.info(f"Converted {len(results)} DMS coordinates to decimal")
        return results
    except Exception as e:
        logger.error(f"Error converting DMS batch to decimal: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )


@router.get("/decimal-to-dms", response_model=Dict[str, str])
async def convert_decimal_to_dms(
    value: float = Query(..., description="十進位度數"),
    precision: Optional[int] = Query(None, ge=0, le=20, description="秒的小數位數"),
) -> Dict[str, str]:
    """將十進位度數格式化為度分秒字串"""
    try:
        dms = await coordinate_service.decimal_to_dms(value, precision)
        logger.info(f"Converted decimal {value} to DMS {dms}")
        return {"dms": dms}
    except Exception as e:
        logger.error(f"Error converting decimal to DMS: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Coordinate conversion error: {str(e)}",
        )
