# backend/geoconvert/api/v1/router.py
from fastapi import APIRouter

from geoconvert.domains.coordinates.api.coordinate_api import router as coordinates_router

api_router = APIRouter()

# 座標轉換領域路由
api_router.include_router(
    coordinates_router, prefix="/coordinates", tags=["Coordinates"]
)
