from pydantic import Field

from geoconvert.domains.common.models.base_model import ValueObject


class EllipsoidModel(ValueObject):
    """橢球體模型，以長半軸與短半軸定義地球形狀"""

    semi_major_axis: float = Field(..., description="長半軸 a，單位:米")
    semi_minor_axis: float = Field(..., description="短半軸 b，單位:米")


# WGS-84 橢球體 (唯一支援的模型)
WGS84 = EllipsoidModel(semi_major_axis=6378137.0, semi_minor_axis=6356752.314)

# UTM 投影參數
UTM_SCALE_FACTOR = 0.9996  # 中央經線比例因子 k0
UTM_FALSE_EASTING = 500000.0  # 東距偏移 (米)
UTM_FALSE_NORTHING_SOUTH = 10000000.0  # 南半球北距偏移 (米)

# 度與弧度換算使用的圓周率，與參考輸出保持一致
PI = 3.14159265358979
