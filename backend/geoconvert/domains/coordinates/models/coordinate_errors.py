from typing import ClassVar

from geoconvert.domains.common.utils.result import Error


class CoordinateRangeError(ValueError):
    """DMS 度數超出範圍

    Attributes:
        value: 超出範圍的度數
        bound: 被違反的絕對值上限
    """

    code: ClassVar[str] = "COORDINATE_OUT_OF_RANGE"
    label: ClassVar[str] = "Coordinate"
    bound: ClassVar[float] = 180.0

    def __init__(self, value: float):
        self.value = value
        super().__init__(
            f"{self.label} out of range (-{self.bound:g} to {self.bound:g}): {value}"
        )

    def to_error(self) -> Error:
        return Error(
            code=self.code,
            message=str(self),
            details={"value": self.value, "bound": self.bound},
        )


class LatitudeRangeError(CoordinateRangeError):
    code = "LATITUDE_OUT_OF_RANGE"
    label = "Latitude"
    bound = 90.0


class LongitudeRangeError(CoordinateRangeError):
    code = "LONGITUDE_OUT_OF_RANGE"
    label = "Longitude"
    bound = 180.0
