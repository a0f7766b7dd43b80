"""
子午線弧長

橢球面上赤道到指定緯度的子午線距離，以及其反算 (footpoint latitude)。

Reference: Hoffmann-Wellenhof, B., Lichtenegger, H., and Collins, J.,
GPS: Theory and Practice, 3rd ed. New York: Springer-Verlag Wien, 1994.
"""

import math
from typing import Tuple

from geoconvert.domains.coordinates.models.ellipsoid_model import WGS84

A = WGS84.semi_major_axis
B = WGS84.semi_minor_axis


def _series_base() -> Tuple[float, float]:
    """計算 n 與 alpha，正算與反算共用 (Eq. 10.17, 10.18)"""
    n = (A - B) / (A + B)
    alpha = ((A + B) / 2.0) * (1.0 + (n**2 / 4.0) + (n**4 / 64.0))
    return n, alpha


def arc_length(phi: float) -> float:
    """計算赤道到緯度 phi 的橢球面距離

    Args:
        phi: 緯度，單位:弧度

    Returns:
        子午線弧長，單位:米
    """
    n, alpha = _series_base()

    beta = (-3.0 * n / 2.0) + (9.0 * n**3 / 16.0) + (-3.0 * n**5 / 32.0)
    gamma = (15.0 * n**2 / 16.0) + (-15.0 * n**4 / 32.0)
    delta = (-35.0 * n**3 / 48.0) + (105.0 * n**5 / 256.0)
    epsilon = 315.0 * n**4 / 512.0

    return alpha * (
        phi
        + (beta * math.sin(2.0 * phi))
        + (gamma * math.sin(4.0 * phi))
        + (delta * math.sin(6.0 * phi))
        + (epsilon * math.sin(8.0 * phi))
    )


def footpoint_latitude(y: float) -> float:
    """計算北距 y 對應的 footpoint latitude

    此為級數近似，並非 arc_length 的精確反函數。

    Args:
        y: 橫麥卡托北距，單位:米

    Returns:
        footpoint latitude，單位:弧度
    """
    n, alpha = _series_base()

    # Eq. 10.23
    y_ = y / alpha

    # Eq. 10.22
    beta_ = (3.0 * n / 2.0) + (-27.0 * n**3 / 32.0) + (269.0 * n**5 / 512.0)
    gamma_ = (21.0 * n**2 / 16.0) + (-55.0 * n**4 / 32.0)
    delta_ = (151.0 * n**3 / 96.0) + (-417.0 * n**5 / 128.0)
    epsilon_ = 1097.0 * n**4 / 512.0

    # Eq. 10.21
    return (
        y_
        + (beta_ * math.sin(2.0 * y_))
        + (gamma_ * math.sin(4.0 * y_))
        + (delta_ * math.sin(6.0 * y_))
        + (epsilon_ * math.sin(8.0 * y_))
    )
