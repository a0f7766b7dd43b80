"""
橫麥卡托投影

相對任意中央經線，在經緯度 (弧度) 與橫麥卡托平面座標 (米) 之間轉換。
注意橫麥卡托不等於 UTM，UTM 另需比例因子與偏移，見 utm_converter。

Reference: Hoffmann-Wellenhof, B., Lichtenegger, H., and Collins, J.,
GPS: Theory and Practice, 3rd ed. New York: Springer-Verlag Wien, 1994.
"""

import math

from geoconvert.domains.coordinates.models.coordinate_model import (
    PlanePoint,
    RadianPoint,
)
from geoconvert.domains.coordinates.models.ellipsoid_model import WGS84
from geoconvert.domains.coordinates.services.meridian_arc import (
    arc_length,
    footpoint_latitude,
)

A = WGS84.semi_major_axis
B = WGS84.semi_minor_axis

# 第二偏心率平方
EP2 = (A**2 - B**2) / B**2


def project(phi: float, lam: float, lam0: float) -> PlanePoint:
    """將經緯度轉換為橫麥卡托平面座標

    Args:
        phi: 緯度，單位:弧度
        lam: 經度，單位:弧度
        lam0: 中央經線經度，單位:弧度

    Returns:
        平面座標 (x, y)，單位:米
    """
    cos_phi = math.cos(phi)
    nu2 = EP2 * cos_phi**2
    N = A**2 / (B * math.sqrt(1 + nu2))
    t = math.tan(phi)
    t2 = t * t
    l = lam - lam0

    # l**1 與 l**2 的係數為 1.0
    l3coef = 1.0 - t2 + nu2
    l4coef = 5.0 - t2 + 9 * nu2 + 4.0 * (nu2 * nu2)
    l5coef = 5.0 - 18.0 * t2 + (t2 * t2) + 14.0 * nu2 - 58.0 * t2 * nu2
    l6coef = 61.0 - 58.0 * t2 + (t2 * t2) + 270.0 * nu2 - 330.0 * t2 * nu2
    l7coef = 61.0 - 479.0 * t2 + 179.0 * (t2 * t2) - (t2 * t2 * t2)
    l8coef = 1385.0 - 3111.0 * t2 + 543.0 * (t2 * t2) - (t2 * t2 * t2)

    # 東距
    x = (
        N * cos_phi * l
        + (N / 6.0 * cos_phi**3 * l3coef * l**3)
        + (N / 120.0 * cos_phi**5 * l5coef * l**5)
        + (N / 5040.0 * cos_phi**7 * l7coef * l**7)
    )

    # 北距
    y = (
        arc_length(phi)
        + (t / 2.0 * N * cos_phi**2 * l**2)
        + (t / 24.0 * N * cos_phi**4 * l4coef * l**4)
        + (t / 720.0 * N * cos_phi**6 * l6coef * l**6)
        + (t / 40320.0 * N * cos_phi**8 * l8coef * l**8)
    )

    return PlanePoint(x=x, y=y)


def unproject(x: float, y: float, lam0: float) -> RadianPoint:
    """將橫麥卡托平面座標轉換為經緯度

    Nf、nuf2、tf、tf2 與 project 中的 N、nu2、t、t2 意義相同，
    但以 footpoint latitude phif 計算。

    Args:
        x: 東距，單位:米
        y: 北距，單位:米
        lam0: 中央經線經度，單位:弧度

    Returns:
        經緯度，單位:弧度
    """
    phif = footpoint_latitude(y)

    cf = math.cos(phif)
    nuf2 = EP2 * cf**2
    Nf = A**2 / (B * math.sqrt(1 + nuf2))
    Nfpow = Nf

    tf = math.tan(phif)
    tf2 = tf * tf
    tf4 = tf2 * tf2

    # x**n 的分數係數，Nfpow 逐次乘上 Nf
    x1frac = 1.0 / (Nfpow * cf)

    Nfpow *= Nf  # Nf**2
    x2frac = tf / (2.0 * Nfpow)

    Nfpow *= Nf  # Nf**3
    x3frac = 1.0 / (6.0 * Nfpow * cf)

    Nfpow *= Nf  # Nf**4
    x4frac = tf / (24.0 * Nfpow)

    Nfpow *= Nf  # Nf**5
    x5frac = 1.0 / (120.0 * Nfpow * cf)

    Nfpow *= Nf  # Nf**6
    x6frac = tf / (720.0 * Nfpow)

    Nfpow *= Nf  # Nf**7
    x7frac = 1.0 / (5040.0 * Nfpow * cf)

    Nfpow *= Nf  # Nf**8
    x8frac = tf / (40320.0 * Nfpow)

    # x**n 的多項式係數，x**1 沒有多項式係數
    x2poly = -1.0 - nuf2
    x3poly = -1.0 - 2 * tf2 - nuf2
    x4poly = (
        5.0
        + 3.0 * tf2
        + 6.0 * nuf2
        - 6.0 * tf2 * nuf2
        - 3.0 * (nuf2 * nuf2)
        - 9.0 * tf2 * (nuf2 * nuf2)
    )
    x5poly = 5.0 + 28.0 * tf2 + 24.0 * tf4 + 6.0 * nuf2 + 8.0 * tf2 * nuf2
    x6poly = -61.0 - 90.0 * tf2 - 45.0 * tf4 - 107.0 * nuf2 + 162.0 * tf2 * nuf2
    x7poly = -61.0 - 662.0 * tf2 - 1320.0 * tf4 - 720.0 * (tf4 * tf2)
    x8poly = 1385.0 + 3633.0 * tf2 + 4095.0 * tf4 + 1575 * (tf4 * tf2)

    latitude = (
        phif
        + x2frac * x2poly * (x * x)
        + x4frac * x4poly * x**4
        + x6frac * x6poly * x**6
        + x8frac * x8poly * x**8
    )

    longitude = (
        lam0
        + x1frac * x
        + x3frac * x3poly * x**3
        + x5frac * x5poly * x**5
        + x7frac * x7poly * x**7
    )

    return RadianPoint(latitude=latitude, longitude=longitude)
