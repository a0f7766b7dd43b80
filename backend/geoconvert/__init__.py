"""
geoconvert

WGS84 座標轉換服務：十進位經緯度、度分秒 (DMS) 與 UTM 之間的互相轉換。
"""

__version__ = "0.1.0"
