"""Geodesic Distance.

구면 코사인 법칙으로 두 좌표 간 대원 거리를 계산합니다.
정렬/표시 용도이므로 매우 가까운 두 점에서의 정밀도 손실은 허용합니다.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6378.1


def distance_km(latitude1: float, longitude1: float, latitude2: float, longitude2: float) -> float:
    """두 GPS 좌표 간 대원 거리를 km 단위로 반환합니다.

    Args:
        latitude1: 첫 번째 점의 위도
        longitude1: 첫 번째 점의 경도
        latitude2: 두 번째 점의 위도
        longitude2: 두 번째 점의 경도

    Returns:
        대원 거리 (km)
    """
    lat1 = math.radians(latitude1)
    lat2 = math.radians(latitude2)
    lon1 = math.radians(longitude1)
    lon2 = math.radians(longitude2)

    cosine = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(
        abs(lon1 - lon2)
    )
    # 부동소수 오차로 [-1, 1]을 벗어나면 acos가 ValueError를 던짐
    clamped = min(1.0, max(-1.0, cosine))
    return EARTH_RADIUS_KM * math.acos(clamped)
