"""점수 계산 공용 수치 함수

전부 순수 함수, 외부 의존 없음.
"""

import math


def clamp_score(value: float) -> int:
    """0 ~ 100 클램프 후 정수."""
    return int(max(0, min(100, value)))


def round_half_up(value: float) -> int:
    """.5는 항상 올림 (Python round()의 은행가 반올림과 다름)."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int) -> float:
    """소수 digits 자리 반올림 (half-up)."""
    factor = 10**digits
    return round_half_up(value * factor) / factor
