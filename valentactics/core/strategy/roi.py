"""답례 확률 / 기대 배율 예측

ROI 점수가 난수 구간을 포함하므로 결과도 시드 없이는 재현되지 않는다.
"""

from valentactics.core.strategy.calculations import round_to
from valentactics.core.strategy.models import RoiPrediction, TargetProfile

DEFAULT_RETURN_VALUE = 1000


def predict_roi(
    profile: TargetProfile,
    roi: int,
    closeness: int,
    closeness_rate: float,
) -> RoiPrediction:
    """답례를 받은 적이 있으면 ROI 기반 높은 확률, 없으면 낮은 확률.

    closeness: 단일 대상 모드는 친밀도, 배치 모드는 관계성 점수.
    closeness_rate: 기대 배율 기울기 (단일 0.008, 배치 0.01).
    """
    if profile.received_return:
        probability = min(0.95, 0.5 + roi * 0.004)
        return_value = (
            profile.return_value if profile.return_value is not None else DEFAULT_RETURN_VALUE
        )
        multiplier = 1.0 + return_value / 2000
    else:
        probability = max(0.05, roi * 0.005)
        multiplier = 0.3 + closeness * closeness_rate

    return RoiPrediction(
        return_probability=round_to(probability, 2),
        expected_multiplier=round_to(multiplier, 1),
    )
