"""점수 산출 전략 2종

ActionWeightedStrategy: 단일 대상 모드. 친밀도 / ROI / 선물 적합도 3축 + 랭크 보정.
BatchPriorStrategy:     배치 모드. ROI / 관계성 / 감정 3축, 보정 없음.

두 방식은 서로 다른 설계이며 공식을 섞지 않는다.
ROI(및 배치의 관계성)는 의도적으로 균등 난수 구간에서 뽑는다 (현실의 불확실성 모델링).
난수원은 주입한다: random.Random 또는 randint(lo, hi)를 가진 객체.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Dict, Union

from valentactics.core.strategy.calculations import clamp_score, round_half_up
from valentactics.core.strategy.models import (
    ActionWeightedScores,
    BatchPriorScores,
    BenefitType,
    Rank,
    RecipientAction,
    RelationshipGoal,
    RelationshipType,
    ReturnTendency,
    TargetProfile,
)
from valentactics.core.strategy.ranking import apply_rank_adjustments, rank_for_total

logger = logging.getLogger(__name__)

Scores = Union[ActionWeightedScores, BatchPriorScores]

# === 단일 대상 모드 상수 ===

ACTION_WEIGHTS: Dict[RecipientAction, int] = {
    RecipientAction.CONTACTS_FIRST: 7,
    RecipientAction.SHARES_PRIVATE_TOPICS: 8,
    RecipientAction.INVITED_TO_MEAL: 10,
    RecipientAction.ASKS_FOR_ADVICE: 10,
    RecipientAction.REMEMBERS_OCCASIONS: 9,
    RecipientAction.MAKES_ONE_ON_ONE_TIME: 12,
    RecipientAction.NOTICES_CHANGES: 8,
    RecipientAction.REMEMBERS_CONVERSATIONS: 7,
    RecipientAction.SHOWS_VULNERABILITY: 10,
}

ACTION_DAMPING = 0.7  # 전체 행동 81pt → 약 57pt (천장 효과 완화)

RETURN_TENDENCY_MODIFIERS: Dict[ReturnTendency, int] = {
    ReturnTendency.RELIABLE: 18,
    ReturnTendency.MOOD_DEPENDENT: 0,
    ReturnTendency.NEVER_RETURNS: -20,
    ReturnTendency.UNKNOWN: 0,
}

MIN_ROI_BUDGET = 500

# === 배치 모드 상수 ===

BATCH_INVEST_AMOUNT = 1000

EMOTION_SCORES: Dict[int, int] = {1: 20, 2: 40, 3: 60, 4: 80, 5: 100}


class ScoringStrategy(ABC):
    """점수 산출 전략 인터페이스"""

    @property
    @abstractmethod
    def name(self) -> str:
        """전략 이름."""
        ...

    @abstractmethod
    def score(self, profile: TargetProfile, rng: random.Random) -> Scores:
        """프로필 → 점수. 모든 값 0~100 정수."""
        ...

    @abstractmethod
    def rank(self, profile: TargetProfile, scores: Scores) -> Rank:
        """점수 → 최종 랭크."""
        ...


class ActionWeightedStrategy(ScoringStrategy):
    """상대 행동 가중 3축 점수 + 랭크 보정 규칙"""

    @property
    def name(self) -> str:
        return "action_weighted"

    def score(self, profile: TargetProfile, rng: random.Random) -> ActionWeightedScores:
        intimacy = calc_intimacy(profile)
        roi = calc_roi(profile, rng)
        gift_fit = calc_gift_fit(profile)
        total = calc_weighted_total(intimacy, roi, gift_fit, profile.benefit_type)
        return ActionWeightedScores(
            intimacy=intimacy, roi=roi, gift_fit=gift_fit, total=total
        )

    def rank(self, profile: TargetProfile, scores: Scores) -> Rank:
        raw = rank_for_total(scores.total)
        adjusted = apply_rank_adjustments(
            raw,
            profile.emotional_priority,
            profile.relationship_goal,
            profile.giri_awareness,
            profile.relationship,
        )
        if adjusted != raw:
            logger.debug(
                "Rank adjusted for %s: %s -> %s", profile.name, raw.value, adjusted.value
            )
        return adjusted


class BatchPriorStrategy(ScoringStrategy):
    """관계 유형 사전값 기반 3축 점수. 랭크 보정 없음."""

    @property
    def name(self) -> str:
        return "batch_prior"

    def score(self, profile: TargetProfile, rng: random.Random) -> BatchPriorScores:
        roi = calc_batch_roi(profile, rng)
        relationship = calc_relationship_score(profile, rng)
        emotion = calc_emotion_score(profile.emotional_priority)
        total = calc_batch_total(roi, relationship, emotion, profile.emotional_priority)
        return BatchPriorScores(
            roi=roi, relationship=relationship, emotion=emotion, total=total
        )

    def rank(self, profile: TargetProfile, scores: Scores) -> Rank:
        return rank_for_total(scores.total)


# ── 단일 대상 모드 ──


def calc_intimacy(profile: TargetProfile) -> int:
    """친밀도: 상대 행동(객관적 사실)만으로 측정.

    관계 라벨, 목표, 중요도, 성격, 취향은 영향 없음.
    """
    score = 5

    action_sum = sum(ACTION_WEIGHTS[action] for action in profile.recipient_actions)
    score += round_half_up(action_sum * ACTION_DAMPING)

    # 에피소드는 내용 평가 없이 길이만 본다
    if len(profile.recent_episodes) > 10:
        score += 5

    if profile.gave_last_year and profile.received_return:
        score += 3
    if profile.gave_year_before and profile.received_return_year_before:
        score += 2

    return clamp_score(score)


def calc_roi(profile: TargetProfile, rng: random.Random) -> int:
    """ROI: 과거 교환 이력 구간별 난수 + 답례 성향 보정."""
    return_value = profile.return_value or 0

    if profile.gave_last_year and profile.received_return:
        if return_value <= 0:
            base = rng.randint(50, 60)
        else:
            multiplier = return_value / max(profile.budget, MIN_ROI_BUDGET)
            if multiplier >= 3:
                base = rng.randint(90, 100)
            elif multiplier >= 2:
                base = rng.randint(80, 90)
            elif multiplier >= 1:
                base = rng.randint(65, 80)
            else:
                base = rng.randint(50, 65)
    elif profile.gave_last_year:
        if profile.gave_year_before and not profile.received_return_year_before:
            base = rng.randint(0, 15)
        else:
            base = rng.randint(15, 30)
    elif profile.gave_year_before and profile.received_return_year_before:
        base = rng.randint(40, 55)
    else:
        base = rng.randint(25, 45)

    base += RETURN_TENDENCY_MODIFIERS[profile.return_tendency]
    return clamp_score(base)


def calc_gift_fit(profile: TargetProfile) -> int:
    """선물 적합도: 객관적 신호만으로 간이 추정.

    성격 / 취향 / 관심사 / 선물 반응은 점수에 영향 없음 (선물 제안 전용).
    """
    score = 15

    action_count = len(profile.recipient_actions)
    if action_count >= 6:
        score += 35
    elif action_count >= 4:
        score += 25
    elif action_count >= 2:
        score += 15
    elif action_count >= 1:
        score += 8

    episode_length = len(profile.recent_episodes)
    if episode_length > 30:
        score += 20
    elif episode_length > 10:
        score += 12

    if profile.gave_last_year and profile.received_return:
        score += 15
    elif profile.gave_last_year:
        score += 5
    if profile.gave_year_before and profile.received_return_year_before:
        score += 8

    return clamp_score(score)


def calc_weighted_total(
    intimacy: int, roi: int, gift_fit: int, benefit_type: BenefitType
) -> int:
    """유형 / 무형에 따라 가중치 분기."""
    if benefit_type == BenefitType.TANGIBLE:
        total = intimacy * 0.25 + roi * 0.55 + gift_fit * 0.20
    else:
        total = intimacy * 0.30 + roi * 0.15 + gift_fit * 0.55
    return clamp_score(round_half_up(total))


# ── 배치 모드 ──


def calc_batch_roi(profile: TargetProfile, rng: random.Random) -> int:
    """배치 ROI: 답례 금액 / 1000 배율 기준."""
    return_value = profile.return_value or 0
    multiplier = return_value / BATCH_INVEST_AMOUNT if return_value > 0 else 0

    if profile.gave_last_year and profile.received_return:
        if multiplier >= 2:
            return rng.randint(90, 100)
        if multiplier >= 1:
            return rng.randint(70, 89)
        return rng.randint(50, 69)

    if not profile.gave_last_year:
        return 50

    # 작년에 줬지만 답례 없음
    if profile.gave_year_before and not profile.received_return_year_before:
        return rng.randint(0, 29)
    return rng.randint(30, 49)


def calc_relationship_score(profile: TargetProfile, rng: random.Random) -> int:
    """관계성: 관계 목표 × 관계 유형."""
    goal = profile.relationship_goal
    relationship = profile.relationship

    if goal == RelationshipGoal.DISTANCE:
        return rng.randint(0, 29)

    if goal == RelationshipGoal.DEEPEN:
        if relationship in (RelationshipType.ROMANTIC_INTEREST, RelationshipType.PARTNER):
            return rng.randint(90, 100)
        if relationship == RelationshipType.BOSS:
            return rng.randint(80, 95)
        return rng.randint(70, 89)

    if goal == RelationshipGoal.MAINTAIN:
        if relationship in (RelationshipType.BOSS, RelationshipType.COLLEAGUE):
            return rng.randint(60, 79)
        return rng.randint(50, 69)

    # 礼儀として
    return rng.randint(30, 59)


def calc_emotion_score(emotional_priority: int) -> int:
    return EMOTION_SCORES[emotional_priority]


def calc_batch_total(roi: int, relationship: int, emotion: int, emotional_priority: int) -> int:
    """감정적 중요도 구간별 가중 평균."""
    if emotional_priority <= 2:
        total = roi * 0.5 + relationship * 0.3 + emotion * 0.2
    elif emotional_priority == 3:
        total = roi * 0.3 + relationship * 0.4 + emotion * 0.3
    else:
        total = roi * 0.1 + relationship * 0.3 + emotion * 0.6
    return clamp_score(round_half_up(total))
