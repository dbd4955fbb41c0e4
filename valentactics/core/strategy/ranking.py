"""랭크 판정 + 보정 규칙 + 랭크 사유"""

from typing import List

from valentactics.core.strategy.models import (
    RANK_LABELS,
    RELATIONSHIP_LABELS,
    ROMANTIC_RELATIONSHIPS,
    ActionWeightedScores,
    BatchPriorScores,
    BenefitType,
    GiriAwareness,
    Rank,
    RelationshipGoal,
    RelationshipType,
    ReturnTendency,
    TargetProfile,
)

RANK_THRESHOLDS: List[tuple[int, Rank]] = [
    (80, Rank.S),
    (60, Rank.A),
    (40, Rank.B),
]

_ONE_TIER_DOWN = {Rank.S: Rank.A, Rank.A: Rank.B, Rank.B: Rank.C, Rank.C: Rank.C}
_ONE_TIER_UP = {Rank.S: Rank.S, Rank.A: Rank.S, Rank.B: Rank.A, Rank.C: Rank.B}


def rank_for_total(total: int) -> Rank:
    """총점 → 랭크 (양 모드 공통)."""
    for threshold, rank in RANK_THRESHOLDS:
        if total >= threshold:
            return rank
    return Rank.C


def promote_one_tier(rank: Rank) -> Rank:
    return _ONE_TIER_UP[rank]


def demote_one_tier(rank: Rank) -> Rank:
    return _ONE_TIER_DOWN[rank]


def apply_rank_adjustments(
    rank: Rank,
    emotional_priority: int,
    goal: RelationshipGoal,
    giri_awareness: GiriAwareness,
    relationship: RelationshipType,
) -> Rank:
    """단일 대상 모드 랭크 보정. 순서대로 적용하며 뒤 규칙은 앞 결과를 본다.

    1. 감정적 중요도 하한: ep>=5 → B/C를 A로, ep>=4 → C를 B로
    2. 거리 두기 + ep<=2 → S/A를 B로 상한
    3. 본명 오해 위험 + 연애 대상 아님 → 1단계 하향
    """
    adjusted = rank

    if emotional_priority >= 5 and adjusted in (Rank.B, Rank.C):
        adjusted = Rank.A
    elif emotional_priority >= 4 and adjusted == Rank.C:
        adjusted = Rank.B

    if goal == RelationshipGoal.DISTANCE and emotional_priority <= 2:
        if adjusted in (Rank.S, Rank.A):
            adjusted = Rank.B

    if (
        giri_awareness == GiriAwareness.MAY_SEEM_ROMANTIC
        and relationship not in ROMANTIC_RELATIONSHIPS
    ):
        adjusted = demote_one_tier(adjusted)

    return adjusted


def build_rank_reason(
    rank: Rank, scores: ActionWeightedScores, profile: TargetProfile
) -> str:
    """단일 대상 랭크 사유. 최대 3개 구절."""
    parts: List[str] = []

    if profile.benefit_type == BenefitType.TANGIBLE:
        if scores.roi >= 70:
            parts.append("ROI実績が高い")
        elif scores.roi <= 30:
            parts.append("ROI実績が低い")
        if scores.intimacy >= 70:
            parts.append("相手からの好意的行動が多い")
    else:
        if scores.gift_fit >= 70:
            parts.append("ギフト戦略の効果が高い見込み")
        elif scores.gift_fit <= 30:
            parts.append("ギフト最適化の手がかりが不足")
        if scores.intimacy >= 70:
            parts.append("深い関係性を活かせる")

    action_count = len(profile.recipient_actions)
    if action_count >= 4:
        parts.append("相手の好意的行動が多い")
    elif action_count == 0:
        parts.append("相手の行動データが不足")
    if profile.return_tendency == ReturnTendency.RELIABLE:
        parts.append("お返し期待度が高い")
    if profile.emotional_priority >= 4:
        parts.append("感情的に重要な人物")
    if profile.relationship_goal == RelationshipGoal.DISTANCE:
        parts.append("距離を置きたい意向")
    if not parts:
        parts.append("バランス型")

    return f"{RANK_LABELS[rank]}: {'、'.join(parts[:3])}"


def build_batch_rank_reason(
    rank: Rank, scores: BatchPriorScores, profile: TargetProfile
) -> str:
    """배치 랭크 사유."""
    reasons: List[str] = []

    if scores.roi >= 80:
        reasons.append("高いROI実績")
    elif scores.roi <= 30:
        reasons.append("ROI実績が低い")

    if scores.relationship >= 80:
        label = RELATIONSHIP_LABELS[profile.relationship]
        reasons.append(f"{label}との関係を深めたい意向")
    elif scores.relationship <= 30:
        reasons.append("関係性の戦略的重要度が低い")

    if profile.emotional_priority >= 4:
        reasons.append("感情的に重要な相手")
    elif profile.emotional_priority <= 2:
        reasons.append("義理寄りの位置づけ")
    if not reasons:
        reasons.append("バランス型")

    return f"{RANK_LABELS[rank]}: {'、'.join(reasons)}"
