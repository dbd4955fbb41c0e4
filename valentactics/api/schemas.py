"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from valentactics.core.strategy.models import (
    AgeGroup,
    BenefitType,
    Gender,
    GiftReaction,
    GiriAwareness,
    Personality,
    Preference,
    RecipientAction,
    RelationshipGoal,
    RelationshipType,
    ReturnTendency,
    TargetProfile,
)


# === Request Schemas ===


class TargetProfileRequest(BaseModel):
    """분석 대상 입력"""

    target_id: Optional[str] = Field(None, max_length=50, description="배치 내 식별자")
    name: str = Field(..., min_length=1, max_length=20, description="상대 이름")
    relationship: RelationshipType
    benefit_type: BenefitType
    relationship_goal: RelationshipGoal = RelationshipGoal.MAINTAIN
    emotional_priority: int = Field(3, ge=1, le=5, description="감정적 우선도")
    budget: int = Field(1000, ge=100, le=100000, description="예산 (엔)")

    gender: Gender = Gender.UNSPECIFIED
    age_group: AgeGroup = AgeGroup.TWENTIES

    personality: list[Personality] = Field(default_factory=list)
    preferences: list[Preference] = Field(default_factory=list)
    recent_interests: str = Field("", max_length=200)
    gift_reaction: GiftReaction = GiftReaction.UNKNOWN

    recipient_actions: list[RecipientAction] = Field(default_factory=list)
    recent_episodes: str = Field("", max_length=400)

    giri_awareness: GiriAwareness = GiriAwareness.UNKNOWN
    return_tendency: ReturnTendency = ReturnTendency.UNKNOWN
    gave_last_year: bool = False
    received_return: bool = False
    gave_year_before: bool = False
    received_return_year_before: bool = False
    return_value: Optional[int] = Field(None, ge=0, le=100000)

    memo: str = Field("", max_length=200)

    def to_profile(self) -> TargetProfile:
        """검증 완료 입력 → Core 프로필. 중복 태그는 첫 등장 순서로 제거."""
        return TargetProfile(
            name=self.name,
            relationship=self.relationship,
            benefit_type=self.benefit_type,
            relationship_goal=self.relationship_goal,
            emotional_priority=self.emotional_priority,
            budget=self.budget,
            gender=self.gender,
            age_group=self.age_group,
            personality=tuple(dict.fromkeys(self.personality)),
            preferences=tuple(dict.fromkeys(self.preferences)),
            recent_interests=self.recent_interests,
            gift_reaction=self.gift_reaction,
            recipient_actions=tuple(dict.fromkeys(self.recipient_actions)),
            recent_episodes=self.recent_episodes,
            giri_awareness=self.giri_awareness,
            return_tendency=self.return_tendency,
            gave_last_year=self.gave_last_year,
            received_return=self.received_return,
            gave_year_before=self.gave_year_before,
            received_return_year_before=self.received_return_year_before,
            return_value=self.return_value,
            memo=self.memo,
            target_id=self.target_id,
        )


class BatchAnalysisRequest(BaseModel):
    """배치 분석 요청"""

    total_budget: int = Field(..., ge=100, le=1000000, description="총 예산 (엔)")
    targets: list[TargetProfileRequest] = Field(..., min_length=1, max_length=20)

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "BatchAnalysisRequest":
        keys = [t.target_id or t.name for t in self.targets]
        if len(keys) != len(set(keys)):
            raise ValueError("targets must have unique target_id (or name)")
        return self


# === Response Schemas ===


class GiftInfo(BaseModel):
    """선물 제안"""

    item: str
    price: int
    reason: str
    story: str = ""


class RoiPredictionInfo(BaseModel):
    """회수 예측"""

    return_probability: float
    expected_multiplier: float


class TargetScoresInfo(BaseModel):
    intimacy: int
    roi: int
    gift_fit: int
    total: int


class BatchScoresInfo(BaseModel):
    roi: int
    relationship: int
    emotion: int
    total: int


class TargetAnalysisResponse(BaseModel):
    """단일 대상 분석 응답"""

    target_name: str
    scores: TargetScoresInfo
    rank: str
    rank_reason: str
    outcome: str
    gift: GiftInfo
    message: str
    roi_prediction: RoiPredictionInfo
    questions: list[str] = []
    risk_warnings: list[str] = []
    source: str


class AnalyzedTargetInfo(BaseModel):
    """배치 결과의 대상 1명분"""

    target_id: str
    name: str
    relationship: str
    emotional_priority: int
    scores: BatchScoresInfo
    rank: str
    rank_reason: str
    outcome: str
    allocated_budget: int
    gift: GiftInfo
    message: str
    roi_prediction: RoiPredictionInfo


class TimelineEntryInfo(BaseModel):
    date: str
    action: str


class BatchAnalysisResponse(BaseModel):
    """배치 분석 응답"""

    targets: list[AnalyzedTargetInfo]
    timeline: list[TimelineEntryInfo] = []
    warnings: list[str] = []
    total_budget: int
