"""선물 전략 도메인 모델

입력 프로필, 점수, 랭크, 결과 레코드.
DB 무관 순수 데이터 클래스.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from valentactics.core.gift.models import GiftSuggestion


class RelationshipType(str, Enum):
    """상대와의 관계 6종"""

    BOSS = "boss"
    COLLEAGUE = "colleague"
    FRIEND = "friend"
    ROMANTIC_INTEREST = "romantic_interest"
    PARTNER = "partner"
    OTHER = "other"


RELATIONSHIP_LABELS: Dict[RelationshipType, str] = {
    RelationshipType.BOSS: "上司",
    RelationshipType.COLLEAGUE: "同僚",
    RelationshipType.FRIEND: "友人",
    RelationshipType.ROMANTIC_INTEREST: "気になる人",
    RelationshipType.PARTNER: "パートナー",
    RelationshipType.OTHER: "その他",
}

ROMANTIC_RELATIONSHIPS = frozenset(
    {RelationshipType.ROMANTIC_INTEREST, RelationshipType.PARTNER}
)


class BenefitType(str, Enum):
    """유형(ROI) / 무형(호감) 목표"""

    TANGIBLE = "tangible"
    INTANGIBLE = "intangible"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNSPECIFIED = "unspecified"


class AgeGroup(str, Enum):
    TEENS = "10s"
    TWENTIES = "20s"
    THIRTIES = "30s"
    FORTIES = "40s"
    FIFTIES_PLUS = "50s_plus"


class Personality(str, Enum):
    METICULOUS = "meticulous"
    EASYGOING = "easygoing"
    PARTICULAR = "particular"
    SOCIABLE = "sociable"
    SHY = "shy"
    RATIONAL = "rational"
    EMOTIONAL = "emotional"
    FREE_SPIRITED = "free_spirited"


class Preference(str, Enum):
    """취향 태그 19종. 점수에는 영향 없음 (선물 선택 전용)."""

    # 味覚・食
    SWEET_TOOTH = "sweet_tooth"
    SAVORY = "savory"
    ALCOHOL = "alcohol"
    COFFEE = "coffee"
    TEA = "tea"
    WAGASHI = "wagashi"
    GOURMET = "gourmet"
    # ライフスタイル
    HEALTH_CONSCIOUS = "health_conscious"
    OUTDOOR = "outdoor"
    INDOOR = "indoor"
    FASHION = "fashion"
    READER = "reader"
    GADGETS = "gadgets"
    # 価値観
    BRAND_CONSCIOUS = "brand_conscious"
    VALUE_FOR_MONEY = "value_for_money"
    APPRECIATES_HANDMADE = "appreciates_handmade"
    PRACTICAL = "practical"
    SURPRISE_LOVER = "surprise_lover"
    CLASSIC = "classic"


class GiftReaction(str, Enum):
    OPENLY_DELIGHTED = "openly_delighted"
    RECEIVES_MODESTLY = "receives_modestly"
    FEELS_EMBARRASSED = "feels_embarrassed"
    UNKNOWN = "unknown"


class RecipientAction(str, Enum):
    """상대가 나에게 보인 객관적 행동"""

    CONTACTS_FIRST = "contacts_first"
    SHARES_PRIVATE_TOPICS = "shares_private_topics"
    INVITED_TO_MEAL = "invited_to_meal"
    ASKS_FOR_ADVICE = "asks_for_advice"
    REMEMBERS_OCCASIONS = "remembers_occasions"
    MAKES_ONE_ON_ONE_TIME = "makes_one_on_one_time"
    NOTICES_CHANGES = "notices_changes"
    REMEMBERS_CONVERSATIONS = "remembers_conversations"
    SHOWS_VULNERABILITY = "shows_vulnerability"


class RelationshipGoal(str, Enum):
    MAINTAIN = "maintain"
    DEEPEN = "deepen"
    COURTESY = "courtesy"
    DISTANCE = "distance"


class GiriAwareness(str, Enum):
    """의리 선물 인식. MAY_SEEM_ROMANTIC = 본명으로 오해받을 가능성."""

    SEEN_AS_OBLIGATION = "seen_as_obligation"
    MAY_SEEM_ROMANTIC = "may_seem_romantic"
    UNKNOWN = "unknown"


class ReturnTendency(str, Enum):
    RELIABLE = "reliable"
    MOOD_DEPENDENT = "mood_dependent"
    NEVER_RETURNS = "never_returns"
    UNKNOWN = "unknown"


class Rank(str, Enum):
    """우선순위 등급. S > A > B > C"""

    S = "S"
    A = "A"
    B = "B"
    C = "C"

    @property
    def order(self) -> int:
        """S=3 ... C=0. 큰 값이 상위."""
        return _RANK_ORDER[self]


_RANK_ORDER: Dict[Rank, int] = {Rank.S: 3, Rank.A: 2, Rank.B: 1, Rank.C: 0}

RANK_LABELS: Dict[Rank, str] = {
    Rank.S: "最優先対象",
    Rank.A: "重要対象",
    Rank.B: "標準対応",
    Rank.C: "最小限/見送り検討",
}


class OutcomeType(str, Enum):
    """단일 대상 분석의 성공 타입"""

    FULL_SUCCESS = "full_success"
    INVESTMENT = "investment"
    EMOTIONAL = "emotional"
    RELATIONSHIP_BUILDING = "relationship_building"
    CUT_LOSS = "cut_loss"
    NEEDS_REVIEW = "needs_review"


class BatchOutcomeType(str, Enum):
    """배치 분석의 성공 타입 (단일 대상 표와 별개)"""

    FULL_SUCCESS = "full_success"
    EMOTIONAL_SUCCESS = "emotional_success"
    INVESTMENT_SUCCESS = "investment_success"
    RELATIONSHIP_BUILDING_SUCCESS = "relationship_building_success"
    NEEDS_REVISION = "needs_revision"
    CUT_LOSS = "cut_loss"


@dataclass(frozen=True)
class TargetProfile:
    """검증 완료된 입력 프로필. 불변."""

    name: str
    relationship: RelationshipType
    benefit_type: BenefitType
    relationship_goal: RelationshipGoal
    emotional_priority: int  # 1 ~ 5
    budget: int

    gender: Gender = Gender.UNSPECIFIED
    age_group: AgeGroup = AgeGroup.TWENTIES

    # 상대 정보
    personality: Tuple[Personality, ...] = ()
    preferences: Tuple[Preference, ...] = ()
    recent_interests: str = ""
    gift_reaction: GiftReaction = GiftReaction.UNKNOWN

    # 상대 행동 (객관적 친밀도)
    recipient_actions: Tuple[RecipientAction, ...] = ()
    recent_episodes: str = ""

    # 관계 & 과거 데이터
    giri_awareness: GiriAwareness = GiriAwareness.UNKNOWN
    return_tendency: ReturnTendency = ReturnTendency.UNKNOWN
    gave_last_year: bool = False
    received_return: bool = False
    gave_year_before: bool = False
    received_return_year_before: bool = False
    return_value: Optional[int] = None

    memo: str = ""
    target_id: Optional[str] = None

    @property
    def key(self) -> str:
        """배치 내 식별자. target_id가 없으면 name."""
        return self.target_id or self.name


@dataclass(frozen=True)
class ActionWeightedScores:
    """단일 대상 모드 점수 (모두 0~100)"""

    intimacy: int
    roi: int
    gift_fit: int
    total: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class BatchPriorScores:
    """배치 모드 점수 (모두 0~100)"""

    roi: int
    relationship: int
    emotion: int
    total: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class RoiPrediction:
    return_probability: float  # 0.0 ~ 1.0, 소수 2자리
    expected_multiplier: float  # >= 0, 소수 1자리


@dataclass
class TargetAnalysis:
    """단일 대상 분석 결과"""

    target_name: str
    scores: ActionWeightedScores
    rank: Rank
    rank_reason: str
    outcome: OutcomeType
    gift: GiftSuggestion
    message: str
    roi_prediction: RoiPrediction
    questions: List[str] = field(default_factory=list)
    risk_warnings: List[str] = field(default_factory=list)
    source: str = "local"  # "local" | 원격 provider 이름

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["rank"] = self.rank.value
        data["outcome"] = self.outcome.value
        return data


@dataclass
class AnalyzedTarget:
    """배치 결과의 대상 1명분"""

    target_id: str
    name: str
    relationship: RelationshipType
    emotional_priority: int
    scores: BatchPriorScores
    rank: Rank
    rank_reason: str
    outcome: BatchOutcomeType
    allocated_budget: int
    gift: GiftSuggestion
    message: str
    roi_prediction: RoiPrediction


@dataclass
class TimelineEntry:
    date: str
    action: str


@dataclass
class BatchAnalysis:
    """배치 분석 결과"""

    targets: List[AnalyzedTarget]
    timeline: List[TimelineEntry]
    warnings: List[str]
    total_budget: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for raw, target in zip(data["targets"], self.targets):
            raw["relationship"] = target.relationship.value
            raw["rank"] = target.rank.value
            raw["outcome"] = target.outcome.value
        return data
