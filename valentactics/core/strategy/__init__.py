"""선물 전략 Core 패키지: 공개 API"""

from valentactics.core.strategy.models import (
    ActionWeightedScores,
    AnalyzedTarget,
    BatchAnalysis,
    BatchOutcomeType,
    BatchPriorScores,
    BenefitType,
    GiftReaction,
    GiriAwareness,
    OutcomeType,
    Personality,
    Preference,
    Rank,
    RecipientAction,
    RelationshipGoal,
    RelationshipType,
    ReturnTendency,
    RoiPrediction,
    TargetAnalysis,
    TargetProfile,
)
from valentactics.core.strategy.scoring import (
    ActionWeightedStrategy,
    BatchPriorStrategy,
    ScoringStrategy,
)
from valentactics.core.strategy.ranking import (
    apply_rank_adjustments,
    rank_for_total,
)
from valentactics.core.strategy.outcome import (
    determine_batch_outcome,
    determine_outcome,
)
from valentactics.core.strategy.allocation import (
    AllocationCandidate,
    allocate_budgets,
)
from valentactics.core.strategy.risk_warnings import (
    warns_low_priority_romance_misread,
    warns_romance_misread,
)

__all__ = [
    "ActionWeightedScores",
    "AnalyzedTarget",
    "BatchAnalysis",
    "BatchOutcomeType",
    "BatchPriorScores",
    "BenefitType",
    "GiftReaction",
    "GiriAwareness",
    "OutcomeType",
    "Personality",
    "Preference",
    "Rank",
    "RecipientAction",
    "RelationshipGoal",
    "RelationshipType",
    "ReturnTendency",
    "RoiPrediction",
    "TargetAnalysis",
    "TargetProfile",
    "ActionWeightedStrategy",
    "BatchPriorStrategy",
    "ScoringStrategy",
    "apply_rank_adjustments",
    "rank_for_total",
    "determine_batch_outcome",
    "determine_outcome",
    "AllocationCandidate",
    "allocate_budgets",
    "warns_low_priority_romance_misread",
    "warns_romance_misread",
]
