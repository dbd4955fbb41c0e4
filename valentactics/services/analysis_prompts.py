"""원격 분석 프롬프트 빌더"""

from valentactics.core.strategy.models import (
    RELATIONSHIP_LABELS,
    OutcomeType,
    TargetProfile,
)
from valentactics.services.ai.base import CompletionRequest

ANALYSIS_MAX_TOKENS = 1500

ANALYSIS_SYSTEM_PROMPT = """\
あなたはバレンタインのギフト戦略アナリストです。
相手の情報から、渡す価値と最適なギフトを冷静に分析してください。

出力形式:
必ず以下のJSON形式で応答してください。他のテキストは含めないでください。

{{
  "score_intimacy": 0,
  "score_roi": 0,
  "score_gift_fit": 0,
  "score_total": 0,
  "rank": "S|A|B|C",
  "rank_reason": "ランクの理由",
  "outcome": "{outcomes}",
  "gift_item": "ギフト名",
  "gift_price": 0,
  "gift_reason": "選定理由",
  "gift_story": "",
  "message": "添えるメッセージ",
  "return_probability": 0.0,
  "expected_multiplier": 0.0,
  "questions": [],
  "risk_warnings": []
}}

ルール:
- スコアは0〜100の整数
- gift_priceは予算以下
- questionsとrisk_warningsは各5件まで"""


class AnalysisPromptBuilder:
    """단일 대상 분석 프롬프트 조립"""

    def build(self, profile: TargetProfile) -> CompletionRequest:
        outcomes = "|".join(o.value for o in OutcomeType)
        system_prompt = ANALYSIS_SYSTEM_PROMPT.format(outcomes=outcomes)

        lines = [
            f"名前: {profile.name}",
            f"関係: {RELATIONSHIP_LABELS[profile.relationship]}",
            f"目的: {profile.benefit_type.value}",
            f"関係の方針: {profile.relationship_goal.value}",
            f"感情的優先度: {profile.emotional_priority}/5",
            f"予算: {profile.budget}円",
        ]
        if profile.personality:
            lines.append("性格: " + ", ".join(p.value for p in profile.personality))
        if profile.preferences:
            lines.append("好み: " + ", ".join(p.value for p in profile.preferences))
        if profile.recent_interests:
            lines.append(f"最近の関心: {profile.recent_interests}")
        lines.append(f"ギフトへの反応: {profile.gift_reaction.value}")
        if profile.recipient_actions:
            lines.append(
                "相手の行動: " + ", ".join(a.value for a in profile.recipient_actions)
            )
        if profile.recent_episodes:
            lines.append(f"最近のエピソード: {profile.recent_episodes}")
        lines.append(f"義理の認識: {profile.giri_awareness.value}")
        lines.append(f"お返し傾向: {profile.return_tendency.value}")
        lines.append(
            f"去年: 渡した={profile.gave_last_year} お返し={profile.received_return}"
        )
        lines.append(
            f"一昨年: 渡した={profile.gave_year_before} "
            f"お返し={profile.received_return_year_before}"
        )
        if profile.return_value is not None:
            lines.append(f"お返しの金額: {profile.return_value}円")
        if profile.memo:
            lines.append(f"メモ: {profile.memo}")

        user_prompt = "以下の相手を分析し、JSONで回答してください。\n\n" + "\n".join(lines)
        return CompletionRequest(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=ANALYSIS_MAX_TOKENS,
            json_mode=True,
        )
