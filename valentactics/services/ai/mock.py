"""Offline provider returning a canned analysis."""

import json

from valentactics.services.ai.base import AIProvider, CompletionRequest

MOCK_ANALYSIS = {
    "score_intimacy": 40,
    "score_roi": 50,
    "score_gift_fit": 45,
    "score_total": 46,
    "rank": "B",
    "rank_reason": "標準対応: バランス型",
    "outcome": "needs_review",
    "gift_item": "焼き菓子アソート",
    "gift_price": 300,
    "gift_reason": "万人受けする安心の選択",
    "gift_story": "",
    "message": "ほんの気持ちですが、どうぞ。",
    "return_probability": 0.3,
    "expected_multiplier": 0.6,
    "questions": [],
    "risk_warnings": [],
}

MOCK_ANALYSIS_RESPONSE = json.dumps(MOCK_ANALYSIS, ensure_ascii=False)
MOCK_TEXT_RESPONSE = "[Mock] 分析結果はありません。"


class MockProvider(AIProvider):
    """Always-available provider for local development and tests.

    JSON-mode requests get MOCK_ANALYSIS_RESPONSE, which passes payload
    validation for any budget of at least 300. Other requests get a fixed line.
    """

    @property
    def name(self) -> str:
        return "mock"

    def is_available(self) -> bool:
        return True

    def complete(self, request: CompletionRequest) -> str:
        if request.json_mode:
            return MOCK_ANALYSIS_RESPONSE
        return MOCK_TEXT_RESPONSE
