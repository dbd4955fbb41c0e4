"""원격 분석 응답 파싱: JSON 본문 추출"""

import json
import logging
import re

logger = logging.getLogger(__name__)


class ResponseParser:
    """원격 provider 응답 파싱"""

    def parse_json(self, raw: str) -> dict | None:
        """분석 JSON 파싱.

        파싱 단계:
        1. 전체 JSON 시도 → json.loads()
        2. ```json ... ``` 블록 추출 시도
        3. 실패 → None
        """
        # 1단계: 전체 JSON 시도
        parsed = self._try_parse_json(raw.strip())
        if parsed is not None:
            return parsed

        # 2단계: ```json 블록 추출
        json_block = self._extract_json_block(raw)
        if json_block is not None:
            parsed = self._try_parse_json(json_block)
            if parsed is not None:
                return parsed

        # 3단계: 실패
        logger.warning("Failed to parse analysis response as JSON")
        return None

    def _try_parse_json(self, text: str) -> dict | None:
        """JSON 파싱 시도. dict가 아니면 None."""
        try:
            result = json.loads(text)
            if isinstance(result, dict):
                return result
            return None
        except (json.JSONDecodeError, TypeError):
            return None

    def _extract_json_block(self, text: str) -> str | None:
        """```json ... ``` 블록 추출."""
        match = re.search(r"```json\s*(.*?)\s*```", text, re.DOTALL)
        if match:
            return match.group(1)
        return None
