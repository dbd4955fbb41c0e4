"""선물 제안 / 스토리 / 메시지 / 보완 질문 생성

상대 정보(취향, 관심사, 에피소드, 반응)는 점수가 아니라 여기서만 쓰인다.
전부 결정적. 난수 없음.
"""

import logging
from typing import Dict, List, Optional

from valentactics.core.strategy.models import (
    BenefitType,
    GiftReaction,
    Preference,
    RelationshipGoal,
    RelationshipType,
    ReturnTendency,
    TargetProfile,
)

from .catalog import GiftCatalog
from .models import GiftSuggestion, budget_tier_for

logger = logging.getLogger(__name__)

SURPRISE_SUFFIX = "（サプライズ演出を添えると効果倍増）"

MAX_QUESTIONS = 5
INTEREST_HOOK_MIN = 5
INTEREST_HOOK_LIMIT = 40
EPISODE_HOOK_MIN = 10
EPISODE_HOOK_LIMIT = 60

CLOSING_HINTS: Dict[GiftReaction, str] = {
    GiftReaction.FEELS_EMBARRASSED: (
        "\n※ 恐縮させないよう、さりげなく渡すのがベスト。「みんなに配ってるよ」と添えると安心。"
    ),
    GiftReaction.RECEIVES_MODESTLY: "\n※ 控えめな人なので、軽いトーンで渡すと受け取りやすい。",
}

MESSAGES: Dict[RelationshipType, str] = {
    RelationshipType.PARTNER: (
        "いつも本当にありがとう。\nあなたがいてくれることが、何よりの幸せです。\n日頃の感謝を込めて。"
    ),
    RelationshipType.ROMANTIC_INTEREST: (
        "いつも楽しい時間をありがとうございます。\nほんの気持ちですが、受け取っていただけたら嬉しいです。"
    ),
    RelationshipType.BOSS: (
        "いつもご指導いただきありがとうございます。\n"
        "日頃の感謝の気持ちを込めて、ささやかですがお受け取りください。"
    ),
    RelationshipType.COLLEAGUE: "いつもお疲れさま！\n日頃の感謝を込めて。一緒に頑張ろう！",
    RelationshipType.FRIEND: "いつもありがとう！\nちょっとしたお礼だけど、良かったらどうぞ。",
    RelationshipType.OTHER: "ほんの気持ちですが、どうぞ。",
}


# ── 선물 ──


def suggest_gift(
    profile: TargetProfile,
    catalog: GiftCatalog,
    budget: Optional[int] = None,
    with_story: bool = True,
) -> GiftSuggestion:
    """예산 티어 × 취향 우선순위로 카탈로그 조회.

    budget: 배치 모드에서는 배분액. 생략 시 프로필 예산.
    스토리는 무형 목표이고 with_story일 때만.
    """
    amount = profile.budget if budget is None else budget
    entry = catalog.lookup(budget_tier_for(amount), profile.preferences)

    reason = entry.reason
    if Preference.SURPRISE_LOVER in profile.preferences:
        reason += SURPRISE_SUFFIX

    story = ""
    if with_story and profile.benefit_type == BenefitType.INTANGIBLE:
        story = build_story(profile, entry.item)

    logger.debug("Gift for %s: %s (%s)", profile.name, entry.gift_id, amount)
    return GiftSuggestion(
        item=entry.item,
        price=min(amount, entry.price),
        reason=reason,
        story=story,
    )


def build_story(profile: TargetProfile, gift_item: str) -> str:
    """관계 유형별 템플릿 + 관심사 / 에피소드 훅 + 전달 방법 힌트."""
    name = profile.name
    closing = CLOSING_HINTS.get(profile.gift_reaction, "")

    interest_hook = ""
    if len(profile.recent_interests) > INTEREST_HOOK_MIN:
        interest = profile.recent_interests[:INTEREST_HOOK_LIMIT]
        interest_hook = (
            f"\n「{interest}」に最近ハマっていると聞いて、この人のことをもっと知りたいと思った——"
        )

    episode_hook = ""
    if len(profile.recent_episodes) > EPISODE_HOOK_MIN:
        episode = profile.recent_episodes[:EPISODE_HOOK_LIMIT]
        episode_hook = f"\n最近のこと——{episode}——を思い出すと、この人との距離感がわかる。"

    hooks = f"{interest_hook}{episode_hook}"
    relationship = profile.relationship

    if relationship == RelationshipType.PARTNER:
        return (
            f"「{gift_item}」を選んだのは、{name}がいつも頑張っている姿を見ているから。{hooks}"
            "\n特別な日じゃなくても感謝を伝えたい——そんな気持ちを、この一箱に込めて。"
            f"\n二人でゆっくり味わう時間が、いちばんのプレゼントになるはず。{closing}"
        )
    if relationship == RelationshipType.ROMANTIC_INTEREST:
        return (
            f"ふと{name}のことを思い出したとき、「{gift_item}」が目に留まった。{hooks}"
            '\n"これ、絶対好きそう"——そう思えるのは、ちゃんと見ているから。'
            f"\n大げさじゃなく、でも気持ちが伝わるように。そんな距離感で渡してみて。{closing}"
        )
    if relationship == RelationshipType.BOSS:
        return (
            f"日頃の感謝を形にしたくて「{gift_item}」を選びました。{hooks}"
            f"\n{name}のデスクで一息つくとき、ふっと笑顔になってもらえたら嬉しい。"
            f'\nさりげなく渡すのがポイント。"いつもありがとうございます"の一言を添えて。{closing}'
        )
    if relationship == RelationshipType.FRIEND:
        return (
            f"{name}とは気を遣わない仲だけど、だからこそ「{gift_item}」で少しだけ驚かせたい。{hooks}"
            '\n"え、わざわざ？" "いや、なんとなく" ——'
            f"このゆるい温度感が、友達のいいところ。{closing}"
        )
    if relationship == RelationshipType.COLLEAGUE:
        return (
            f"毎日一緒に働く{name}に、「{gift_item}」でささやかな感謝を。{hooks}"
            '\n忙しい午後のブレイクタイムに"お疲れさま"と一緒に渡すと、'
            f"チームの空気がちょっと和むかも。{closing}"
        )
    return (
        f"{name}への「{gift_item}」。ほんの気持ちだけど、"
        f"受け取ったときの表情を想像して選んだ一品。{hooks}{closing}"
    )


# ── 메시지 ──


def generate_message(relationship: RelationshipType) -> str:
    """관계 유형만으로 고정 메시지."""
    return MESSAGES[relationship]


# ── 보완 질문 ──


def generate_questions(profile: TargetProfile) -> List[str]:
    """입력이 부족한 항목을 위에서부터 점검. 최대 5개, 규칙 순서 유지."""
    questions: List[str] = []

    action_count = len(profile.recipient_actions)
    if action_count == 0:
        questions.append(
            "相手があなたに対してどんな行動をとっているか振り返ってみてください。"
            "連絡が来る、相談される、誘われるなどの事実があると親密度の精度が大幅に上がります。"
        )
    elif action_count <= 2:
        questions.append(
            "行動指標がまだ少なめです。「信頼」「優先度」「興味」のカテゴリでも"
            "当てはまるものがないか確認してみてください。"
        )

    if len(profile.recent_episodes) <= 10:
        questions.append(
            "最近この人との具体的なエピソードを書いてみてください。"
            "「相談された」「一緒にランチした」など、些細なことでも親密度の精度が上がります。"
        )

    if not profile.personality:
        questions.append(
            "この人はどんな性格ですか？（几帳面・おおらか・こだわり強い・社交的 etc.）"
            "性格がわかるとギフト戦略が大きく変わります。"
        )

    preference_count = len(profile.preferences)
    if preference_count == 0:
        questions.append(
            "この人の好きな食べ物・飲み物・趣味を調べてみてください。"
            "好みタグが増えるとギフト提案の精度が大きく上がります。"
        )
    elif preference_count <= 3:
        questions.append(
            "好みの情報がまだ少なめです。味覚・ライフスタイル・価値観のカテゴリで"
            "深掘りできると分析精度が上がります。"
        )

    if not profile.recent_interests:
        questions.append(
            "この人が最近ハマっていること、欲しがっていたもの、話題にしていたことを"
            "探ってみてください。ギフト提案の個別化に直結します。"
        )

    if profile.gift_reaction == GiftReaction.UNKNOWN:
        questions.append(
            "この人がプレゼントをもらったとき、どんな反応をするタイプですか？"
            "（素直に喜ぶ/控えめ/恐縮する）渡し方やストーリーの調整に使えます。"
        )

    if profile.benefit_type == BenefitType.TANGIBLE:
        questions.extend(_tangible_questions(profile))
    else:
        questions.extend(_intangible_questions(profile))

    return questions[:MAX_QUESTIONS]


def _tangible_questions(profile: TargetProfile) -> List[str]:
    questions: List[str] = []
    if profile.return_tendency == ReturnTendency.UNKNOWN:
        questions.append(
            "この人は義理チョコにお返しするタイプですか？周囲にそれとなく聞いてみてください。"
            "ROI予測の精度が大幅に上がります。"
        )
    if profile.gave_last_year and profile.received_return and not profile.return_value:
        questions.append(
            "去年のお返しの金額を思い出せますか？具体的な金額がわかるとROI予測が正確になります。"
        )
    if profile.gave_last_year and not profile.received_return:
        questions.append(
            "去年お返しがなかった理由を探ってみてください。"
            "「忘れていただけ」なら回収の可能性あり、「不要と思われた」なら撤退の材料になります。"
        )
    return questions


def _intangible_questions(profile: TargetProfile) -> List[str]:
    questions: List[str] = []
    if profile.relationship_goal == RelationshipGoal.DEEPEN and not profile.recent_interests:
        questions.append(
            "関係を深めたいなら、この人が最近喜んでいたこと・感動していたことを探ってみてください。"
            "ストーリーに織り込めます。"
        )
    if (
        profile.relationship == RelationshipType.ROMANTIC_INTEREST
        and len(profile.preferences) < 5
    ):
        questions.append(
            "この人が普段どんなものを身につけている・使っているか観察してみてください。"
            "ブランドの好みやこだわりがわかるとギフト精度が上がります。"
        )
    return questions
