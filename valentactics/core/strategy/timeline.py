"""배치 일정표: 발렌타인 ~ 화이트데이"""

from typing import List, Sequence

from valentactics.core.strategy.models import AnalyzedTarget, Rank, TimelineEntry


def build_timeline(targets: Sequence[AnalyzedTarget]) -> List[TimelineEntry]:
    """고정 일정 + S/A 랭크 대상이 있으면 확인 단계 삽입."""
    s_targets = [t for t in targets if t.rank == Rank.S]
    a_targets = [t for t in targets if t.rank == Rank.A]

    items = [
        TimelineEntry("2/1〜2/7", "ギフトの購入・手配（オンライン注文の最終期限に注意）"),
        TimelineEntry("2/8〜2/10", "メッセージカードの準備・手書きメッセージ作成"),
    ]
    if s_targets:
        names = "・".join(t.name for t in s_targets)
        items.append(TimelineEntry("2/12", f"Sランク対象者（{names}）への渡し方を最終確認"))
    if a_targets:
        items.append(TimelineEntry("2/13", "A/Bランク対象者へのギフト最終準備"))

    items.extend(
        [
            TimelineEntry("2/14", "バレンタインデー当日 — 全対象者にギフトを渡す"),
            TimelineEntry("2/15〜2/28", "反応の記録・関係性の変化を観察"),
            TimelineEntry("3/14", "ホワイトデー — お返しの有無・内容を記録しROI確定"),
            TimelineEntry("3/15〜3/31", "成功タイプの最終判定・来年への振り返り"),
        ]
    )
    return items
