"""
物件の順位付け・並列比較を管理するサービス
"""
import logging
import math
from typing import Any, Iterable, List, Optional, Sequence

from ..config import get_settings
from ..models.comparison import RankedProperty, ScoredProperty, SideBySideComparison
from .score_calculator import MatchScorer, get_field

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
NO_SCORE = -1


class ComparisonError(ValueError):
    """比較対象の選択が不正な場合のエラー"""
    pass


def _property_wishlist_id(record: Any) -> Optional[str]:
    wishlist_id = get_field(record, "wishlist_id")
    if wishlist_id is None:
        wishlist_id = get_field(record, "wishlistId")
    return wishlist_id


def find_wishlist(wishlist_id: Optional[str], wishlists: Iterable[Any]) -> Optional[Any]:
    """IDに一致するウィッシュリストを取得"""
    if not wishlist_id:
        return None
    for wishlist in wishlists or []:
        if wishlist is not None and get_field(wishlist, "id") == wishlist_id:
            return wishlist
    return None


def wishlist_name(wishlist_id: Optional[str], wishlists: Iterable[Any]) -> str:
    """
    物件に紐付いたウィッシュリスト名を取得

    Returns:
        str: 未設定の場合は"N/A"、見つからない場合は"Unknown"
    """
    if not wishlist_id:
        return NOT_AVAILABLE
    wishlist = find_wishlist(wishlist_id, wishlists)
    if wishlist is None:
        return "Unknown"
    return get_field(wishlist, "name") or "Unknown"


def format_score(score: Optional[float]) -> str:
    """マッチ度を表示用の文字列（例: "80%"）に変換"""
    if score is None or score == NO_SCORE:
        return NOT_AVAILABLE
    return f"{math.floor(score + 0.5)}%"


def score_property(record: Any, wishlists: Sequence[Any], scorer: Optional[MatchScorer] = None) -> ScoredProperty:
    """
    物件を紐付いたウィッシュリストでスコア計算する

    Args:
        record: 物件（辞書またはPropertyモデル）
        wishlists: ウィッシュリストの一覧
        scorer: 使用するMatchScorer（省略時は新規作成）

    Returns:
        ScoredProperty: スコア付きの物件。ウィッシュリストが無い場合はスコア-1
    """
    scorer = scorer or MatchScorer()
    wishlist_id = _property_wishlist_id(record)
    linked_wishlist = find_wishlist(wishlist_id, wishlists)

    report = None
    calculated_score = NO_SCORE
    if linked_wishlist is not None:
        report = scorer.compute_match(record, linked_wishlist)
        calculated_score = report.match_percentage
    elif wishlist_id:
        logger.warning(f"Linked wishlist {wishlist_id} not found for property {get_field(record, 'id')}")

    return ScoredProperty(
        record=record,
        property_id=get_field(record, "id"),
        address=get_field(record, "address") or "",
        wishlist_name=wishlist_name(wishlist_id, wishlists),
        report=report,
        calculated_score=calculated_score,
        score_text=format_score(calculated_score)
    )


def rank_properties(
    properties: Sequence[Any],
    wishlists: Sequence[Any],
    min_score: float = 0
) -> List[RankedProperty]:
    """
    物件をマッチ度の高い順に並べ、順位を付ける

    Args:
        properties: 物件の一覧
        wishlists: ウィッシュリストの一覧
        min_score: 最低マッチ度（0の場合は全件表示）

    Returns:
        List[RankedProperty]: 順位付けされた物件（1位から）
    """
    if not properties or not wishlists:
        logger.info("No properties or wishlists to rank")
        return []

    scorer = MatchScorer()
    results = []
    for record in properties:
        if record is None or not get_field(record, "id"):
            continue
        try:
            scored = score_property(record, wishlists, scorer)
        except Exception as e:
            logger.error(f"Error calculating score for property {get_field(record, 'id')}: {str(e)}", exc_info=True)
            scored = ScoredProperty(
                record=record,
                property_id=get_field(record, "id"),
                address=get_field(record, "address") or "",
                wishlist_name=wishlist_name(_property_wishlist_id(record), wishlists)
            )

        if min_score == 0 or scored.calculated_score >= min_score:
            results.append(scored)

    # マッチ度の降順（同点は入力順を維持）
    results.sort(key=lambda x: x.calculated_score, reverse=True)

    ranked = [
        RankedProperty(rank=rank, **dict(scored))
        for rank, scored in enumerate(results, 1)
    ]
    logger.info(f"Ranked {len(ranked)} of {len(properties)} properties (min_score={min_score})")
    return ranked


def compare_side_by_side(
    property_ids: Sequence[str],
    properties: Sequence[Any],
    wishlists: Sequence[Any],
    max_items: Optional[int] = None
) -> SideBySideComparison:
    """
    選択された物件を並べて比較する

    Args:
        property_ids: 比較する物件IDの一覧
        properties: 物件の一覧
        wishlists: ウィッシュリストの一覧
        max_items: 同時に比較できる最大件数（省略時は設定値）

    Returns:
        SideBySideComparison: 物件の保存順に並んだ比較結果と、見つからなかったID

    Raises:
        ComparisonError: 物件が選択されていない、または上限を超えている場合
    """
    if max_items is None:
        max_items = get_settings().MAX_COMPARE_ITEMS
    if not property_ids:
        raise ComparisonError("No properties selected for comparison.")
    if len(property_ids) > max_items:
        raise ComparisonError(f"Max {max_items} items can be compared.")

    scorer = MatchScorer()
    columns = [
        score_property(record, wishlists, scorer)
        for record in properties or []
        if record is not None and get_field(record, "id") in property_ids
    ]
    found_ids = {column.property_id for column in columns}
    missing_ids = [property_id for property_id in property_ids if property_id not in found_ids]
    if missing_ids:
        logger.warning(f"Some selected properties could not be found: {missing_ids}")

    return SideBySideComparison(columns=columns, missing_ids=missing_ids)
