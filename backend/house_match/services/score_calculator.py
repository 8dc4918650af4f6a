"""
物件とウィッシュリストのマッチ度計算を管理するサービス
"""
import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Optional

from ..config.scoring_tables import (
    IMPORTANCE_WEIGHT_MAP,
    MAX_SCORE_PER_ITEM,
    MUST_HAVE_MET_THRESHOLD_SCORE,
    RATING_SCORE_MAP,
)
from ..models.score_report import CriterionDetail, ScoreReport
from ..models.wishlist import Importance, RatingValue

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, bytes, int, float, bool)


def get_field(record: Any, key: str, default: Any = None) -> Any:
    """辞書・オブジェクトのどちらからでも値を取得する"""
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def _plain(value: Any) -> Any:
    # Enumで渡された値は保存形式（文字列）に揃える
    return value.value if isinstance(value, Enum) else value


class MatchScorer:
    def __init__(self):
        self.MAX_PERCENTAGE = 100.0
        self.MIN_PERCENTAGE = 0.0

    def clamp_percentage(self, percentage: float) -> float:
        """
        マッチ度を0-100の範囲に収める
        """
        return max(self.MIN_PERCENTAGE, min(self.MAX_PERCENTAGE, percentage))

    def get_weight(self, importance: Any) -> int:
        """重要度の重みを取得（未知の重要度はoptionalの重み）"""
        default = IMPORTANCE_WEIGHT_MAP[Importance.OPTIONAL.value]
        if not isinstance(importance, str):
            return default
        return IMPORTANCE_WEIGHT_MAP.get(importance, default)

    def get_numeric_score(self, rating_value: Any) -> int:
        """評価値の数値スコアを取得（未知の評価値は0）"""
        if not isinstance(rating_value, str):
            return 0
        return RATING_SCORE_MAP.get(rating_value, 0)

    def _get_ratings(self, property: Any) -> Mapping:
        ratings = get_field(property, "ratings")
        if ratings is None and isinstance(property, Mapping):
            # 保存済みドキュメントのキー名
            ratings = property.get("wishlistRatings")
        if ratings is None:
            return {}
        if not isinstance(ratings, Mapping):
            logger.warning(f"ratings is not a mapping ({type(ratings).__name__}); treating as empty")
            return {}
        return ratings

    def _score_item(self, item: Any, ratings: Mapping) -> Optional[CriterionDetail]:
        """
        ウィッシュリストの1項目を計算する

        Args:
            item: ウィッシュリスト項目（辞書またはWishlistCriterion）
            ratings: 物件の評価値マッピング

        Returns:
            Optional[CriterionDetail]: 内訳（不正な項目の場合はNone）
        """
        if item is None or isinstance(item, _SCALAR_TYPES):
            logger.warning(f"Skipping malformed wishlist item: {item!r}")
            return None

        name = get_field(item, "name")
        importance = _plain(get_field(item, "importance"))
        if not isinstance(name, str) or not name:
            logger.warning(f"Skipping wishlist item without a valid name: {item!r}")
            return None
        if importance is None or importance == "":
            logger.warning(f"Skipping wishlist item '{name}' without importance")
            return None

        criterion_id = name.strip()
        weight = self.get_weight(importance)

        rating_value = _plain(ratings.get(criterion_id))
        if rating_value is None or rating_value == "":
            rating_value = RatingValue.NOT_RATED.value
        numeric_score = self.get_numeric_score(rating_value)

        is_must_have = importance == Importance.MUST_HAVE.value
        if is_must_have:
            met = numeric_score >= MUST_HAVE_MET_THRESHOLD_SCORE
        else:
            met = numeric_score > RATING_SCORE_MAP[RatingValue.NOT_RATED.value]

        logger.debug(
            f"criterion='{criterion_id}' importance={importance} weight={weight} "
            f"rating={rating_value} score={numeric_score} met={met}"
        )

        return CriterionDetail(
            criterion_id=criterion_id,
            criterion=criterion_id,
            importance=importance,
            rating_value=rating_value,
            numeric_score=numeric_score,
            max_points=MAX_SCORE_PER_ITEM,
            is_must_have=is_must_have,
            met=met
        )

    def compute_match(self, property: Any, wishlist: Any) -> ScoreReport:
        """
        物件がウィッシュリストにどれだけ合致するかを計算

        Args:
            property: 物件（`ratings`を持つ辞書またはPropertyモデル）
            wishlist: ウィッシュリスト（`items`を持つ辞書またはWishlistモデル）

        Returns:
            ScoreReport: マッチ度・必須条件の充足・条件ごとの内訳。
                入力が不正な場合はゼロ値の結果（invalid_input=True）
        """
        if property is None or wishlist is None \
                or isinstance(property, _SCALAR_TYPES) or isinstance(wishlist, _SCALAR_TYPES):
            logger.warning("Invalid input provided to match calculation; returning default report")
            return ScoreReport.default()

        items = get_field(wishlist, "items")
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
            logger.warning("Wishlist items are missing or not a sequence; returning default report")
            return ScoreReport.default()

        ratings = self._get_ratings(property)

        total_weighted_score = 0
        total_max_weighted_score = 0
        must_have_count = 0
        must_have_met_count = 0
        details = []

        for item in items:
            detail = self._score_item(item, ratings)
            if detail is None:
                continue

            weight = self.get_weight(detail.importance)
            total_weighted_score += detail.numeric_score * weight
            total_max_weighted_score += MAX_SCORE_PER_ITEM * weight

            if detail.is_must_have:
                must_have_count += 1
                if detail.met:
                    must_have_met_count += 1

            details.append(detail)

        # 重み付き項目が1つもない場合は100%とする
        if total_max_weighted_score == 0:
            match_percentage = self.MAX_PERCENTAGE
        else:
            match_percentage = 100 * total_weighted_score / total_max_weighted_score

        must_have_met = must_have_count == 0 or must_have_met_count == must_have_count

        return ScoreReport(
            match_percentage=self.clamp_percentage(match_percentage),
            must_have_met=must_have_met,
            details=details
        )


_default_scorer = MatchScorer()


def compute_match(property: Any, wishlist: Any) -> ScoreReport:
    """デフォルトのMatchScorerでマッチ度を計算する"""
    return _default_scorer.compute_match(property, wishlist)
