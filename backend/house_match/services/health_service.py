"""
ヘルスチェックサービス
"""
import logging

from ..config.scoring_tables import IMPORTANCE_WEIGHT_MAP, RATING_SCORE_MAP
from ..models.wishlist import Importance, RatingValue

logger = logging.getLogger(__name__)


def check_health() -> bool:
    """
    サービスの健全性をチェックする

    スコア計算テーブルがすべての重要度・評価値を網羅しているかを確認する

    Returns:
        bool: サービスが正常な場合はTrue
    """
    missing_weights = [i.value for i in Importance if i.value not in IMPORTANCE_WEIGHT_MAP]
    missing_scores = [r.value for r in RatingValue if r.value not in RATING_SCORE_MAP]
    if missing_weights or missing_scores:
        logger.error(f"Scoring tables incomplete: weights={missing_weights}, scores={missing_scores}")
        return False
    return True
