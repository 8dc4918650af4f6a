"""
設定関連のパッケージ
"""
from .scoring_tables import (
    IMPORTANCE_WEIGHT_MAP,
    MAX_COMPARE_ITEMS,
    MAX_SCORE_PER_ITEM,
    MUST_HAVE_MET_THRESHOLD_SCORE,
    RATING_SCORE_MAP,
)
from .settings import get_settings

__all__ = [
    'IMPORTANCE_WEIGHT_MAP',
    'MAX_COMPARE_ITEMS',
    'MAX_SCORE_PER_ITEM',
    'MUST_HAVE_MET_THRESHOLD_SCORE',
    'RATING_SCORE_MAP',
    'get_settings'
]
