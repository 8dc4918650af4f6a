"""
マッチ度計算で使用する固定テーブルを定義するモジュール
"""
from types import MappingProxyType
from typing import Any, List, Dict

from ..models.wishlist import Importance, RatingValue

# 1項目あたりの最大スコア
MAX_SCORE_PER_ITEM = 5

# 重要度ごとの重み
IMPORTANCE_WEIGHT_MAP = MappingProxyType({
    Importance.MUST_HAVE.value: 5,
    Importance.VERY_IMPORTANT.value: 4,
    Importance.IMPORTANT.value: 3,
    Importance.NICE_TO_HAVE.value: 2,
    Importance.OPTIONAL.value: 1,
})

# 評価値ごとの数値スコア（0-5）
RATING_SCORE_MAP = MappingProxyType({
    RatingValue.NOT_RATED.value: 0,
    RatingValue.VERY_POOR.value: 1,
    RatingValue.POOR.value: 2,
    RatingValue.AVERAGE.value: 3,
    RatingValue.GOOD.value: 4,
    RatingValue.EXCELLENT.value: 5,
})

# 必須項目を「満たした」とみなす最低スコア（average = 3）
MUST_HAVE_MET_THRESHOLD_SCORE = RATING_SCORE_MAP[RatingValue.AVERAGE.value]

# 比較画面で同時に選択できる物件数
MAX_COMPARE_ITEMS = 3

# 表示ラベル（ドロップダウンの並び順）
IMPORTANCE_LEVELS = (
    {"label": "Must Have", "value": Importance.MUST_HAVE.value},
    {"label": "Very Important", "value": Importance.VERY_IMPORTANT.value},
    {"label": "Important", "value": Importance.IMPORTANT.value},
    {"label": "Nice to Have", "value": Importance.NICE_TO_HAVE.value},
    {"label": "Optional", "value": Importance.OPTIONAL.value},
)

RATING_OPTIONS = (
    {"label": "Not Rated", "value": RatingValue.NOT_RATED.value},
    {"label": "Very Poor", "value": RatingValue.VERY_POOR.value},
    {"label": "Poor", "value": RatingValue.POOR.value},
    {"label": "Average", "value": RatingValue.AVERAGE.value},
    {"label": "Good", "value": RatingValue.GOOD.value},
    {"label": "Excellent", "value": RatingValue.EXCELLENT.value},
)

# 最低マッチ度フィルタの選択肢
SCORE_FILTER_OPTIONS = (
    {"value": 0, "label": "Show All Scores"},
    {"value": 50, "label": "50% +"},
    {"value": 70, "label": "70% +"},
    {"value": 80, "label": "80% +"},
    {"value": 90, "label": "90% +"},
)


def _find_label(options, value: Any) -> Any:
    for option in options:
        if option["value"] == value:
            return option["label"]
    return value


def get_importance_label(importance: Any) -> Any:
    """重要度の表示ラベルを取得（未知の値はそのまま返す）"""
    return _find_label(IMPORTANCE_LEVELS, importance)


def get_rating_label(rating: Any) -> Any:
    """評価値の表示ラベルを取得（未知の値はそのまま返す）"""
    return _find_label(RATING_OPTIONS, rating)


def get_display_constants() -> Dict[str, List[Dict[str, Any]]]:
    """
    クライアント表示用の定数一覧を取得

    Returns:
        Dict[str, List[Dict[str, Any]]]: ラベル表とフィルタ選択肢
    """
    return {
        "importanceLevels": [dict(option) for option in IMPORTANCE_LEVELS],
        "ratingOptions": [dict(option) for option in RATING_OPTIONS],
        "scoreFilterOptions": [dict(option) for option in SCORE_FILTER_OPTIONS],
    }
