"""
ウィッシュリスト（希望条件リスト）を表現するモデル
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Importance(str, Enum):
    """希望条件の重要度"""
    MUST_HAVE = "mustHave"
    VERY_IMPORTANT = "veryImportant"
    IMPORTANT = "important"
    NICE_TO_HAVE = "niceToHave"
    OPTIONAL = "optional"


class RatingValue(str, Enum):
    """物件の条件ごとの評価値"""
    NOT_RATED = "not_rated"
    VERY_POOR = "very_poor"
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"


class WishlistCriterion(BaseModel):
    """
    ウィッシュリストの1項目

    importanceは未知の値も受け付け、スコア計算時にoptional扱いとする
    """
    name: str
    importance: str
    id: Optional[str] = None  # 保存用のID（スコア計算には使用しない）


class Wishlist(BaseModel):
    """ウィッシュリストモデル"""
    id: Optional[str] = None
    name: str = ""
    items: List[WishlistCriterion] = Field(default_factory=list)

    class Config:
        """設定クラス"""
        json_schema_extra = {
            "example": {
                "id": "wl-1",
                "name": "Family Home",
                "items": [
                    {"name": "Garage", "importance": "mustHave"},
                    {"name": "Pool", "importance": "optional"}
                ]
            }
        }
