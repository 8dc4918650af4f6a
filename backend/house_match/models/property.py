"""
候補物件を表現するモデル
"""
from typing import Dict, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


class Property(BaseModel):
    """
    候補物件モデル

    ratingsは条件名（前後の空白を除いた名前）をキーとした評価値のマッピング。
    保存済みドキュメントの`wishlistRatings`キーでも受け付ける。
    """
    id: Optional[str] = None
    address: str = ""
    wishlist_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("wishlist_id", "wishlistId"),
    )
    ratings: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("ratings", "wishlistRatings"),
    )

    @field_validator("ratings", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        # 未評価の物件はratingsがnullで保存されていることがある
        return {} if value is None else value

    class Config:
        """設定クラス"""
        json_schema_extra = {
            "example": {
                "id": "prop-1",
                "address": "12 Elm Street",
                "wishlistId": "wl-1",
                "ratings": {"Garage": "good", "Pool": "not_rated"}
            }
        }
