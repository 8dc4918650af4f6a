"""
物件比較の結果を表現するモデル
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .score_report import ScoreReport


class ScoredProperty(BaseModel):
    """
    紐付いたウィッシュリストでスコア計算した物件
    """
    record: Any                      # 入力された物件（辞書またはPropertyモデル）
    property_id: Any = None
    address: str = ""
    wishlist_name: str = "N/A"
    report: Optional[ScoreReport] = None
    calculated_score: float = -1     # ウィッシュリスト未設定の場合は-1
    score_text: str = "N/A"

    def to_dict(self) -> Dict[str, Any]:
        """
        比較結果を辞書形式に変換

        Returns:
            Dict[str, Any]: 比較結果の辞書表現
        """
        return {
            "propertyId": self.property_id,
            "address": self.address,
            "wishlistName": self.wishlist_name,
            "calculatedScore": self.calculated_score,
            "scoreText": self.score_text,
            "mustHaveMet": self.report.must_have_met if self.report else None,
            "report": self.report.to_dict() if self.report else None
        }


class RankedProperty(ScoredProperty):
    """マッチ度順に順位付けされた物件"""
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return {"rank": self.rank, **super().to_dict()}


class SideBySideComparison(BaseModel):
    """並べて比較する物件の一覧"""
    columns: List[ScoredProperty] = Field(default_factory=list)
    missing_ids: List[Any] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": [column.to_dict() for column in self.columns],
            "missingIds": self.missing_ids
        }
