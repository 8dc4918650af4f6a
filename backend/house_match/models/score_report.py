"""
マッチ度の計算結果を表現するモデル
"""
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class CriterionDetail(BaseModel):
    """
    条件ごとの計算内訳
    """
    criterion_id: str    # 前後の空白を除いた条件名（IDを兼ねる）
    criterion: str
    importance: Any      # 入力値をそのまま保持（未知の値を含む）
    rating_value: Any    # 保存されていた評価値（未評価はnot_rated）
    numeric_score: int
    max_points: int
    is_must_have: bool
    met: bool

    def to_dict(self) -> Dict[str, Any]:
        """
        内訳を辞書形式に変換

        Returns:
            Dict[str, Any]: camelCaseキーの辞書表現
        """
        return {
            "criterionId": self.criterion_id,
            "criterion": self.criterion,
            "importance": self.importance,
            "ratingValue": self.rating_value,
            "numericScore": self.numeric_score,
            "maxPoints": self.max_points,
            "isMustHave": self.is_must_have,
            "met": self.met
        }


class ScoreReport(BaseModel):
    """
    物件とウィッシュリストのマッチ度計算結果
    """
    match_percentage: float
    must_have_met: bool
    details: List[CriterionDetail] = Field(default_factory=list)
    invalid_input: bool = False  # 入力不正によるフォールバック結果の場合True

    @classmethod
    def default(cls) -> "ScoreReport":
        """入力不正時に返すゼロ値の結果"""
        return cls(match_percentage=0, must_have_met=True, details=[], invalid_input=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        計算結果を辞書形式に変換

        Returns:
            Dict[str, Any]: 計算結果の辞書表現
        """
        result = {
            "matchPercentage": self.match_percentage,
            "mustHaveMet": self.must_have_met,
            "details": [detail.to_dict() for detail in self.details]
        }
        if self.invalid_input:
            result["invalidInput"] = True
        return result

    class Config:
        """設定クラス"""
        json_schema_extra = {
            "example": {
                "matchPercentage": 80.0,
                "mustHaveMet": True,
                "details": [
                    {
                        "criterionId": "Garage",
                        "criterion": "Garage",
                        "importance": "mustHave",
                        "ratingValue": "good",
                        "numericScore": 4,
                        "maxPoints": 5,
                        "isMustHave": True,
                        "met": True
                    }
                ]
            }
        }
