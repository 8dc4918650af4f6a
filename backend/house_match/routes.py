import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import AliasChoices, BaseModel, Field

from .config import get_settings
from .config.scoring_tables import get_display_constants
from .services.comparison_service import compare_side_by_side, rank_properties
from .services.health_service import check_health
from .services.score_calculator import compute_match

logger = logging.getLogger(__name__)

router = APIRouter()


class MatchRequest(BaseModel):
    # 不正な項目もスコア計算側でスキップさせるため、辞書のまま受け取る
    property: Optional[Dict[str, Any]] = None
    wishlist: Optional[Dict[str, Any]] = None


class ComparisonRequest(BaseModel):
    properties: List[Dict[str, Any]] = Field(default_factory=list)
    wishlists: List[Dict[str, Any]] = Field(default_factory=list)
    min_score: Optional[float] = Field(default=None, validation_alias=AliasChoices("minScore", "min_score"))


class CompareRequest(BaseModel):
    property_ids: List[Any] = Field(default_factory=list, validation_alias=AliasChoices("propertyIds", "property_ids"))
    properties: List[Dict[str, Any]] = Field(default_factory=list)
    wishlists: List[Dict[str, Any]] = Field(default_factory=list)


@router.get('/health')
async def health_check():
    """ヘルスチェックエンドポイント"""
    if not check_health():
        raise HTTPException(status_code=503, detail="Scoring tables are incomplete")
    return {'status': 'healthy'}


@router.get('/constants')
async def constants():
    """ドロップダウン表示用の定数を返す"""
    return {
        **get_display_constants(),
        "maxCompareItems": get_settings().MAX_COMPARE_ITEMS
    }


@router.post('/match')
async def match(request: MatchRequest):
    """物件とウィッシュリストのマッチ度を計算する"""
    report = compute_match(request.property, request.wishlist)
    logger.debug(f"Match calculated: {report.match_percentage:.1f}% mustHaveMet={report.must_have_met}")
    return report.to_dict()


@router.post('/comparison')
async def comparison(request: ComparisonRequest):
    """物件をマッチ度順に順位付けする"""
    min_score = request.min_score
    if min_score is None:
        min_score = get_settings().DEFAULT_MIN_SCORE
    try:
        ranked = rank_properties(request.properties, request.wishlists, min_score=min_score)
        return {
            "count": len(ranked),
            "results": [item.to_dict() for item in ranked]
        }
    except Exception as e:
        logger.error(f"Error in comparison: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post('/compare')
async def compare(request: CompareRequest):
    """選択された物件を並べて比較する"""
    try:
        result = compare_side_by_side(request.property_ids, request.properties, request.wishlists)
        return result.to_dict()
    except ValueError as ve:
        logger.warning(f"Invalid comparison request: {str(ve)}")
        raise HTTPException(status_code=422, detail=str(ve))
