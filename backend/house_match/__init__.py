"""
物件とウィッシュリストのマッチ度計算パッケージ
"""
from .services.score_calculator import MatchScorer, compute_match

__all__ = [
    'MatchScorer',
    'compute_match'
]
