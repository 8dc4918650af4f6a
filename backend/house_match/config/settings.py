"""
アプリケーション設定を管理するモジュール
"""
from functools import lru_cache
from pydantic_settings import BaseSettings

from .scoring_tables import MAX_COMPARE_ITEMS


class Settings(BaseSettings):
    """環境設定クラス"""
    # アプリケーション設定
    APP_NAME: str = "House Match API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS設定
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://localhost:19006",  # Expo Webのオリジン
        "http://127.0.0.1:8001",   # バックエンドAPI
    ]
    CORS_METHODS: list = ["GET", "POST", "OPTIONS"]
    CORS_HEADERS: list = [
        "Content-Type",
        "Accept",
        "Authorization",
        "X-Requested-With",
    ]
    CORS_CREDENTIALS: bool = True

    # 比較設定
    MAX_COMPARE_ITEMS: int = MAX_COMPARE_ITEMS
    DEFAULT_MIN_SCORE: int = 0

    class Config:
        """設定クラスの設定"""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # 未定義の環境変数を無視する


@lru_cache()
def get_settings() -> Settings:
    """
    設定インスタンスを取得（キャッシュ付き）

    Returns:
        Settings: 設定インスタンス
    """
    return Settings()
