"""
APIエンドポイントのテストモジュール
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from house_match.config import get_settings
from house_match.main import app

# テストデータ
GARAGE_WISHLIST = {
    "id": "wl-1",
    "name": "Family Home",
    "items": [{"name": "Garage", "importance": "mustHave"}]
}


@pytest.fixture
def client():
    """TestClientのインスタンスを提供するフィクスチャ"""
    return TestClient(app)


def test_health(client):
    """ヘルスチェックエンドポイントのテスト"""
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_constants(client):
    """表示用定数エンドポイントのテスト"""
    response = client.get("/api/constants")
    body = response.json()

    assert response.status_code == 200
    assert body["maxCompareItems"] == 3
    assert [o["value"] for o in body["importanceLevels"]] == [
        "mustHave", "veryImportant", "important", "niceToHave", "optional"
    ]
    assert body["ratingOptions"][0] == {"label": "Not Rated", "value": "not_rated"}
    assert [o["value"] for o in body["scoreFilterOptions"]] == [0, 50, 70, 80, 90]


def test_match(client):
    """マッチ度計算エンドポイントのテスト"""
    payload = {"property": {"ratings": {"Garage": "good"}}, "wishlist": GARAGE_WISHLIST}

    response = client.post("/api/match", json=payload)
    body = response.json()

    assert response.status_code == 200
    assert body["matchPercentage"] == 80
    assert body["mustHaveMet"] is True
    assert body["details"][0]["criterionId"] == "Garage"
    assert body["details"][0]["maxPoints"] == 5
    assert "invalidInput" not in body


def test_match_skips_malformed_items(client):
    """不正な項目はエラーにせずスキップする"""
    wishlist = {"items": [{"name": "Pool"}, {"name": "", "importance": "optional"}, {"name": "Garage", "importance": "mustHave"}]}
    payload = {"property": {"ratings": {"Garage": "poor"}}, "wishlist": wishlist}

    response = client.post("/api/match", json=payload)
    body = response.json()

    assert response.status_code == 200
    assert body["matchPercentage"] == 40
    assert body["mustHaveMet"] is False
    assert len(body["details"]) == 1


def test_match_without_wishlist_returns_default(client):
    """ウィッシュリストが無い場合はゼロ値の結果を返す"""
    response = client.post("/api/match", json={"property": {"ratings": {}}})

    assert response.status_code == 200
    assert response.json() == {
        "matchPercentage": 0,
        "mustHaveMet": True,
        "details": [],
        "invalidInput": True
    }


def test_comparison(client):
    """順位付けエンドポイントのテスト"""
    payload = {
        "properties": [
            {"id": "p1", "address": "1 Elm St", "wishlistId": "wl-1", "ratings": {"Garage": "good"}},
            {"id": "p2", "address": "2 Oak Ave", "wishlistId": "wl-1", "ratings": {"Garage": "average"}},
            {"id": "p3", "address": "3 Pine Rd"}
        ],
        "wishlists": [GARAGE_WISHLIST],
        "minScore": 70
    }

    response = client.post("/api/comparison", json=payload)
    body = response.json()

    assert response.status_code == 200
    assert body["count"] == 1
    assert body["results"][0]["propertyId"] == "p1"
    assert body["results"][0]["scoreText"] == "80%"


def test_compare(client):
    """並列比較エンドポイントのテスト"""
    payload = {
        "propertyIds": ["p1", "p9"],
        "properties": [{"id": "p1", "wishlistId": "wl-1", "ratings": {"Garage": "excellent"}}],
        "wishlists": [GARAGE_WISHLIST]
    }

    response = client.post("/api/compare", json=payload)
    body = response.json()

    assert response.status_code == 200
    assert body["columns"][0]["calculatedScore"] == 100
    assert body["missingIds"] == ["p9"]


def test_compare_too_many(client):
    """比較上限を超えた場合は422"""
    payload = {"propertyIds": ["a", "b", "c", "d"], "properties": [], "wishlists": []}

    response = client.post("/api/compare", json=payload)

    assert response.status_code == 422
    assert "Max 3" in response.json()["detail"]


def test_settings_are_cached():
    """設定インスタンスはキャッシュされる"""
    settings = get_settings()

    assert settings is get_settings()
    assert settings.APP_NAME == "House Match API"
    assert settings.MAX_COMPARE_ITEMS == 3


@pytest.mark.asyncio
async def test_match_async_client():
    """非同期クライアントでのマッチ度計算"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/api/match",
            json={"property": {"wishlistRatings": {"Garage": "excellent"}}, "wishlist": GARAGE_WISHLIST}
        )

    assert response.status_code == 200
    assert response.json()["matchPercentage"] == 100
