"""Tests for api.v1.routes.locales."""

import pytest


@pytest.mark.unit
class TestLocalesApi:
    """Test suite for /api/v1/locales."""

    def test_list_locales(self, client):
        response = client.get("/api/v1/locales")
        assert response.status_code == 200
        body = response.json()
        assert body["default"] == "en"
        assert [locale["code"] for locale in body["locales"]] == ["en", "fr", "ar"]
        arabic = body["locales"][2]
        assert arabic["direction"] == "rtl"
        assert arabic["is_default"] is False
        assert body["locales"][0]["is_default"] is True

    def test_not_locale_redirected(self, client):
        response = client.get("/api/v1/locales", headers={"Accept-Language": "fr"})
        assert response.status_code == 200

    def test_dictionary(self, client):
        response = client.get("/api/v1/locales/ar/dictionary")
        assert response.status_code == 200
        body = response.json()
        assert body["locale"] == "ar"
        assert body["direction"] == "rtl"
        assert body["messages"]["dashboard"]["title"] == "لوحة التحكم"
        assert set(body["messages"]) >= {"common", "navigation", "errors", "dashboard"}

    def test_dictionary_unsupported_locale(self, client):
        response = client.get("/api/v1/locales/de/dictionary")
        assert response.status_code == 404
        assert response.json() == {"detail": "Unsupported locale: de"}
