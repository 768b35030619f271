"""Tests for the receivables endpoint."""

from conftest import ADMIN, SELLER_JOAO, SELLER_NO_CODE, session_headers


class TestReceivables:
    def test_filter_is_required(self, api):
        response = api.get("/api/v1/receivables", headers=session_headers(ADMIN))
        assert response.status_code == 400

    def test_admin_finds_open_titles_by_partner(self, api):
        data = api.get(
            "/api/v1/receivables", params={"partner": "alpha"}, headers=session_headers(ADMIN)
        ).json()

        assert [t["titleNumber"] for t in data["titles"]] == [500]
        assert data["titles"][0]["partner"] == "ALPHA COMERCIO"
        assert data["totalAmount"] == 100.0

    def test_title_number_filter(self, api):
        data = api.get(
            "/api/v1/receivables", params={"titleNumber": "501"}, headers=session_headers(ADMIN)
        ).json()

        assert [t["partnerCode"] for t in data["titles"]] == [11]

    def test_salesperson_sees_own_partner_titles(self, api):
        data = api.get(
            "/api/v1/receivables", params={"partner": "a"}, headers=session_headers(SELLER_JOAO)
        ).json()

        assert sorted(t["titleNumber"] for t in data["titles"]) == [500, 503]

    def test_partner_not_linked_is_403(self, api):
        response = api.get(
            "/api/v1/receivables", params={"partner": "beta"}, headers=session_headers(SELLER_JOAO)
        )

        assert response.status_code == 403
        assert response.json()["detail"]["error"] == "Parceiro no vinculado"

    def test_no_match_is_empty(self, api):
        data = api.get(
            "/api/v1/receivables", params={"partner": "zeta"}, headers=session_headers(SELLER_JOAO)
        ).json()

        assert data["titles"] == []

    def test_wildcard_partner_term_is_literal(self, api):
        data = api.get(
            "/api/v1/receivables", params={"partner": "%"}, headers=session_headers(ADMIN)
        ).json()

        assert data["titles"] == []

    def test_user_without_access_is_403(self, api):
        response = api.get(
            "/api/v1/receivables", params={"partner": "alpha"}, headers=session_headers(SELLER_NO_CODE)
        )
        assert response.status_code == 403
