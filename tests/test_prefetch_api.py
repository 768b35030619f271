"""Tests for the prefetch endpoint."""

from conftest import ADMIN, SELLER_JOAO, SELLER_NO_CODE, session_headers

from app.config.database import get_query_client
from app.core.access_control import get_access_control
from app.main import app
from app.modules.prefetch.service import PrefetchService
from app.shared.database.query import QueryClient


class FailingProductsClient(QueryClient):
    """Query client whose product reads fail."""

    def execute_query(self, sql, binds=None):
        if "AS_PRODUTOS" in sql:
            raise RuntimeError("ORA-03113: end-of-file on communication channel")
        return super().execute_query(sql, binds)


class TestPrefetchSuccess:
    def test_admin_gets_all_customers_and_products(self, api):
        response = api.post("/api/v1/prefetch", headers=session_headers(ADMIN))

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["partnersCount"] == 3
        assert data["productsCount"] == 4
        assert [p["NOMEPARC"] for p in data["partnersData"]] == [
            "ALPHA COMERCIO", "BETA DISTRIBUIDORA", "DELTA ATACADO"
        ]
        assert [p["DESCRPROD"] for p in data["productsData"]] == [
            "ARRUELA LISA", "CHAVE DE BOCA", "PARAFUSO SEXTAVADO 10MM", "PORCA SEXTAVADA 10MM"
        ]

    def test_salesperson_only_sees_assigned_partners(self, api):
        response = api.post("/api/v1/prefetch", headers=session_headers(SELLER_JOAO))

        data = response.json()
        assert data["partnersCount"] == 2
        assert {p["CODVEND"] for p in data["partnersData"]} == {7}
        assert data["productsCount"] == 4

    def test_user_without_access_gets_empty_partner_list(self, api):
        response = api.post("/api/v1/prefetch", headers=session_headers(SELLER_NO_CODE))

        data = response.json()
        assert data["success"] is True
        assert data["partnersCount"] == 0
        assert data["partnersData"] == []
        assert data["productsCount"] == 4


class TestPrefetchResilience:
    def test_product_failure_degrades_to_empty_list(self, api, engine):
        app.dependency_overrides[get_query_client] = lambda: FailingProductsClient(engine)

        response = api.post("/api/v1/prefetch", headers=session_headers(ADMIN))

        data = response.json()
        assert response.status_code == 200
        assert data["success"] is True
        assert data["partnersCount"] == 3
        assert data["productsCount"] == 0
        assert data["productsData"] == []

    def test_access_policy_crash_degrades_partners_only(self, api):
        class BrokenPolicy:
            def validate_user_access(self, user):
                raise RuntimeError("access service unavailable")

        app.dependency_overrides[get_access_control] = lambda: BrokenPolicy()

        data = api.post("/api/v1/prefetch", headers=session_headers(ADMIN)).json()

        assert data["success"] is True
        assert data["partnersCount"] == 0
        assert data["productsCount"] == 4

    def test_unexpected_failure_reports_success_false(self, api, monkeypatch):
        async def explode(self, user):
            raise RuntimeError("boom")

        monkeypatch.setattr(PrefetchService, "prefetch", explode)

        response = api.post("/api/v1/prefetch", headers=session_headers(ADMIN))

        assert response.status_code == 200
        assert response.json()["success"] is False


class TestPrefetchSession:
    def test_missing_cookie_is_401(self, api):
        assert api.post("/api/v1/prefetch").status_code == 401

    def test_unparseable_cookie_is_401(self, api):
        response = api.post("/api/v1/prefetch", headers={"Cookie": "user=not-json"})
        assert response.status_code == 401

    def test_missing_company_is_400(self, api):
        response = api.post("/api/v1/prefetch", headers=session_headers({"id": 5, "name": "X"}))
        assert response.status_code == 400

    def test_missing_user_id_is_400(self, api):
        response = api.post("/api/v1/prefetch", headers=session_headers({"ID_EMPRESA": 1}))
        assert response.status_code == 400

    def test_lowercase_company_key_is_accepted(self, api):
        user = {"id": 1, "role": "administrador", "id_empresa": 1}
        response = api.post("/api/v1/prefetch", headers=session_headers(user))
        assert response.json()["productsCount"] == 4
