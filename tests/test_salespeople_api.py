"""Tests for the salespeople endpoints."""

from sqlalchemy.exc import DBAPIError

from conftest import ADMIN, session_headers

from app.config.database import get_query_client
from app.main import app
from app.modules.salespeople.repository import SALESPERSON_KIND, SalespeopleRepository
from app.shared.database.query import QueryClient


class TestListSalespeople:
    def test_managers(self, api):
        data = api.get(
            "/api/v1/salespeople", params={"role": "manager"}, headers=session_headers(ADMIN)
        ).json()

        assert [s["APELIDO"] for s in data] == ["GERENTE NORTE", "GERENTE SUL"]

    def test_active_salespeople(self, api):
        data = api.get(
            "/api/v1/salespeople", params={"role": "salesperson"}, headers=session_headers(ADMIN)
        ).json()

        assert [s["CODVEND"] for s in data] == [7, 8]

    def test_salespeople_of_manager(self, api):
        data = api.get(
            "/api/v1/salespeople",
            params={"role": "salesperson", "managerCode": 2},
            headers=session_headers(ADMIN),
        ).json()

        assert [s["APELIDO"] for s in data] == ["MARIA"]

    def test_unknown_role_is_400(self, api):
        response = api.get(
            "/api/v1/salespeople", params={"role": "boss"}, headers=session_headers(ADMIN)
        )
        assert response.status_code == 400

    def test_missing_role_is_400(self, api):
        assert api.get("/api/v1/salespeople", headers=session_headers(ADMIN)).status_code == 400

    def test_requires_session(self, api):
        assert api.get("/api/v1/salespeople", params={"role": "manager"}).status_code == 401

    def test_requires_company(self, api):
        response = api.get(
            "/api/v1/salespeople", params={"role": "manager"}, headers=session_headers({"id": 1})
        )
        assert response.status_code == 400


class TestCreateSalesperson:
    def test_creates_with_next_code(self, api):
        response = api.post(
            "/api/v1/salespeople", json={"name": "  PEDRO  "}, headers=session_headers(ADMIN)
        )

        assert response.status_code == 200
        assert response.json() == {"code": 10, "name": "PEDRO"}

        listed = api.get(
            "/api/v1/salespeople", params={"role": "salesperson"}, headers=session_headers(ADMIN)
        ).json()
        assert "PEDRO" in [s["APELIDO"] for s in listed]

    def test_name_is_required(self, api):
        response = api.post("/api/v1/salespeople", json={"name": "   "}, headers=session_headers(ADMIN))

        assert response.status_code == 400
        assert "obligatorio" in response.json()["detail"]

    def test_name_longer_than_column_width(self, api):
        response = api.post(
            "/api/v1/salespeople", json={"name": "A" * 16}, headers=session_headers(ADMIN)
        )

        assert response.status_code == 400
        assert "15 caracteres" in response.json()["detail"]

    def test_database_width_error_becomes_user_message(self, api, engine):
        class NarrowColumnClient(QueryClient):
            def execute_write(self, sql, binds=None):
                raise DBAPIError(
                    sql, binds, Exception('ORA-12899: value too large for column "APELIDO"')
                )

        app.dependency_overrides[get_query_client] = lambda: NarrowColumnClient(engine)

        response = api.post("/api/v1/salespeople", json={"name": "ÇÃÕ"}, headers=session_headers(ADMIN))

        assert response.status_code == 400
        assert "15 caracteres" in response.json()["detail"]


class TestSalespeopleRepository:
    def test_kind_filter_uses_replica_columns(self, query_client):
        rows = SalespeopleRepository(query_client).get_by_kind(1, SALESPERSON_KIND, manager_code=1)

        assert rows == [{"CODVEND": 7, "APELIDO": "JOAO", "TIPVEND": "V", "ATIVO": "S", "CODGER": 1}]

    def test_next_code_is_per_company(self, query_client):
        repository = SalespeopleRepository(query_client)

        assert repository.next_code(1) == 10
        assert repository.next_code(2) == 1

    def test_create_marks_row_active_and_current(self, query_client):
        repository = SalespeopleRepository(query_client)

        repository.create(1, 10, "PEDRO", manager_code=2)

        rows = query_client.execute_query(
            "SELECT ATIVO, SANKHYA_ATUAL, TIPVEND, CODGER FROM AS_VENDEDORES WHERE CODVEND = 10"
        )
        assert rows == [{"ATIVO": "S", "SANKHYA_ATUAL": "S", "TIPVEND": "V", "CODGER": 2}]
        assert [r["APELIDO"] for r in repository.get_by_kind(1, SALESPERSON_KIND, 2)] == ["MARIA", "PEDRO"]
