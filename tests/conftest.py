"""Shared test fixtures for the Sankhya sales API."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from pathlib import Path

import pytest
import requests
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from app.client.api_client import SalesApiClient, encode_session_cookie
from app.config.database import Base, get_query_client
from app.main import app
from app.shared.database import models  # noqa: F401  (registra las tablas en Base)
from app.shared.database.query import QueryClient

ADMIN = {"id": 1, "name": "Admin", "role": "administrador", "ID_EMPRESA": 1}
SELLER_JOAO = {"id": 2, "name": "Joao", "role": "vendedor", "ID_EMPRESA": 1, "codVendedor": 7}
SELLER_NO_CODE = {"id": 3, "name": "Sem Vendedor", "role": "vendedor", "ID_EMPRESA": 1}


def session_headers(user: dict) -> dict:
    """Cookie header for a logged in user."""
    return {"Cookie": f"user={encode_session_cookie(user)}"}


def seed_replica(client: QueryClient) -> None:
    """Load a small replica for companies 1 and 2."""
    products = [
        (1, 1001, "PARAFUSO SEXTAVADO 10MM", "UN", 2.5, "S"),
        (1, 1002, "PORCA SEXTAVADA 10MM", "UN", 0.8, "S"),
        (1, 2001, "ARRUELA LISA", "UN", 0.3, "S"),
        (1, 3001, "CHAVE DE BOCA", "PC", 35.0, "S"),
        (1, 3002, "PRODUTO DESATUALIZADO", "UN", 1.0, "N"),
        (2, 1001, "PARAFUSO OUTRA EMPRESA", "UN", 9.9, "S"),
    ]
    for company, code, description, unit, price, current in products:
        client.execute_write(
            """
            INSERT INTO AS_PRODUTOS (ID_SISTEMA, CODPROD, DESCRPROD, ATIVO, UNIDADE, VLRCOMERC, SANKHYA_ATUAL)
            VALUES (:company, :code, :description, 'S', :unit, :price, :current)
            """,
            {"company": company, "code": code, "description": description,
             "unit": unit, "price": price, "current": current},
        )

    partners = [
        (1, 10, "ALPHA COMERCIO", "S", 7),
        (1, 11, "BETA DISTRIBUIDORA", "S", 8),
        (1, 12, "GAMMA FORNECEDOR", "N", 7),
        (1, 13, "DELTA ATACADO", "S", 7),
    ]
    for company, code, name, customer, salesperson in partners:
        client.execute_write(
            """
            INSERT INTO AS_PARCEIROS (ID_SISTEMA, CODPARC, NOMEPARC, CLIENTE, CODVEND, SANKHYA_ATUAL)
            VALUES (:company, :code, :name, :customer, :salesperson, 'S')
            """,
            {"company": company, "code": code, "name": name,
             "customer": customer, "salesperson": salesperson},
        )

    salespeople = [
        (1, 1, "GERENTE SUL", "G", "S", None),
        (1, 2, "GERENTE NORTE", "G", "S", None),
        (1, 7, "JOAO", "V", "S", 1),
        (1, 8, "MARIA", "V", "S", 2),
        (1, 9, "INATIVO", "V", "N", 1),
    ]
    for company, code, nickname, kind, active, manager in salespeople:
        client.execute_write(
            """
            INSERT INTO AS_VENDEDORES (ID_SISTEMA, CODVEND, APELIDO, TIPVEND, ATIVO, CODGER, SANKHYA_ATUAL)
            VALUES (:company, :code, :nickname, :kind, :active, :manager, 'S')
            """,
            {"company": company, "code": code, "nickname": nickname,
             "kind": kind, "active": active, "manager": manager},
        )

    for location, quantity in ((1, 10), (2, 5.5)):
        client.execute_write(
            """
            INSERT INTO AS_ESTOQUES (ID_SISTEMA, CODPROD, CODLOCAL, ESTOQUE, RESERVADO, SANKHYA_ATUAL)
            VALUES (1, 1001, :location, :quantity, 0, 'S')
            """,
            {"location": location, "quantity": quantity},
        )

    client.execute_write(
        "INSERT INTO AS_TABELA_PRECOS (ID_SISTEMA, NUTAB, CODTAB, PERCENTUAL, SANKHYA_ATUAL) "
        "VALUES (1, 5, 1, 0, 'S')"
    )
    client.execute_write(
        "INSERT INTO AS_EXCECAO_PRECO (ID_SISTEMA, CODPROD, NUTAB, VLRVENDA, SANKHYA_ATUAL) "
        "VALUES (1, 1001, 5, 12.5, 'S')"
    )

    receivables = [
        (500, 10, 100.0, None),
        (501, 11, 200.0, None),
        (502, 10, 50.0, "2024-01-10 00:00:00"),
        (503, 13, 75.0, None),
    ]
    for number, partner, amount, settled in receivables:
        client.execute_write(
            """
            INSERT INTO AS_FINANCEIRO
                (ID_SISTEMA, NUFIN, CODPARC, VLRDESDOB, DTVENC, DTNEG, CODTIPTIT, DESDOBRAMENTO, RECDESP, DHBAIXA, SANKHYA_ATUAL)
            VALUES
                (1, :number, :partner, :amount, '2024-02-01 00:00:00', '2024-01-01 00:00:00', 'BOLETO', 1, 1, :settled, 'S')
            """,
            {"number": number, "partner": partner, "amount": amount, "settled": settled},
        )


@pytest.fixture
def engine(tmp_path: Path):
    """SQLite file database with the replica tables."""
    engine = create_engine(f"sqlite:///{tmp_path / 'replica.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def query_client(engine) -> QueryClient:
    client = QueryClient(engine)
    seed_replica(client)
    return client


@pytest.fixture
def api(query_client):
    """FastAPI test client bound to the seeded replica."""
    app.dependency_overrides[get_query_client] = lambda: query_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


class AppSession(requests.Session):
    """requests.Session that routes every call to the FastAPI test client."""

    def __init__(self, test_client: TestClient):
        super().__init__()
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None, **kwargs):
        self.calls.append((method, url))
        cookie = "; ".join(f"{c.name}={c.value}" for c in self.cookies)
        result = self.test_client.request(
            method, url, params=params, json=json,
            headers={"Cookie": cookie} if cookie else None,
        )

        response = requests.Response()
        response.status_code = result.status_code
        response._content = result.content
        response.headers.update(result.headers)
        response.url = url
        return response


@pytest.fixture
def api_client(api) -> SalesApiClient:
    """Client-side API wrapper logged in as the administrator."""
    return SalesApiClient(
        base_url="http://testserver/api/v1",
        session_user=ADMIN,
        session=AppSession(api),
    )
