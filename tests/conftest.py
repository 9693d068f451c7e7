# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator
from typing import Any

import duckdb
import pytest
from fastapi.testclient import TestClient

from cadastro.application.services.parceiro_service import ParceiroService
from cadastro.infrastructure.duckdb_connection import inicializar_schema
from cadastro.infrastructure.repositories.duckdb_parceiro_repo import DuckDBParceiroRepo

# Testes nunca leem configuracao local do desenvolvedor
os.environ["DUCKDB_PATH"] = ":memory:"
os.environ.pop("EMAIL_DOMINIOS_PESSOAIS_EXTRA", None)

CNPJ_VALIDO = "11.222.333/0001-81"
CNPJ_VALIDO_2 = "33.000.167/0001-01"
CPF_VALIDO = "123.456.789-09"
CPF_VALIDO_2 = "529.982.247-25"


def endereco_valido() -> dict[str, Any]:
    return {
        "cep": "01001-000",
        "uf": "sp",
        "municipio": "  Sao Paulo ",
        "logradouro": "Praca da Se",
        "numero": "100",
        "bairro": "Se",
    }


def dados_pessoa_juridica(**override: Any) -> dict[str, Any]:
    dados: dict[str, Any] = {
        "nome": "Empresa Teste LTDA",
        "cnpj": CNPJ_VALIDO,
        "email": "contato@empresa.com.br",
        **endereco_valido(),
        "telefone": "(11) 3333-4444",
    }
    dados.update(override)
    return dados


def dados_pessoa_fisica(**override: Any) -> dict[str, Any]:
    dados: dict[str, Any] = {
        "nome": "Joao da Silva",
        "cpf": CPF_VALIDO,
        "email": "joao@gmail.com",
        **endereco_valido(),
        "telefone": "(11) 98888-7777",
    }
    dados.update(override)
    return dados


def request_criacao(tipo: str = "J", **override: Any) -> dict[str, Any]:
    """Corpo JSON do POST /api/parceiros."""
    corpo: dict[str, Any] = {
        "tipo_pessoa": tipo,
        "nome": "Empresa Teste LTDA" if tipo == "J" else "Joao da Silva",
        "documento": CNPJ_VALIDO if tipo == "J" else CPF_VALIDO,
        "email": "contato@empresa.com.br" if tipo == "J" else "joao@gmail.com",
        **endereco_valido(),
        "telefone": "(11) 3333-4444",
        "complemento": None,
        "observacoes": None,
    }
    corpo.update(override)
    return corpo


@pytest.fixture()
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com schema, isolado por teste."""
    connection = duckdb.connect(":memory:")
    inicializar_schema(connection)
    yield connection
    connection.close()


@pytest.fixture()
def repo(conn: duckdb.DuckDBPyConnection) -> DuckDBParceiroRepo:
    return DuckDBParceiroRepo(conn)


@pytest.fixture()
def service(repo: DuckDBParceiroRepo) -> ParceiroService:
    return ParceiroService(parceiro_repo=repo)


@pytest.fixture()
def client(conn: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from cadastro.infrastructure import duckdb_connection
    duckdb_connection.set_connection(conn)

    from cadastro.infrastructure.config import get_settings
    get_settings.cache_clear()

    from cadastro.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def dados_pj() -> Any:
    """Fabrica de kwargs para Parceiro.criar_pessoa_juridica."""
    return dados_pessoa_juridica


@pytest.fixture()
def dados_pf() -> Any:
    """Fabrica de kwargs para Parceiro.criar_pessoa_fisica."""
    return dados_pessoa_fisica


@pytest.fixture()
def corpo_criacao() -> Any:
    """Fabrica do corpo JSON do POST /api/parceiros."""
    return request_criacao
