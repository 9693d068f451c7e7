# cadastro/interfaces/api/dependencies.py
from collections.abc import Generator

import httpx

from cadastro.application.services.consulta_service import ConsultaService
from cadastro.application.services.parceiro_service import ParceiroService
from cadastro.infrastructure.config import get_settings
from cadastro.infrastructure.consultas.receitaws import ReceitaWsClient
from cadastro.infrastructure.consultas.viacep import ViaCepClient
from cadastro.infrastructure.duckdb_connection import get_connection
from cadastro.infrastructure.repositories.duckdb_parceiro_repo import DuckDBParceiroRepo


def get_parceiro_service() -> ParceiroService:
    return ParceiroService(
        parceiro_repo=DuckDBParceiroRepo(get_connection()),
        dominios_pessoais=get_settings().dominios_pessoais,
    )


def get_consulta_service() -> Generator[ConsultaService, None, None]:
    settings = get_settings()
    with (
        httpx.Client(timeout=settings.viacep_timeout, follow_redirects=True) as viacep_http,
        httpx.Client(timeout=settings.receitaws_timeout, follow_redirects=True) as receita_http,
    ):
        yield ConsultaService(
            viacep=ViaCepClient(viacep_http, settings.viacep_base_url),
            receitaws=ReceitaWsClient(receita_http, settings.receitaws_base_url),
        )
