# cadastro/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cadastro.application.dtos.parceiro_dto import RespostaPadrao
from cadastro.domain.parceiro.erros import (
    CampoObrigatorioAusente,
    ErroValidacao,
    ParceiroJaExiste,
    ParceiroNaoEncontrado,
)
from cadastro.infrastructure.config import get_settings
from cadastro.infrastructure.log import log


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from cadastro.infrastructure.duckdb_connection import get_connection, inicializar_schema
    inicializar_schema(get_connection())  # valida conexao e schema no startup
    yield


app = FastAPI(
    title="Cadastro de Parceiros API",
    debug=get_settings().debug,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)


def _erro(status: int, mensagem: str, codigo: str, detalhes: dict[str, Any] | None = None) -> JSONResponse:
    resposta = RespostaPadrao(sucesso=False, mensagem=mensagem, codigo=codigo, detalhes=detalhes)
    return JSONResponse(status_code=status, content=resposta.model_dump(mode="json"))


@app.exception_handler(CampoObrigatorioAusente)
async def campo_obrigatorio_handler(request: Request, exc: CampoObrigatorioAusente) -> JSONResponse:
    log(f"{request.method} {request.url.path}: campo obrigatorio {exc.campo}")
    return _erro(400, exc.mensagem, "REQUIRED_FIELD_ERROR", {"campo": exc.campo})


@app.exception_handler(ErroValidacao)
async def erro_validacao_handler(request: Request, exc: ErroValidacao) -> JSONResponse:
    log(f"{request.method} {request.url.path}: {exc.campo} {exc.codigo.value}")
    return _erro(
        400, exc.mensagem, "VALIDATION_ERROR", {"campo": exc.campo, "regra": exc.codigo.value},
    )


@app.exception_handler(ParceiroJaExiste)
async def parceiro_ja_existe_handler(request: Request, exc: ParceiroJaExiste) -> JSONResponse:
    log(f"{request.method} {request.url.path}: conflito em {exc.campo}")
    return _erro(409, exc.mensagem, "PARCEIRO_JA_EXISTE", {"campo": exc.campo})


@app.exception_handler(ParceiroNaoEncontrado)
async def parceiro_nao_encontrado_handler(
    request: Request, exc: ParceiroNaoEncontrado,
) -> JSONResponse:
    return _erro(404, "Parceiro nao encontrado", "NOT_FOUND", {"id": exc.parceiro_id})


from cadastro.interfaces.api.routes.consulta_routes import router as consulta_router  # noqa: E402
from cadastro.interfaces.api.routes.parceiro_routes import router as parceiro_router  # noqa: E402

app.include_router(parceiro_router, prefix="/api")
app.include_router(consulta_router, prefix="/api")
