# cadastro/interfaces/api/routes/parceiro_routes.py
from fastapi import APIRouter, Depends, Query, Response

from cadastro.application.dtos.parceiro_dto import (
    AtualizarEmailRequest,
    AtualizarEnderecoRequest,
    AtualizarTelefoneRequest,
    CriarParceiroRequest,
    RespostaPadrao,
)
from cadastro.application.services.parceiro_service import ParceiroService
from cadastro.domain.parceiro.erros import ParceiroNaoEncontrado
from cadastro.interfaces.api.dependencies import get_parceiro_service

router = APIRouter()


def _ok(dados: object, mensagem: str = "Operacao realizada com sucesso") -> RespostaPadrao:
    return RespostaPadrao(sucesso=True, mensagem=mensagem, codigo="SUCCESS", dados=dados)


@router.post("/parceiros", response_model=RespostaPadrao, status_code=201)
def criar_parceiro(
    request: CriarParceiroRequest,
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.cadastrar(request), "Parceiro cadastrado com sucesso")


# Rotas fixas ANTES de /parceiros/{parceiro_id}
@router.get("/parceiros", response_model=RespostaPadrao)
def listar_parceiros(
    skip: int = Query(default=0, ge=0),
    take: int = Query(default=50, ge=1, le=100),
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.listar(skip, take))


@router.get("/parceiros/busca", response_model=RespostaPadrao)
def buscar_por_nome(
    nome: str = Query(..., min_length=1, max_length=200),
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.buscar_por_nome(nome))


@router.get("/parceiros/localizacao", response_model=RespostaPadrao)
def buscar_por_localizacao(
    uf: str = Query(..., min_length=2, max_length=2),
    municipio: str | None = Query(default=None, max_length=100),
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.buscar_por_localizacao(uf, municipio))


@router.get("/parceiros/contagem", response_model=RespostaPadrao)
def contar_parceiros(
    uf: str | None = Query(default=None, max_length=2),
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.contar(uf))


@router.get("/parceiros/{parceiro_id}", response_model=RespostaPadrao)
def obter_parceiro(
    parceiro_id: int,
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    parceiro = service.obter(parceiro_id)
    if parceiro is None:
        raise ParceiroNaoEncontrado(parceiro_id)
    return _ok(parceiro)


@router.patch("/parceiros/{parceiro_id}/email", response_model=RespostaPadrao)
def atualizar_email(
    parceiro_id: int,
    request: AtualizarEmailRequest,
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.atualizar_email(parceiro_id, request.email), "Email atualizado")


@router.patch("/parceiros/{parceiro_id}/telefone", response_model=RespostaPadrao)
def atualizar_telefone(
    parceiro_id: int,
    request: AtualizarTelefoneRequest,
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.atualizar_telefone(parceiro_id, request.telefone), "Telefone atualizado")


@router.put("/parceiros/{parceiro_id}/endereco", response_model=RespostaPadrao)
def atualizar_endereco(
    parceiro_id: int,
    request: AtualizarEnderecoRequest,
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> RespostaPadrao:
    return _ok(service.atualizar_endereco(parceiro_id, request), "Endereco atualizado")


@router.delete("/parceiros/{parceiro_id}", status_code=204)
def remover_parceiro(
    parceiro_id: int,
    service: ParceiroService = Depends(get_parceiro_service),  # noqa: B008
) -> Response:
    service.remover(parceiro_id)
    return Response(status_code=204)
