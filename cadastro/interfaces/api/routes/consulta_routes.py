# cadastro/interfaces/api/routes/consulta_routes.py
from fastapi import APIRouter, Depends, HTTPException

from cadastro.application.dtos.consulta_dto import (
    CepDTO,
    ConsultaCompletaDTO,
    ConsultaCompletaRequest,
    EmpresaDTO,
)
from cadastro.application.services.consulta_service import ConsultaService
from cadastro.domain.parceiro.erros import ErroValidacao
from cadastro.infrastructure.consultas.erros import ConsultaIndisponivel, ConsultaNaoEncontrada
from cadastro.interfaces.api.dependencies import get_consulta_service

router = APIRouter()


@router.get("/consultas/cep/{cep}", response_model=CepDTO)
def consultar_cep(
    cep: str,
    service: ConsultaService = Depends(get_consulta_service),  # noqa: B008
) -> CepDTO:
    try:
        return service.consultar_cep(cep)
    except ErroValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
    except ConsultaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except ConsultaIndisponivel as err:
        raise HTTPException(status_code=502, detail=str(err)) from err


@router.get("/consultas/cnpj/{cnpj_raw:path}", response_model=EmpresaDTO)
def consultar_cnpj(
    cnpj_raw: str,
    service: ConsultaService = Depends(get_consulta_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        return service.consultar_cnpj(cnpj_raw)
    except ErroValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
    except ConsultaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except ConsultaIndisponivel as err:
        raise HTTPException(status_code=502, detail=str(err)) from err


@router.post("/consultas/completa", response_model=ConsultaCompletaDTO)
def consultar_completa(
    request: ConsultaCompletaRequest,
    service: ConsultaService = Depends(get_consulta_service),  # noqa: B008
) -> ConsultaCompletaDTO:
    try:
        return service.consultar_completa(request.cep, request.cnpj)
    except ErroValidacao as err:
        raise HTTPException(status_code=400, detail=err.mensagem) from err
