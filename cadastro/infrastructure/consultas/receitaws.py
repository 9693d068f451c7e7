# cadastro/infrastructure/consultas/receitaws.py
#
# Cliente ReceitaWS: dados cadastrais da empresa por CNPJ.
#
# Design decisions:
#   - O CNPJ passa pelo value object antes da chamada: digitos verificadores
#     errados nunca saem da maquina.
#   - ReceitaWS responde 200 com {"status": "ERROR", "message": ...} para CNPJ
#     desconhecido; isso vira ConsultaNaoEncontrada com a mensagem do servico.
#   - Logs mostram apenas a raiz do CNPJ (8 primeiros digitos).
from __future__ import annotations

from typing import Any

import httpx

from cadastro.application.dtos.consulta_dto import EmpresaDTO
from cadastro.domain.parceiro.value_objects import CNPJ
from cadastro.infrastructure.log import log

from .erros import ConsultaIndisponivel, ConsultaNaoEncontrada


def _texto(dados: dict[str, Any], chave: str) -> str:
    return str(dados.get(chave) or "")


class ReceitaWsClient:
    def __init__(self, client: httpx.Client, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    def consultar(self, cnpj_raw: str) -> EmpresaDTO:
        cnpj = CNPJ(cnpj_raw)
        log(f"ReceitaWS: consultando {cnpj.valor[:8]}****")

        try:
            response = self._client.get(f"{self._base_url}/{cnpj.valor}")
            response.raise_for_status()
            dados: dict[str, Any] = response.json()
        except httpx.HTTPError as err:
            log(f"ReceitaWS: falha na consulta ({type(err).__name__})")
            raise ConsultaIndisponivel("Erro de conexao com o servico de CNPJ") from err
        except ValueError as err:
            raise ConsultaIndisponivel("Resposta invalida do servico de CNPJ") from err

        if str(dados.get("status", "")).upper() == "ERROR":
            mensagem = _texto(dados, "message") or "CNPJ nao encontrado"
            log(f"ReceitaWS: {mensagem}")
            raise ConsultaNaoEncontrada(mensagem)

        log(f"ReceitaWS: encontrado {_texto(dados, 'nome')}")
        return EmpresaDTO(
            cnpj=cnpj.formatado,
            razao_social=_texto(dados, "nome"),
            nome_fantasia=_texto(dados, "fantasia"),
            email=_texto(dados, "email"),
            telefone=_texto(dados, "telefone"),
            cep=_texto(dados, "cep").replace("-", "").replace(".", "").strip(),
            logradouro=_texto(dados, "logradouro"),
            numero=_texto(dados, "numero"),
            complemento=_texto(dados, "complemento"),
            bairro=_texto(dados, "bairro"),
            municipio=_texto(dados, "municipio"),
            uf=_texto(dados, "uf"),
            situacao=_texto(dados, "situacao"),
        )
