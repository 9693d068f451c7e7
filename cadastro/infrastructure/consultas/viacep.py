# cadastro/infrastructure/consultas/viacep.py
#
# Cliente ViaCEP: endereco por CEP.
#
# Design decisions:
#   - httpx.Client injetado no construtor; os testes usam httpx.MockTransport.
#   - O resultado e entrada nao confiavel: o formulario reenvia esses campos
#     e eles passam de novo pelo Endereco do dominio no cadastro.
#   - Resposta {"erro": true} do ViaCEP significa CEP inexistente.
#   - Limpeza do CEP e a mesma do Endereco (limpar_cep): o que a consulta
#     aceita, o cadastro aceita.
from __future__ import annotations

from typing import Any

import httpx

from cadastro.application.dtos.consulta_dto import CepDTO
from cadastro.domain.parceiro.value_objects import limpar_cep
from cadastro.infrastructure.log import log

from .erros import ConsultaIndisponivel, ConsultaNaoEncontrada


class ViaCepClient:
    def __init__(self, client: httpx.Client, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    def consultar(self, cep_raw: str) -> CepDTO:
        cep = limpar_cep(cep_raw)
        log(f"ViaCEP: consultando {cep[:5]}***")

        try:
            response = self._client.get(f"{self._base_url}/{cep}/json/")
            response.raise_for_status()
            dados: dict[str, Any] = response.json()
        except httpx.HTTPError as err:
            log(f"ViaCEP: falha na consulta ({type(err).__name__})")
            raise ConsultaIndisponivel("Erro de conexao com o servico de CEP") from err
        except ValueError as err:
            raise ConsultaIndisponivel("Resposta invalida do servico de CEP") from err

        if dados.get("erro") in (True, "true"):
            log(f"ViaCEP: CEP {cep[:5]}*** nao encontrado")
            raise ConsultaNaoEncontrada("CEP nao encontrado")

        retornado = str(dados.get("cep") or cep).replace("-", "")
        log(f"ViaCEP: {dados.get('localidade', '')}/{dados.get('uf', '')}")
        return CepDTO(
            cep=f"{retornado[:5]}-{retornado[5:]}" if len(retornado) == 8 else retornado,
            logradouro=str(dados.get("logradouro") or ""),
            complemento=str(dados.get("complemento") or ""),
            bairro=str(dados.get("bairro") or ""),
            localidade=str(dados.get("localidade") or ""),
            uf=str(dados.get("uf") or ""),
        )
