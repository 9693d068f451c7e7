# cadastro/application/services/consulta_service.py
from __future__ import annotations

from cadastro.domain.parceiro.erros import CodigoErro, ErroValidacao
from cadastro.infrastructure.consultas.erros import ConsultaIndisponivel, ConsultaNaoEncontrada
from cadastro.infrastructure.consultas.receitaws import ReceitaWsClient
from cadastro.infrastructure.consultas.viacep import ViaCepClient
from cadastro.infrastructure.log import log

from ..dtos.consulta_dto import CepDTO, ConsultaCompletaDTO, EmpresaDTO

_FALHAS_CONSULTA = (ErroValidacao, ConsultaNaoEncontrada, ConsultaIndisponivel)


class ConsultaService:
    """Agrega as consultas de CEP e CNPJ usadas para pre-preencher o formulario."""

    def __init__(self, viacep: ViaCepClient, receitaws: ReceitaWsClient) -> None:
        self._viacep = viacep
        self._receitaws = receitaws

    def consultar_cep(self, cep: str) -> CepDTO:
        return self._viacep.consultar(cep)

    def consultar_cnpj(self, cnpj: str) -> EmpresaDTO:
        return self._receitaws.consultar(cnpj)

    def consultar_completa(self, cep: str | None, cnpj: str | None) -> ConsultaCompletaDTO:
        """CEP e CNPJ numa chamada so. Cada falha fica no seu campo erro_*."""
        tem_cep = bool(cep and cep.strip())
        tem_cnpj = bool(cnpj and cnpj.strip())
        if not (tem_cep or tem_cnpj):
            raise ErroValidacao(
                "consulta",
                CodigoErro.CAMPO_OBRIGATORIO,
                "Pelo menos CEP ou CNPJ deve ser fornecido",
            )

        resultado = ConsultaCompletaDTO()
        if tem_cep:
            try:
                resultado.cep = self._viacep.consultar(cep or "")
            except _FALHAS_CONSULTA as err:
                resultado.erro_cep = str(err)
        if tem_cnpj:
            try:
                resultado.cnpj = self._receitaws.consultar(cnpj or "")
            except _FALHAS_CONSULTA as err:
                resultado.erro_cnpj = str(err)
        log(
            f"Consulta completa: cep={'ok' if resultado.cep else '-'} "
            f"cnpj={'ok' if resultado.cnpj else '-'}"
        )
        return resultado
