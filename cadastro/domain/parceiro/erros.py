# cadastro/domain/parceiro/erros.py
from __future__ import annotations

from enum import Enum


class CodigoErro(str, Enum):
    """Regra violada. O valor e estavel e vai para a resposta HTTP."""

    ENTRADA_VAZIA = "ENTRADA_VAZIA"
    COMPRIMENTO_INVALIDO = "COMPRIMENTO_INVALIDO"
    NAO_NUMERICO = "NAO_NUMERICO"
    DIGITOS_REPETIDOS = "DIGITOS_REPETIDOS"
    DIGITO_VERIFICADOR_INCORRETO = "DIGITO_VERIFICADOR_INCORRETO"
    MUITO_LONGO = "MUITO_LONGO"
    MUITO_CURTO = "MUITO_CURTO"
    SEM_ARROBA = "SEM_ARROBA"
    MULTIPLAS_ARROBAS = "MULTIPLAS_ARROBAS"
    PONTOS_CONSECUTIVOS = "PONTOS_CONSECUTIVOS"
    PONTO_NA_BORDA = "PONTO_NA_BORDA"
    ARROBA_NA_BORDA = "ARROBA_NA_BORDA"
    FORMATO_INVALIDO = "FORMATO_INVALIDO"
    CAMPO_OBRIGATORIO = "CAMPO_OBRIGATORIO"


class ErroValidacao(ValueError):
    """Entrada rejeitada. Carrega o campo e a regra para a mensagem ao usuario."""

    def __init__(self, campo: str, codigo: CodigoErro, mensagem: str) -> None:
        super().__init__(mensagem)
        self.campo = campo
        self.codigo = codigo
        self.mensagem = mensagem


class CampoObrigatorioAusente(ErroValidacao):
    def __init__(self, campo: str, rotulo: str | None = None) -> None:
        super().__init__(
            campo,
            CodigoErro.CAMPO_OBRIGATORIO,
            f"{rotulo or campo} e obrigatorio",
        )


class ParceiroJaExiste(Exception):
    """Conflito de unicidade detectado pelo repositorio (CNPJ, CPF ou email)."""

    def __init__(self, campo: str, mensagem: str) -> None:
        super().__init__(mensagem)
        self.campo = campo
        self.mensagem = mensagem


class ParceiroNaoEncontrado(Exception):
    def __init__(self, parceiro_id: int) -> None:
        super().__init__(f"Parceiro {parceiro_id} nao encontrado")
        self.parceiro_id = parceiro_id
